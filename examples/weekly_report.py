#!/usr/bin/env python3
"""
Weekly CronoHub report example.

Prints the last seven days of tracked time for the authenticated user, or for
every member of an organization.

Run with:
    CRONOHUB_GITHUB_TOKEN=ghp_... python examples/weekly_report.py my-org [repo] [--all]
"""

import asyncio
import logging
import sys

from cronohub import (
    AggregatedReport,
    AsyncCronoHubClient,
    CronoHubError,
    configure_logging,
    default_date_range,
    format_date,
)


def print_report(report: AggregatedReport, indent: str = "") -> None:
    for day, entries in report.by_date.items():
        hours = sum(entry.hours for entry in entries)
        print(f"{indent}{format_date(day)}: {hours:g}h ({len(entries)} entries)")
    print(f"{indent}Total: {report.total:g}h")


async def main(org: str, repo: str | None, everyone: bool) -> None:
    async with AsyncCronoHubClient.from_env() as client:
        start, end = default_date_range(client.normalizer.today())
        print(f"=== {org}{'/' + repo if repo else ''}: {start} .. {end} ===\n")

        if everyone:
            report = await client.reports.generate(None, org, start, end, repo=repo)
        else:
            user = await client.users.get_authenticated()
            report = await client.reports.generate([user.login], org, start, end, repo=repo)

        if isinstance(report, AggregatedReport):
            print_report(report)
            return

        for username, slot in report.per_user.items():
            print(f"@{username}")
            if slot.report is not None:
                print_report(slot.report, indent="  ")
            else:
                print(f"  Error: {slot.error}")
        print(f"\nGrand total: {report.grand_total:g}h")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    configure_logging(level=logging.WARNING)
    args = [arg for arg in sys.argv[1:] if arg != "--all"]
    try:
        asyncio.run(main(args[0], args[1] if len(args) > 1 else None, "--all" in sys.argv))
    except CronoHubError as e:
        print(f"Error: {e.message}")
        sys.exit(1)
