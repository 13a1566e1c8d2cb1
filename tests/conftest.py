"""Shared fixtures for the CronoHub test suite."""

from cronohub.testing.fixtures import bogota_normalizer, mock_api, utc_normalizer  # noqa: F401
