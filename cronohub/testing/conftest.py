"""
Pytest plugin for CronoHub testing fixtures.

To use these fixtures in your tests, add this to your top-level conftest.py:

    pytest_plugins = ["cronohub.testing.conftest"]
"""

from cronohub.testing.fixtures import bogota_normalizer, mock_api, utc_normalizer

__all__ = [
    "mock_api",
    "utc_normalizer",
    "bogota_normalizer",
]
