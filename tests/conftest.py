"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from openiban.bic import set_bic_finder
from openiban.data import clear_caches
from openiban.modulus import set_modulus_checker
from openiban.utils.config import PACKAGE_DATA_DIR, reload_settings

# Sort code / branch code to BIC, per country
TEST_BICS = {
    "GB": {"200000": "BARCGB22", "601613": "NWBKGB2L"},
    "IE": {"931152": "BOFIIE2D"},
    "MT": {"44093": "MMEBMTMT"},
}


@pytest.fixture(autouse=True)
def reset_openiban_state() -> Generator[None, None, None]:
    """Restore settings, cached tables and the process-wide collaborators after each test."""
    yield
    set_bic_finder(None)
    set_modulus_checker(None)
    reload_settings()
    clear_caches()


@pytest.fixture
def bic_finder() -> Callable[[str, str], str | None]:
    """A BIC finder backed by TEST_BICS."""

    def finder(country_code: str, national_id: str) -> str | None:
        return TEST_BICS.get(country_code, {}).get(national_id)

    return finder


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A writable copy of the packaged data tables."""
    for source in PACKAGE_DATA_DIR.glob("*.yml"):
        (tmp_path / source.name).write_text(source.read_text(encoding="utf-8"), encoding="utf-8")
    return tmp_path
