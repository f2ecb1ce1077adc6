"""Tests for the static data table cache."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from openiban.data import clear_caches, load_table, load_yaml
from openiban.exceptions import ConfigurationError

pytestmark = pytest.mark.unit


class TestLoadTable:
    """Tests for load_table."""

    def test_loads_once(self):
        """Test that the loader runs on first access only."""
        calls = []

        def loader():
            calls.append(1)
            return {"loaded": True}

        first = load_table("example", loader)
        second = load_table("example", loader)

        assert first is second
        assert len(calls) == 1

    def test_concurrent_first_access_loads_once(self):
        """Test that threads racing on first access share a single load."""
        workers = 8
        barrier = threading.Barrier(workers)
        calls = []

        def loader():
            calls.append(1)
            time.sleep(0.05)
            return object()

        def access():
            barrier.wait()
            return load_table("contended", loader)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: access(), range(workers)))

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_clear_caches_forces_reload(self):
        """Test that clearing the cache makes the next access reload."""
        calls = []

        def loader():
            calls.append(1)
            return len(calls)

        assert load_table("reloaded", loader) == 1
        clear_caches()
        assert load_table("reloaded", loader) == 2

    def test_failed_load_is_not_cached(self):
        """Test that a loader that raises leaves nothing cached."""
        attempts = []

        def loader():
            attempts.append(1)
            if len(attempts) == 1:
                raise ConfigurationError("broken", setting="structure_file")
            return "ok"

        with pytest.raises(ConfigurationError):
            load_table("flaky", loader)

        assert load_table("flaky", loader) == "ok"


class TestLoadYaml:
    """Tests for load_yaml."""

    def test_missing_file(self, tmp_path):
        """Test that a missing file names the setting and path."""
        path = tmp_path / "absent.yml"

        with pytest.raises(ConfigurationError, match="not found") as exc_info:
            load_yaml(path, "structure_file")

        assert exc_info.value.context == {"setting": "structure_file", "path": str(path)}
        assert isinstance(exc_info.value.original_error, FileNotFoundError)
