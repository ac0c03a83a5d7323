# tests/conftest.py
# shared fixtures; keeps log files out of the working tree

import pytest

from word_index.core.entry import Entry
from word_index.utils import logger_utils


@pytest.fixture(autouse=True)
def _isolated_logs(tmp_path, monkeypatch):
    path = str(tmp_path / "logs" / "test.log")
    monkeypatch.setattr(logger_utils, "DEFAULT_LOG_PATH", path)
    monkeypatch.setattr(logger_utils.log, "path", path)
    monkeypatch.setattr(logger_utils.log, "echo", False)
    return path


@pytest.fixture
def sample_entries():
    # frequencies {5, 5, 3, 1}
    return [
        Entry("pear", 3, [2, 4]),
        Entry("apple", 5, [1, 2, 3]),
        Entry("kiwi", 1, [7]),
        Entry("fig", 5, [1, 5]),
    ]
