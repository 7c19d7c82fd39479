"""
Tests for OperationOutcome and DirectoryEntry.
"""

from shell_project.entities.directory_entry import DirectoryEntry
from shell_project.entities.outcome import ErrorKind, OperationOutcome


class TestOperationOutcome:
    def test_success(self):
        outcome = OperationOutcome.success(b"data")

        assert outcome.ok
        assert bool(outcome) is True
        assert outcome.value == b"data"
        assert outcome.error is None

    def test_success_without_value(self):
        outcome = OperationOutcome.success()

        assert outcome.ok
        assert outcome.value is None

    def test_failure(self):
        outcome = OperationOutcome.failure(ErrorKind.SAME_FILE, "./a: same file")

        assert not outcome.ok
        assert bool(outcome) is False
        assert outcome.error is ErrorKind.SAME_FILE
        assert outcome.detail == "./a: same file"
        assert outcome.value is None


class TestDirectoryEntry:
    def test_hidden(self):
        assert DirectoryEntry(".git").is_hidden
        assert DirectoryEntry(".").is_hidden
        assert not DirectoryEntry("src").is_hidden

    def test_sort_key_is_byte_order(self):
        names = ["b", "Z", "é", "a", "_"]

        ordered = sorted((DirectoryEntry(n) for n in names), key=lambda e: e.sort_key)

        assert [e.name for e in ordered] == ["Z", "_", "a", "b", "é"]

    def test_str(self):
        assert str(DirectoryEntry("file.txt", size=3)) == "file.txt"
