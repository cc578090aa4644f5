"""Tests for the storage implementations."""

import pytest

from shift_tracker.models.result import ErrorKind
from shift_tracker.models.shift import FormatError, Shift
from shift_tracker.services.storage import (
    FileShiftStorage,
    InMemoryShiftStorage,
    ShiftStorageInterface,
    StorageIOError,
)


class TestFileShiftStorage:
    """Tests for the text file backend."""

    def test_missing_file_loads_empty(self, store_path):
        """Test that first run without a store is not an error."""
        assert FileShiftStorage(store_path).load() == []

    def test_save_then_load(self, store_path, sample_shifts):
        """Test that saved shifts load back in the same order."""
        storage = FileShiftStorage(store_path)
        storage.save(sample_shifts)
        assert storage.load() == sample_shifts

    def test_save_writes_one_line_per_shift(self, store_path, sample_shifts):
        """Test the on-disk layout."""
        FileShiftStorage(store_path).save(sample_shifts)
        assert store_path.read_text(encoding="utf-8") == (
            "2025-03-01,4,12.5,Saturday\n"
            "2025-01-10,8,11,Inventory\n"
            "2025-01-10,2,11,\n"
        )

    def test_save_creates_parent_directory(self, tmp_path):
        """Test that a missing data directory is created."""
        path = tmp_path / "nested" / "dir" / "shifts.csv"
        FileShiftStorage(path).save([Shift(date="2025-01-01", hours=1, hourly_rate=1)])
        assert path.exists()

    def test_save_overwrites(self, store_path, sample_shifts):
        """Test that save replaces the whole file rather than appending."""
        storage = FileShiftStorage(store_path)
        storage.save(sample_shifts)
        storage.save(sample_shifts[:1])
        assert storage.load() == sample_shifts[:1]

    def test_blank_lines_are_skipped(self, store_path):
        """Test that empty and whitespace-only lines are ignored."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text("\n2025-01-05,2,10,a\n   \n\n2025-01-06,3,10,b\n", encoding="utf-8")
        shifts = FileShiftStorage(store_path).load()
        assert [s.note for s in shifts] == ["a", "b"]

    def test_crlf_line_endings(self, store_path):
        """Test that Windows line endings do not leak into the note."""
        store_path.parent.mkdir(parents=True)
        store_path.write_bytes(b"2025-01-05,2,10,a\r\n2025-01-06,3,10,b\r\n")
        shifts = FileShiftStorage(store_path).load()
        assert [s.note for s in shifts] == ["a", "b"]

    def test_bad_record_aborts_load(self, store_path):
        """Test that one malformed line fails the whole load, reporting its physical line."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text("2025-01-05,2,10,a\n\nnot a shift\n", encoding="utf-8")
        with pytest.raises(FormatError, match="Bad CSV at line 3"):
            FileShiftStorage(store_path).load()

    def test_unreadable_store_raises_io_error(self, tmp_path):
        """Test that a store that exists but cannot be read is an IO error."""
        with pytest.raises(StorageIOError):
            FileShiftStorage(tmp_path).load()

    def test_unwritable_store_raises_io_error(self, tmp_path):
        """Test that a store that cannot be written is an IO error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(StorageIOError, match="Cannot open file for write"):
            FileShiftStorage(blocker / "shifts.csv").save([])

    def test_try_load_reports_format_error(self, store_path):
        """Test the result form of a failed load."""
        store_path.parent.mkdir(parents=True)
        store_path.write_text("2025-01-05,x,10\n", encoding="utf-8")
        result = FileShiftStorage(store_path).try_load()
        assert result.success is False
        assert result.error_kind == ErrorKind.FORMAT
        assert result.error_message == "Bad number at line 1"

    def test_try_load_reports_io_error(self, tmp_path):
        """Test the result form of an unreadable store."""
        result = FileShiftStorage(tmp_path).try_load()
        assert result.success is False
        assert result.error_kind == ErrorKind.IO

    def test_try_save_reports_count(self, store_path, sample_shifts):
        """Test the result form of a successful save."""
        result = FileShiftStorage(store_path).try_save(sample_shifts)
        assert result.success is True
        assert result.value == 3


class TestInMemoryShiftStorage:
    """Tests for the list-backed backend."""

    def test_is_a_storage(self):
        assert isinstance(InMemoryShiftStorage(), ShiftStorageInterface)

    def test_load_returns_copy(self, sample_shifts):
        """Test that callers cannot mutate the stored list through load."""
        storage = InMemoryShiftStorage(sample_shifts)
        loaded = storage.load()
        loaded.clear()
        assert storage.load() == sample_shifts

    def test_save_replaces_contents(self, sample_shifts):
        """Test full replacement and the save counter."""
        storage = InMemoryShiftStorage(sample_shifts)
        storage.save(sample_shifts[:1])
        assert storage.load() == sample_shifts[:1]
        assert storage.save_count == 1

    def test_fail_on_save(self, sample_shifts):
        """Test that a read-only store refuses to save."""
        storage = InMemoryShiftStorage(fail_on_save=True)
        with pytest.raises(StorageIOError):
            storage.save(sample_shifts)
        assert storage.try_save(sample_shifts).error_kind == ErrorKind.IO
