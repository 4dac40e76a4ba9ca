"""Tests for the flat-file notebook adapter."""

from datetime import datetime

import pytest

from daynotes.adapters.file_notebook import FileNotebook
from daynotes.core.notes import Note


@pytest.fixture
def notebook():
    return FileNotebook()


@pytest.fixture
def sample_notes():
    return [
        Note(timestamp=datetime(2024, 9, 25, 9, 30), content="Standup"),
        Note(timestamp=datetime(2024, 9, 24, 19, 0), content="Meeting"),
        Note(timestamp=datetime(2024, 9, 24, 19, 0), content="Meeting"),
        Note(timestamp=datetime(2024, 9, 23, 8, 0), content="Привет, мир"),
        Note(timestamp=datetime(2024, 9, 26, 12, 0), content=""),
    ]


class TestCollection:
    def test_starts_empty(self, notebook):
        assert notebook.notes() == []
        assert len(notebook) == 0

    def test_add_keeps_insertion_order(self, notebook, sample_notes):
        for note in sample_notes:
            notebook.add(note)
        assert notebook.notes() == sample_notes

    def test_notes_returns_copy(self, notebook, sample_notes):
        notebook.add(sample_notes[0])
        notebook.notes().clear()
        assert len(notebook) == 1

    def test_queries_leave_stored_order_alone(self, notebook, sample_notes):
        for note in sample_notes:
            notebook.add(note)

        week = notebook.notes_for_week(datetime(2024, 9, 23))

        assert [n.timestamp for n in week] == sorted(n.timestamp for n in sample_notes)
        assert notebook.notes() == sample_notes

    def test_notes_for_day(self, notebook, sample_notes):
        for note in sample_notes:
            notebook.add(note)
        result = notebook.notes_for_day(datetime(2024, 9, 24))
        assert [str(n) for n in result] == ["2024-09-24 19:00: Meeting"] * 2


class TestSave:
    def test_writes_one_line_per_note_in_collection_order(self, notebook, sample_notes, tmp_path):
        for note in sample_notes:
            notebook.add(note)
        path = tmp_path / "notes.txt"

        notebook.save_to(path)

        assert path.read_text(encoding="utf-8") == (
            "2024-09-25 09:30;Standup\n"
            "2024-09-24 19:00;Meeting\n"
            "2024-09-24 19:00;Meeting\n"
            "2024-09-23 08:00;Привет, мир\n"
            "2024-09-26 12:00;\n"
        )

    def test_overwrites_existing_file(self, notebook, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("old contents\nmore\n", encoding="utf-8")

        notebook.save_to(path)

        assert path.read_text(encoding="utf-8") == ""

    def test_unwritable_path_raises(self, notebook, tmp_path):
        with pytest.raises(OSError):
            notebook.save_to(tmp_path / "missing-dir" / "notes.txt")


class TestLoad:
    def test_round_trip(self, notebook, sample_notes, tmp_path):
        path = tmp_path / "notes.txt"
        for note in sample_notes:
            notebook.add(note)
        notebook.save_to(path)

        reloaded = FileNotebook()
        reloaded.load_from(path)

        assert reloaded.notes() == sample_notes

    def test_replaces_existing_collection(self, notebook, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("2024-09-24 19:00;From file\n", encoding="utf-8")
        notebook.add(Note(timestamp=datetime(2020, 1, 1, 0, 0), content="In memory"))

        notebook.load_from(path)

        assert [n.content for n in notebook.notes()] == ["From file"]

    def test_skips_lines_with_wrong_field_count(self, notebook, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text(
            "2024-09-24 19:00;Meeting\n"
            "2024-09-24 20:00 no separator\n"
            "2024-09-24 21:00;two;separators\n"
            "\n",
            encoding="utf-8",
        )

        notebook.load_from(path)

        assert notebook.notes() == [Note(timestamp=datetime(2024, 9, 24, 19, 0), content="Meeting")]

    def test_bad_timestamp_is_fatal(self, notebook, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text(
            "2024-09-24 19:00;Meeting\n"
            "someday;Broken\n"
            "2024-09-25 10:00;Later\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError):
            notebook.load_from(path)

        assert notebook.notes() == []

    def test_handles_crlf_line_endings(self, notebook, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"2024-09-24 19:00;Meeting\r\n")

        notebook.load_from(path)

        assert notebook.notes()[0].content == "Meeting"

    def test_missing_file_raises_and_clears(self, notebook, tmp_path):
        notebook.add(Note(timestamp=datetime(2024, 9, 24, 19, 0), content="Meeting"))

        with pytest.raises(FileNotFoundError):
            notebook.load_from(tmp_path / "nope.txt")

        assert notebook.notes() == []

    def test_invalid_utf8_bytes_are_replaced(self, notebook, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"2024-09-24 19:00;caf\xe9\n2024-09-25 08:00;ok\n")

        notebook.load_from(path)

        assert [n.content for n in notebook.notes()] == ["caf\ufffd", "ok"]
