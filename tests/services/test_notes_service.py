"""Tests for NotesService against the bundled notes."""

from kyopro.services.notes import NotesService


class TestNotesService:
    def test_get_notes(self):
        result = NotesService().get_notes()

        assert result.success
        assert result.data.startswith("# AtCoder notes")

    def test_list_commands(self):
        result = NotesService().list_commands()

        assert result.success
        tools = {c.tool for c in result.data}
        assert {"oj", "acc"} <= tools
        texts = [c.text for c in result.data]
        assert "oj test -c target/release/bin -d ./tests" in texts

    def test_bundled_notes_are_valid(self):
        result = NotesService().check()

        assert result.success, result.metadata.get("problems")
        assert result.message == "Notes are well-formed"

    def test_check_reports_problems(self, mocker):
        mocker.patch(
            "kyopro.services.notes.load_notes",
            return_value="# Notes\n\n```sh\noj frobnicate\nmake all\n```\n",
        )

        result = NotesService().check()

        assert not result.success
        assert result.error == "2 problem(s) found in notes"
        assert result.metadata["problems"] == [
            "line 4: 'frobnicate' is not a oj subcommand",
            "line 5: unknown tool 'make'",
        ]

    def test_unreadable_notes(self, mocker):
        mocker.patch("kyopro.services.notes.load_notes", side_effect=OSError("gone"))

        result = NotesService().list_commands()

        assert not result.success
        assert "Failed to load notes" in result.error
