"""
Service for the bundled oj/acc notes.
"""

from typing import List

from kyopro.core.notes import CommandExample, extract_commands, load_notes, validate_notes

from .base import BaseService, ServiceResult


class NotesService(BaseService):
    """Load, list and check the developer notes."""

    def get_notes(self) -> ServiceResult[str]:
        try:
            return ServiceResult.ok(data=load_notes())
        except OSError as e:
            return ServiceResult.fail(f"Failed to load notes: {e}")

    def list_commands(self) -> ServiceResult[List[CommandExample]]:
        """
        Extract the command examples from the notes.

        Returns:
            ServiceResult containing the examples in document order
        """
        notes = self.get_notes()
        if not notes.success:
            return ServiceResult.fail(notes.error)

        try:
            commands = extract_commands(notes.data)
        except ValueError as e:
            return ServiceResult.fail(f"Malformed notes: {e}")

        return ServiceResult.ok(data=commands, message=f"Found {len(commands)} commands")

    def check(self) -> ServiceResult[List[str]]:
        """
        Validate the notes.

        Returns:
            ServiceResult containing the list of problems; fails when any are found
        """
        notes = self.get_notes()
        if not notes.success:
            return ServiceResult.fail(notes.error)

        problems = validate_notes(notes.data)
        if problems:
            return ServiceResult.fail(
                f"{len(problems)} problem(s) found in notes", problems=problems
            )
        return ServiceResult.ok(data=[], message="Notes are well-formed")
