"""
Developer notes
===============

The notes are a Markdown cheat-sheet for oj and acc that ships with the
package. This module loads them and pulls the command examples out of
their shell code blocks so they can be listed and checked.

Usage:
    from kyopro.core.notes import extract_commands, load_notes, validate_notes

    text = load_notes()
    for example in extract_commands(text):
        print(example.tool, example.subcommand)
    assert validate_notes(text) == []
"""

import shlex
from dataclasses import dataclass, field
from importlib import resources
from typing import Iterator, List, Optional, Tuple

NOTES_RESOURCE = "notes.md"

SHELL_LANGUAGES = {"sh", "shell", "bash", "console"}

KNOWN_TOOLS = {"oj", "acc", "cargo", "cd", "pip", "npm"}

SUBCOMMANDS = {
    "oj": {
        "download", "d", "dl",
        "login", "l",
        "submit", "s",
        "test", "t",
        "generate-output", "g/o",
        "generate-input", "g/i",
        "test-reactive", "t/r",
    },
    "acc": {
        "login", "logout", "session",
        "contest", "tasks",
        "new", "n",
        "add", "a",
        "submit", "s",
        "check-oj",
        "config", "config-dir",
        "templates",
        "format",
    },
}


@dataclass
class CommandExample:
    """A command line taken from one of the notes' shell blocks."""

    tool: str
    argv: List[str]
    line: int
    heading: Optional[str] = None
    args: List[str] = field(default_factory=list)

    @property
    def subcommand(self) -> Optional[str]:
        for arg in self.args:
            if not arg.startswith("-"):
                return arg
        return None

    @property
    def text(self) -> str:
        return shlex.join(self.argv)


def load_notes() -> str:
    """Return the bundled notes document."""
    return resources.files("kyopro").joinpath("data").joinpath(NOTES_RESOURCE).read_text(encoding="utf-8")


def _scan(text: str) -> Tuple[List[Tuple[int, Optional[str], str]], List[str]]:
    """Collect shell lines from fenced blocks and report malformed fences."""
    lines: List[Tuple[int, Optional[str], str]] = []
    problems: List[str] = []
    heading = None
    fence_start = None
    fence_lang = ""

    for number, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if stripped.startswith("```"):
            if fence_start is None:
                fence_start = number
                fence_lang = stripped[3:].strip().lower()
            else:
                fence_start = None
                fence_lang = ""
            continue

        if fence_start is None:
            if stripped.startswith("#"):
                heading = stripped.lstrip("#").strip()
            continue

        if fence_lang not in SHELL_LANGUAGES:
            continue
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith("$ "):
            stripped = stripped[2:]
        lines.append((number, heading, stripped))

    if fence_start is not None:
        problems.append(f"line {fence_start}: code fence is never closed")

    return lines, problems


def _to_example(number: int, heading: Optional[str], command: str) -> CommandExample:
    argv = shlex.split(command)
    if not argv:
        raise ValueError("empty command")
    tool, args = argv[0], argv[1:]
    if tool == "npx" and args and args[0] == "atcoder-cli":
        tool, args = "acc", args[1:]
    return CommandExample(tool=tool, argv=argv, line=number, heading=heading, args=args)


def _iter_examples(text: str) -> Iterator[CommandExample]:
    lines, _ = _scan(text)
    for number, heading, command in lines:
        try:
            yield _to_example(number, heading, command)
        except ValueError as e:
            raise ValueError(f"line {number}: cannot tokenize '{command}': {e}") from e


def extract_commands(text: str) -> List[CommandExample]:
    """
    Extract every command from the shell code blocks of a notes document.

    Args:
        text: Markdown source

    Returns:
        Command examples in document order

    Raises:
        ValueError: If a command line cannot be tokenized
    """
    return list(_iter_examples(text))


def validate_notes(text: str) -> List[str]:
    """
    Check a notes document for malformed fences and commands.

    Returns:
        Human-readable problem descriptions; empty when the document is valid
    """
    lines, problems = _scan(text)

    for number, heading, command in lines:
        try:
            example = _to_example(number, heading, command)
        except ValueError as e:
            problems.append(f"line {number}: cannot tokenize '{command}': {e}")
            continue

        if example.tool not in KNOWN_TOOLS:
            problems.append(f"line {number}: unknown tool '{example.tool}'")
            continue

        known = SUBCOMMANDS.get(example.tool)
        if known is None:
            continue
        if example.subcommand is None:
            problems.append(f"line {number}: {example.tool} needs a subcommand")
        elif example.subcommand not in known:
            problems.append(
                f"line {number}: '{example.subcommand}' is not a {example.tool} subcommand"
            )

    return sorted(problems, key=_line_of)


def _line_of(problem: str) -> int:
    return int(problem.split(":", 1)[0].split()[1])
