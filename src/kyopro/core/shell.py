"""
Shell and binary execution helpers.

Commands for cargo, oj and acc are run as a single string through the
platform shell so that redirections and environment prefixes in the
command text behave the same way they do when typed by hand. Compiled
solutions are run directly, with the sample input piped to stdin.
"""

import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import click

from kyopro.core.exceptions import CommandFailedError, CommandNotFoundError
from kyopro.core.logger import get_logger

logger = get_logger(__name__)

BUILD_MODES = ("debug", "release")


@dataclass
class BinaryRun:
    """Outcome of running a compiled solution on one input."""

    stdout: str
    returncode: int
    duration: float


def is_windows() -> bool:
    return sys.platform == "win32"


def shell_argv(command: str) -> List[str]:
    """Wrap a command string for the platform shell."""
    if is_windows():
        return ["powershell", "-Command", command]
    return ["bash", "-c", command]


def run_command(command: str, cwd: Union[str, Path]) -> None:
    """
    Run a command string through the platform shell.

    stdin, stdout and stderr are inherited so tool output and prompts
    reach the terminal unchanged.

    Args:
        command: Command line to run
        cwd: Working directory

    Raises:
        CommandNotFoundError: If the shell could not be started
        CommandFailedError: If the command exits with a non-zero status
    """
    click.echo(f"cmd: '{command}' (dir: '{cwd}')")
    logger.debug(f"Running {shell_argv(command)} in {cwd}")

    try:
        completed = subprocess.run(shell_argv(command), cwd=str(cwd))
    except OSError as e:
        raise CommandNotFoundError(command, str(e)) from e

    if completed.returncode != 0:
        raise CommandFailedError(command, completed.returncode)


def run_binary(binary_path: Union[str, Path], stdin_text: str) -> BinaryRun:
    """
    Run a compiled binary directly, feeding ``stdin_text`` on stdin.

    stdout is captured and decoded as UTF-8 with undecodable bytes replaced.
    stderr is left on the terminal so debug prints stay visible.

    Raises:
        CommandNotFoundError: If the binary could not be started
    """
    click.echo(f"run bin: {binary_path}")

    start = time.perf_counter()
    try:
        completed = subprocess.run(
            [str(binary_path)],
            input=stdin_text.encode("utf-8"),
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        raise CommandNotFoundError(str(binary_path), str(e)) from e
    duration = time.perf_counter() - start

    if completed.returncode != 0:
        logger.warning(f"{binary_path} exited with status {completed.returncode}")

    return BinaryRun(
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        returncode=completed.returncode,
        duration=duration,
    )


def binary_name() -> str:
    return "bin.exe" if is_windows() else "bin"


def executable_path(problem_dir: Union[str, Path], build_mode: str) -> Path:
    """Path of the cargo-built binary for ``build_mode`` inside a problem directory."""
    if build_mode not in BUILD_MODES:
        raise ValueError(f"Unknown build mode: {build_mode}")
    return Path(problem_dir) / "target" / build_mode / binary_name()


def release_binary() -> str:
    """Release binary path relative to the problem directory, as passed to oj."""
    return f"target/release/{binary_name()}"


def expand_and_build_command() -> str:
    """
    Command that writes the macro-expanded sources and builds both profiles.

    The expansions land in expand/debug.rs and expand/main.rs.
    """
    if is_windows():
        return (
            "$Env:RUST_BACKTRACE = 1 ; "
            "cargo expand | out-file -filepath expand/debug.rs -Encoding utf8 ; "
            "cargo expand --release | out-file -filepath expand/main.rs -Encoding utf8 ; "
            "cargo build ; cargo build --release"
        )
    return (
        "RUST_BACKTRACE=1 cargo expand > expand/debug.rs && "
        "RUST_BACKTRACE=1 cargo expand --release > expand/main.rs && "
        "cargo build && cargo build --release"
    )
