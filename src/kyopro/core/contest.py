"""
Contest layout and command construction.

A contest project is the directory acc creates for one contest, named
``<prefix><number>`` (for example ``abc300``). Each task gets a
subdirectory named after its letter holding the source file, a cargo
``target/`` tree and the downloaded samples in ``tests/``.
"""

from pathlib import Path
from typing import Tuple, Union

BOM = "\ufeff"
CARGO_INSTALL_EXPAND = "cargo install cargo-expand"
CARGO_BUILD_COMMANDS = ("cargo build", "cargo build --release")


def project_name(contest: str, prefix: str = "abc") -> str:
    """Directory name for a contest, e.g. ``project_name("300") == "abc300"``."""
    contest = str(contest).strip()
    if not contest:
        raise ValueError("Contest number must not be empty")
    return f"{prefix}{contest}"


def task_url(url_base: str, project: str, letter: str) -> str:
    return f"{url_base.rstrip('/')}/{project}/tasks/{project}_{letter}"


def strip_bom(text: str) -> str:
    """Remove any leading UTF-8 byte order marks."""
    return text.lstrip(BOM)


def with_url_header(content: str, url: str) -> str:
    """Prefix source code with a comment linking to the task page."""
    return f"// {url}\n\n\n{strip_bom(content)}"


def sample_paths(
    problem_dir: Union[str, Path], tests_dir: str, sample: str
) -> Tuple[Path, Path]:
    """Input and expected-output paths for sample ``sample``."""
    base = Path(problem_dir) / tests_dir
    return base / f"sample-{sample}.in", base / f"sample-{sample}.out"


def outputs_match(actual: str, expected: str) -> bool:
    """Compare program output with the expected answer, ignoring surrounding whitespace."""
    return actual.strip() == expected.strip()


def acc_new_command(acc: str, project: str, template: str) -> str:
    return f"{acc} new {project} --template {template}"


def acc_submit_command(acc: str) -> str:
    return f"{acc} submit"


def oj_test_command(oj: str, binary: str, tests_dir: str) -> str:
    return f'{oj} test -c "{binary}" -d ./{tests_dir}'
