# services/problem.py
"""
Service for per-problem actions: test, submit and debug.

Every action starts by regenerating the macro-expanded sources and
building both cargo profiles in the problem directory, so what oj tests
and what acc submits always match the current source.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from kyopro.core import contest as layout
from kyopro.core import shell
from kyopro.core.exceptions import (
    KyoproError,
    ProblemNotFoundError,
    SampleNotFoundError,
)
from kyopro.core.logger import get_logger
from kyopro.models.problem import DebugReport, ProblemRun

from .base import BaseService, ServiceResult

logger = get_logger(__name__)


class DebugReporter:
    """
    Receives the sections of a debug run as they happen.

    The default implementation discards everything; the CLI subclasses it
    to print banners so that debug-binary stderr lands under the right
    heading.
    """

    def section(self, title: str) -> None:
        pass

    def text(self, body: str) -> None:
        pass

    def timing(self, seconds: float) -> None:
        pass


class ProblemService(BaseService):
    """Service for `kp test`, `kp submit` and `kp debug`."""

    def problem_dir(
        self,
        contest: str,
        letter: str,
        root_dir: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Resolve and check the directory of one task.

        Raises:
            ProblemNotFoundError: If the directory does not exist
        """
        base = Path(root_dir) if root_dir else Path.cwd()
        project = layout.project_name(contest, self.config.get("contest", "prefix", "abc"))
        path = base / project / letter
        if not self.file_repository.is_dir(path):
            raise ProblemNotFoundError(path)
        return path

    def build(self, problem_dir: Path) -> None:
        """Expand macros into expand/ and build debug and release binaries."""
        self.file_repository.mkdir(problem_dir / "expand")
        try:
            shell.run_command(shell.expand_and_build_command(), problem_dir)
        except KyoproError as e:
            raise KyoproError(f"cargo expand/build failed in directory ({problem_dir}): {e}") from e

    def _run_samples(self, problem_dir: Path) -> None:
        oj = self.config.get("tools", "oj", "oj")
        tests_dir = self.config.get("tests", "directory", "tests")
        shell.run_command(
            layout.oj_test_command(oj, shell.release_binary(), tests_dir), problem_dir
        )

    def test(
        self,
        contest: str,
        letter: str,
        root_dir: Optional[Union[str, Path]] = None,
    ) -> ServiceResult[ProblemRun]:
        """
        Build the task and run oj against its samples.

        Returns:
            ServiceResult containing the ProblemRun
        """
        try:
            problem_dir = self.problem_dir(contest, letter, root_dir)
            self.build(problem_dir)
            try:
                self._run_samples(problem_dir)
            except KyoproError as e:
                raise KyoproError(f"oj test failed in directory ({problem_dir}): {e}") from e
        except (KyoproError, ValueError) as e:
            return ServiceResult.fail(str(e))

        return ServiceResult.ok(
            data=ProblemRun(project=problem_dir.parent.name, letter=letter, path=problem_dir),
            message="All samples passed",
        )

    def submit(
        self,
        contest: str,
        letter: str,
        root_dir: Optional[Union[str, Path]] = None,
    ) -> ServiceResult[ProblemRun]:
        """
        Build, run the samples and submit with atcoder-cli if they all pass.

        Returns:
            ServiceResult containing the ProblemRun with submitted=True
        """
        acc = self.config.get("tools", "acc", "npx atcoder-cli")
        try:
            problem_dir = self.problem_dir(contest, letter, root_dir)
            self.build(problem_dir)
            try:
                self._run_samples(problem_dir)
            except KyoproError as e:
                raise KyoproError(
                    f"Tests failed in directory ({problem_dir}). Submission aborted. {e}"
                ) from e

            submit_cmd = layout.acc_submit_command(acc)
            try:
                shell.run_command(submit_cmd, problem_dir)
            except KyoproError as e:
                raise KyoproError(
                    f"{submit_cmd} failed in directory ({problem_dir}): {e}"
                ) from e
        except (KyoproError, ValueError) as e:
            return ServiceResult.fail(str(e))

        return ServiceResult.ok(
            data=ProblemRun(
                project=problem_dir.parent.name,
                letter=letter,
                path=problem_dir,
                submitted=True,
            ),
            message="Submitted",
        )

    def read_sample(self, problem_dir: Path, sample: str) -> Tuple[str, str]:
        """
        Read a sample's input and expected output with any BOM removed.

        Raises:
            SampleNotFoundError: If either file is missing
        """
        tests_dir = self.config.get("tests", "directory", "tests")
        in_path, out_path = layout.sample_paths(problem_dir, tests_dir, sample)
        for path in (in_path, out_path):
            if not self.file_repository.is_file(path):
                raise SampleNotFoundError(path)
        return (
            layout.strip_bom(self.file_repository.read_text(in_path)),
            layout.strip_bom(self.file_repository.read_text(out_path)),
        )

    def debug(
        self,
        contest: str,
        letter: str,
        sample: Optional[str] = None,
        root_dir: Optional[Union[str, Path]] = None,
        reporter: Optional[DebugReporter] = None,
    ) -> ServiceResult[DebugReport]:
        """
        Run one sample through the debug and release builds and compare.

        Args:
            contest: Contest number
            letter: Task directory name
            sample: Sample number (default: [tests].default_sample)
            root_dir: Directory holding the contest project (default: cwd)
            reporter: Receives each section while the run is in progress

        Returns:
            ServiceResult containing the DebugReport; a mismatch is still a
            successful result with matched=False
        """
        reporter = reporter or DebugReporter()
        sample = str(sample or self.config.get("tests", "default_sample", "1"))

        try:
            problem_dir = self.problem_dir(contest, letter, root_dir)
            self.build(problem_dir)
            input_text, expected = self.read_sample(problem_dir, sample)

            reporter.section("input")
            reporter.text(input_text)

            reporter.section("debug output")
            debug_run = shell.run_binary(shell.executable_path(problem_dir, "debug"), input_text)
            reporter.text(debug_run.stdout)

            reporter.section("output")
            release_run = shell.run_binary(
                shell.executable_path(problem_dir, "release"), input_text
            )
            reporter.text(release_run.stdout)
            reporter.timing(release_run.duration)

            reporter.section("expect")
            reporter.text(expected)
        except (KyoproError, ValueError) as e:
            return ServiceResult.fail(str(e))

        matched = layout.outputs_match(release_run.stdout, expected)
        reporter.section("comparison result")
        logger.debug(f"{letter} sample {sample}: matched={matched}")

        report = DebugReport(
            project=problem_dir.parent.name,
            letter=letter,
            sample=sample,
            input_text=input_text,
            debug_output=debug_run.stdout,
            release_output=release_run.stdout,
            expected_output=expected,
            execution_time=release_run.duration,
            matched=matched,
            debug_returncode=debug_run.returncode,
            release_returncode=release_run.returncode,
        )
        return ServiceResult.ok(
            data=report,
            message="Output matches expected output." if matched
            else "Output does not match expected output.",
        )
