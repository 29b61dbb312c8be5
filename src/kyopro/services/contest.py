# services/contest.py
"""
Service for creating contest projects.

`new_contest` mirrors what is done by hand at the start of a contest:
make sure cargo-expand is available, let atcoder-cli scaffold the
project from a template, stamp each task's source with its URL and
pre-build every task so the first test run is fast.
"""

from pathlib import Path
from typing import Optional, Union

from kyopro.core import contest as layout
from kyopro.core import shell
from kyopro.core.exceptions import KyoproError
from kyopro.core.logger import get_logger
from kyopro.models.contest import ContestSetup, ProblemSetup

from .base import BaseService, ServiceResult

logger = get_logger(__name__)


class ContestService(BaseService):
    """Service for `kp new`."""

    def project_dir(self, contest: str, root_dir: Optional[Union[str, Path]] = None) -> Path:
        """Directory of the contest project under ``root_dir`` (default: cwd)."""
        base = Path(root_dir) if root_dir else Path.cwd()
        return base / layout.project_name(contest, self.config.get("contest", "prefix", "abc"))

    def new_contest(
        self,
        contest: str,
        root_dir: Optional[Union[str, Path]] = None,
        template: Optional[str] = None,
        build: bool = True,
    ) -> ServiceResult[ContestSetup]:
        """
        Create a contest project with atcoder-cli and prepare every task.

        Args:
            contest: Contest number, e.g. "300"
            root_dir: Directory the project is created in (default: cwd)
            template: acc template name (default: [contest].template)
            build: Run debug and release cargo builds in each task

        Returns:
            ServiceResult containing the ContestSetup
        """
        try:
            project_dir = self.project_dir(contest, root_dir)
        except ValueError as e:
            return ServiceResult.fail(str(e))

        base_dir = project_dir.parent
        project = project_dir.name
        template = template or self.config.get("contest", "template", "rust")
        acc = self.config.get("tools", "acc", "npx atcoder-cli")

        if self.config.get("tools", "install_expand", True):
            try:
                shell.run_command(layout.CARGO_INSTALL_EXPAND, base_dir)
            except KyoproError as e:
                return ServiceResult.fail(f"Failed to install cargo-expand: {e}")

        new_cmd = layout.acc_new_command(acc, project, template)
        try:
            shell.run_command(new_cmd, base_dir)
        except KyoproError as e:
            return ServiceResult.fail(f"Project creation command '{new_cmd}' failed: {e}")

        if not self.file_repository.is_dir(project_dir):
            return ServiceResult.fail(f"Failed to read project directory ({project_dir})")

        setup = ContestSetup(project=project, path=project_dir, template=template)

        for problem_dir in self.file_repository.list_dirs(project_dir):
            try:
                problem = self._prepare_problem(project, problem_dir, build)
            except KyoproError as e:
                return ServiceResult.fail(str(e), setup=setup)
            except OSError as e:
                return ServiceResult.fail(
                    f"Failed to update {problem_dir.name} ({problem_dir}): {e}", setup=setup
                )
            setup.problems.append(problem)

        return ServiceResult.ok(
            data=setup,
            message=f"Created {project} with {len(setup.problems)} problem(s)",
        )

    def _prepare_problem(self, project: str, problem_dir: Path, build: bool) -> ProblemSetup:
        letter = problem_dir.name
        problem = ProblemSetup(letter=letter, path=problem_dir)

        source = problem_dir / self.config.get("contest", "source_file", "main.rs")
        if self.file_repository.is_file(source):
            url_base = self.config.get("contest", "url_base", "https://atcoder.jp/contests")
            problem.url = layout.task_url(url_base, project, letter)
            try:
                content = self.file_repository.read_text(source)
            except (OSError, UnicodeDecodeError) as e:
                raise KyoproError(f"Failed to read {source.name} ({source}): {e}") from e
            self.file_repository.write_text(source, layout.with_url_header(content, problem.url))
            self.file_repository.mkdir(problem_dir / "expand")
            problem.header_written = True
            logger.info(f"Added task URL header to {source}")

        if build:
            for command in layout.CARGO_BUILD_COMMANDS:
                try:
                    shell.run_command(command, problem_dir)
                except KyoproError as e:
                    raise KyoproError(
                        f"'{command}' failed in directory ({problem_dir}): {e}"
                    ) from e
            problem.built = True

        return problem
