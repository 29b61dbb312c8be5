"""Tests for ProblemService."""

from pathlib import Path

import pytest

from kyopro.core.exceptions import CommandFailedError, CommandNotFoundError
from kyopro.core.shell import BinaryRun
from kyopro.services.problem import DebugReporter, ProblemService

ROOT = Path("/contests")
PROBLEM_DIR = ROOT / "abc300" / "a"


class RecordingReporter(DebugReporter):
    def __init__(self):
        self.events = []

    def section(self, title):
        self.events.append(("section", title))

    def text(self, body):
        self.events.append(("text", body))

    def timing(self, seconds):
        self.events.append(("timing", seconds))


@pytest.fixture
def service(problem_repository, config) -> ProblemService:
    return ProblemService(file_repository=problem_repository, config=config)


def commands_run(run_command):
    return [c.args[0] for c in run_command.call_args_list]


class TestProblemDir:
    def test_resolves_existing(self, service):
        assert service.problem_dir("300", "a", root_dir=ROOT) == PROBLEM_DIR

    def test_missing_problem(self, service, mock_shell):
        result = service.test("300", "z", root_dir=ROOT)

        assert not result.success
        assert "Problem directory not found" in result.error
        mock_shell[0].assert_not_called()

    def test_prefix_from_config(self, service, config, problem_repository):
        config.set("contest", "prefix", "arc")
        problem_repository.mkdir(ROOT / "arc170" / "b")

        assert service.problem_dir("170", "b", root_dir=ROOT) == ROOT / "arc170" / "b"


class TestTest:
    def test_builds_then_runs_oj(self, service, mock_shell, problem_repository):
        run_command, _ = mock_shell

        result = service.test("300", "a", root_dir=ROOT)

        assert result.success, result.error
        commands = commands_run(run_command)
        assert "cargo expand" in commands[0]
        assert commands[1] == 'oj test -c "target/release/bin" -d ./tests'
        assert all(c.args[1] == PROBLEM_DIR for c in run_command.call_args_list)
        assert problem_repository.is_dir(PROBLEM_DIR / "expand")
        assert result.data.project == "abc300"
        assert result.data.letter == "a"
        assert result.data.submitted is False

    def test_build_failure(self, service, mock_shell):
        run_command, _ = mock_shell
        run_command.side_effect = CommandFailedError("cargo build", 101)

        result = service.test("300", "a", root_dir=ROOT)

        assert not result.success
        assert "cargo expand/build failed" in result.error
        assert run_command.call_count == 1

    def test_oj_failure(self, service, mock_shell):
        run_command, _ = mock_shell
        run_command.side_effect = [None, CommandFailedError("oj test", 1)]

        result = service.test("300", "a", root_dir=ROOT)

        assert not result.success
        assert result.error.startswith("oj test failed in directory")

    def test_custom_tools(self, service, config, mock_shell):
        config.set("tools", "oj", "python -m onlinejudge")
        config.set("tests", "directory", "samples")

        service.test("300", "a", root_dir=ROOT)

        assert commands_run(mock_shell[0])[1] == (
            'python -m onlinejudge test -c "target/release/bin" -d ./samples'
        )


class TestSubmit:
    def test_submits_after_tests_pass(self, service, mock_shell):
        run_command, _ = mock_shell

        result = service.submit("300", "a", root_dir=ROOT)

        assert result.success, result.error
        assert commands_run(run_command)[-1] == "npx atcoder-cli submit"
        assert result.data.submitted is True

    def test_failing_tests_abort_submission(self, service, mock_shell):
        run_command, _ = mock_shell
        run_command.side_effect = [None, CommandFailedError("oj test", 1), None]

        result = service.submit("300", "a", root_dir=ROOT)

        assert not result.success
        assert "Submission aborted" in result.error
        assert run_command.call_count == 2

    def test_missing_oj_aborts_submission(self, service, mock_shell):
        run_command, _ = mock_shell
        run_command.side_effect = [None, CommandNotFoundError("oj test", "No such file"), None]

        result = service.submit("300", "a", root_dir=ROOT)

        assert not result.success
        assert "Submission aborted" in result.error
        assert "failed to execute 'oj test'" in result.error
        assert run_command.call_count == 2

    def test_submit_failure(self, service, mock_shell):
        run_command, _ = mock_shell
        run_command.side_effect = [None, None, CommandFailedError("npx atcoder-cli submit", 1)]

        result = service.submit("300", "a", root_dir=ROOT)

        assert not result.success
        assert "npx atcoder-cli submit failed" in result.error


class TestDebug:
    def test_matching_output(self, service, mock_shell):
        _, run_binary = mock_shell
        reporter = RecordingReporter()

        result = service.debug("300", "a", root_dir=ROOT, reporter=reporter)

        assert result.success, result.error
        report = result.data
        assert report.sample == "1"
        assert report.input_text == "3 4\n"
        assert report.expected_output == "7\n"
        assert report.matched is True
        assert report.execution_time == pytest.approx(0.0123)

        binaries = [c.args for c in run_binary.call_args_list]
        assert binaries[0][0].parts[-2:] == ("debug", "bin")
        assert binaries[1][0].parts[-2:] == ("release", "bin")
        assert binaries[0][1] == "3 4\n"

        sections = [value for kind, value in reporter.events if kind == "section"]
        assert sections == ["input", "debug output", "output", "expect", "comparison result"]
        assert ("timing", pytest.approx(0.0123)) in reporter.events

    def test_mismatch_is_still_success(self, service, mock_shell):
        _, run_binary = mock_shell
        run_binary.return_value = BinaryRun(stdout="8\n", returncode=0, duration=0.1)

        result = service.debug("300", "a", root_dir=ROOT)

        assert result.success
        assert result.data.matched is False
        assert "does not match" in result.message

    def test_explicit_sample(self, service, mock_shell):
        _, run_binary = mock_shell
        run_binary.return_value = BinaryRun(stdout="2", returncode=0, duration=0.1)

        result = service.debug("300", "a", sample="2", root_dir=ROOT)

        assert result.data.sample == "2"
        assert result.data.input_text == "1 1\n"
        assert result.data.matched is True

    def test_default_sample_from_config(self, service, config, mock_shell):
        config.set("tests", "default_sample", "2")

        result = service.debug("300", "a", root_dir=ROOT)

        assert result.data.sample == "2"

    def test_missing_sample(self, service, mock_shell):
        _, run_binary = mock_shell

        result = service.debug("300", "a", sample="9", root_dir=ROOT)

        assert not result.success
        assert "sample-9.in" in result.error
        run_binary.assert_not_called()

    def test_binary_cannot_start(self, service, mock_shell):
        _, run_binary = mock_shell
        run_binary.side_effect = CommandNotFoundError("target/debug/bin", "No such file")

        result = service.debug("300", "a", root_dir=ROOT)

        assert not result.success
        assert "target/debug/bin" in result.error
