"""Tests for kp new."""

import pytest
from click.testing import CliRunner

from kyopro.cli.cli import cli
from kyopro.core.exceptions import CommandFailedError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_acc(tmp_path):
    """Side effect for run_command that scaffolds abc300 like `acc new` does."""

    def run(command, cwd):
        if " new " in command:
            project = tmp_path / "abc300"
            (project / "a").mkdir(parents=True)
            (project / "a" / "main.rs").write_text("\ufefffn main() {}\n", encoding="utf-8")
            (project / "b").mkdir()

    return run


class TestNewCommand:
    def test_creates_project(self, runner, tmp_path, mock_shell, fake_acc):
        run_command, _ = mock_shell
        run_command.side_effect = fake_acc

        result = runner.invoke(cli, ["new", "300", "-r", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "a: url, built" in result.output
        assert "b: built" in result.output
        assert "Created abc300 (2 problems)" in result.output

        source = (tmp_path / "abc300" / "a" / "main.rs").read_text(encoding="utf-8")
        assert source.startswith("// https://atcoder.jp/contests/abc300/tasks/abc300_a\n\n\n")
        assert "\ufeff" not in source
        assert (tmp_path / "abc300" / "a" / "expand").is_dir()

        commands = [c.args[0] for c in run_command.call_args_list]
        assert commands[:2] == [
            "cargo install cargo-expand",
            "npx atcoder-cli new abc300 --template rust",
        ]
        assert commands.count("cargo build") == 2
        assert commands.count("cargo build --release") == 2

    def test_no_build_and_template(self, runner, tmp_path, mock_shell, fake_acc):
        run_command, _ = mock_shell
        run_command.side_effect = fake_acc

        result = runner.invoke(
            cli, ["new", "300", "-r", str(tmp_path), "--no-build", "-t", "rust-min"]
        )

        assert result.exit_code == 0, result.output
        assert "a: url" in result.output
        assert "b: -" in result.output
        commands = [c.args[0] for c in run_command.call_args_list]
        assert "npx atcoder-cli new abc300 --template rust-min" in commands
        assert "cargo build" not in commands

    def test_config_file_changes_tools(self, runner, tmp_path, mock_shell):
        config_file = tmp_path / "kp.toml"
        config_file.write_text(
            '[tools]\nacc = "acc"\ninstall_expand = false\n', encoding="utf-8"
        )
        run_command, _ = mock_shell

        def run(command, cwd):
            if " new " in command:
                (tmp_path / "abc300").mkdir()

        run_command.side_effect = run

        result = runner.invoke(
            cli, ["--config", str(config_file), "new", "300", "-r", str(tmp_path)]
        )

        assert result.exit_code == 0, result.output
        assert [c.args[0] for c in run_command.call_args_list] == [
            "acc new abc300 --template rust"
        ]

    def test_acc_failure(self, runner, tmp_path, mock_shell):
        run_command, _ = mock_shell
        run_command.side_effect = [None, CommandFailedError("npx atcoder-cli new", 1)]

        result = runner.invoke(cli, ["new", "300", "-r", str(tmp_path)])

        assert result.exit_code == 1
        assert "Error: Project creation command" in result.output

    def test_non_utf8_source_is_an_error(self, runner, tmp_path, mock_shell):
        run_command, _ = mock_shell

        def run(command, cwd):
            if " new " in command:
                task = tmp_path / "abc300" / "a"
                task.mkdir(parents=True)
                (task / "main.rs").write_bytes("// 入力\nfn main() {}\n".encode("cp932"))

        run_command.side_effect = run

        result = runner.invoke(cli, ["new", "300", "-r", str(tmp_path), "--no-build"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Error: Failed to read main.rs" in result.output

    def test_scalar_tools_section_falls_back_to_defaults(
        self, runner, tmp_path, isolated_config, mock_shell, fake_acc
    ):
        (isolated_config / "kyopro.toml").write_text('tools = "x"\n', encoding="utf-8")
        run_command, _ = mock_shell
        run_command.side_effect = fake_acc

        result = runner.invoke(cli, ["new", "300", "-r", str(tmp_path), "--no-build"])

        assert result.exit_code == 0, result.output
        commands = [c.args[0] for c in run_command.call_args_list]
        assert commands == [
            "cargo install cargo-expand",
            "npx atcoder-cli new abc300 --template rust",
        ]
