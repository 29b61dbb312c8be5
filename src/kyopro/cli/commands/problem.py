"""Per-problem commands: test, submit and debug."""

import click
from rich.text import Text

from kyopro.core.highlight import HighlightMode, bg, make_console
from kyopro.services.problem import DebugReporter

from .options import root_dir_option

BANNER_WIDTH = 20


class ConsoleDebugReporter(DebugReporter):
    """Prints debug sections as coloured banners."""

    def __init__(self, mode: HighlightMode) -> None:
        self.mode = mode
        self.console = make_console(mode)

    def section(self, title: str) -> None:
        rule = "=" * BANNER_WIDTH
        self.console.print(Text(f"{rule} [{title}] {rule}", style=bg("green", self.mode)))

    def text(self, body: str) -> None:
        self.console.print(body, markup=False, highlight=False, soft_wrap=True)

    def timing(self, seconds: float) -> None:
        self.console.print(
            Text(f"Execution Time: {seconds * 1000:.3f}ms", style=bg("orange", self.mode))
        )

    def verdict(self, matched: bool) -> None:
        if matched:
            line = Text("[✅ Complete] Output matches expected output.", style=bg("lightblue", self.mode))
        else:
            line = Text("[❌ Failed] Output does not match expected output.", style=bg("red", self.mode))
        self.console.print(line)


@click.command("test")
@click.argument("contest")
@click.argument("problem")
@root_dir_option
def problem_test(contest: str, problem: str, root_dir: str) -> None:
    """Build a task and run oj against its samples.

    \b
    Examples:
        kp test 300 a
    """
    from kyopro.cli.progress import print_success
    from kyopro.cli.service_helpers import handle_result, services

    run = handle_result(services.problem.test(contest, problem, root_dir=root_dir))
    print_success(f"{run.project}/{run.letter}: all samples passed")


@click.command("submit")
@click.argument("contest")
@click.argument("problem")
@root_dir_option
def problem_submit(contest: str, problem: str, root_dir: str) -> None:
    """Build, test and submit a task with atcoder-cli.

    Nothing is submitted unless every sample passes.

    \b
    Examples:
        kp submit 300 a
    """
    from kyopro.cli.progress import print_success
    from kyopro.cli.service_helpers import handle_result, services

    run = handle_result(services.problem.submit(contest, problem, root_dir=root_dir))
    print_success(f"{run.project}/{run.letter}: submitted")


@click.command("debug")
@click.argument("contest")
@click.argument("problem")
@click.argument("sample", required=False)
@root_dir_option
@click.option(
    "--color",
    type=click.Choice(["false", "16", "256", "true"]),
    default=None,
    help="Colour mode (default: [display].color)",
)
def problem_debug(contest: str, problem: str, sample: str, root_dir: str, color: str) -> None:
    """Run one sample through the debug and release builds.

    Shows the input, the debug build's output (with its stderr), the
    release build's output and timing, the expected output and whether
    they match. SAMPLE defaults to [tests].default_sample.

    \b
    Examples:
        kp debug 300 a
        kp debug 300 a 2 --color 256
    """
    from kyopro.cli.service_helpers import handle_result, services

    if color is None:
        color = handle_result(services.config.get_config()).get("display", "color", "true")
    reporter = ConsoleDebugReporter(HighlightMode.from_str(color))

    report = handle_result(
        services.problem.debug(contest, problem, sample=sample, root_dir=root_dir, reporter=reporter)
    )
    reporter.verdict(report.matched)
