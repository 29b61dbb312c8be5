"""Contest project creation command."""

import click

from .options import root_dir_option


@click.command("new")
@click.argument("contest")
@root_dir_option
@click.option("--template", "-t", default=None, help="atcoder-cli template (default: [contest].template)")
@click.option("--no-build", is_flag=True, help="Skip the initial cargo builds")
def new(contest: str, root_dir: str, template: str, no_build: bool) -> None:
    """Create a contest project and prepare every task.

    Runs atcoder-cli to scaffold the project, adds the task URL to the top
    of each main.rs and builds every task in debug and release mode.

    \b
    Examples:
        kp new 300
        kp new 300 -r ~/atcoder --template rust
    """
    from kyopro.cli.progress import console, print_success
    from kyopro.cli.service_helpers import handle_result, services

    setup = handle_result(
        services.contest.new_contest(contest, root_dir=root_dir, template=template, build=not no_build)
    )

    console.print()
    for problem in setup.problems:
        flags = []
        if problem.header_written:
            flags.append("url")
        if problem.built:
            flags.append("built")
        console.print(f"  {problem.letter}: {', '.join(flags) or '-'}", markup=False)
    print_success(f"Created {setup.project} ({len(setup.problems)} problems) at {setup.path}")
