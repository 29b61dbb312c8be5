"""
kp - AtCoder contest helper
"""

import click

from kyopro import __version__

from .commands import config, new, notes, problem_debug, problem_submit, problem_test


@click.group()
@click.version_option(version=__version__, prog_name="kp")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file merged over the standard locations",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(config_path: str, verbose: bool) -> None:
    """kp - AtCoder contest helper built on atcoder-cli and online-judge-tools

    Use 'kp COMMAND --help' for more information on a command.
    """
    from kyopro.cli.service_helpers import handle_result, services
    from kyopro.core.logger import set_level

    if config_path:
        config_obj = handle_result(services.config.use_config_file(config_path))
    else:
        config_obj = handle_result(services.config.get_config())

    if verbose:
        set_level("DEBUG")
    else:
        try:
            set_level(config_obj.get("logging", "level", "WARNING"))
        except ValueError as e:
            click.echo(f"Warning: {e}", err=True)


cli.add_command(new)
cli.add_command(problem_test)
cli.add_command(problem_submit)
cli.add_command(problem_debug)
cli.add_command(config)
cli.add_command(notes)


if __name__ == "__main__":
    cli()
