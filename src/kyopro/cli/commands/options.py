"""Options shared by several commands."""

import click

root_dir_option = click.option(
    "--root-dir",
    "-r",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding the contest projects (default: current directory)",
)
