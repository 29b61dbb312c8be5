"""Developer notes command."""

import click


@click.command("notes")
@click.option("--commands", "show_commands", is_flag=True, help="List the command examples instead")
@click.option("--check", is_flag=True, help="Check the notes for malformed fences and commands")
def notes(show_commands: bool, check: bool) -> None:
    """Show the oj/acc cheat-sheet.

    \b
    Examples:
        kp notes
        kp notes --commands
        kp notes --check
    """
    from kyopro.cli.progress import console, print_error, print_success, print_table
    from kyopro.cli.service_helpers import exit_with_error, handle_result, services

    if check:
        result = services.notes.check()
        if not result.success:
            for problem in result.metadata.get("problems", []):
                print_error(problem)
            exit_with_error(result.error)
        print_success(result.message)
        return

    if show_commands:
        commands = handle_result(services.notes.list_commands())
        print_table(
            "Commands",
            ["Line", "Tool", "Subcommand", "Command", "Section"],
            [
                [c.line, c.tool, c.subcommand or "", c.text, c.heading or ""]
                for c in commands
            ],
        )
        return

    from rich.markdown import Markdown

    console.print(Markdown(handle_result(services.notes.get_notes())))
