"""Configuration management commands."""

import click


@click.group()
def config() -> None:
    """Configuration and tool dependency commands."""
    pass


@config.command("version")
def config_version() -> None:
    """Show kyopro version and environment information."""
    from kyopro.cli.progress import console
    from kyopro.cli.service_helpers import handle_result, services

    version_data = handle_result(services.util.get_version())

    console.print("\n[bold]kyopro Version Information[/bold]\n")
    console.print(f"  kyopro:   {version_data.kyopro_version}", markup=False)
    console.print(f"  Python:   {version_data.python_version.split()[0]}", markup=False)
    console.print(f"  Platform: {version_data.platform}", markup=False)
    console.print()


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    from rich.markup import escape

    from kyopro.cli.progress import console
    from kyopro.cli.service_helpers import handle_result, services
    from kyopro.core.config import SECTIONS

    config_obj = handle_result(services.config.get_config())

    console.print("\n[bold]Current Configuration[/bold]")
    if config_obj._source:
        console.print(f"[dim]Source: {escape(config_obj._source)}[/dim]\n")
    else:
        console.print("[dim]Source: defaults (no config file found)[/dim]\n")

    for section_name in SECTIONS:
        section = getattr(config_obj, section_name, {})
        if section:
            console.print(f"[bold blue]\\[{section_name}][/bold blue]")
            for key, value in section.items():
                console.print(f"  {key} = {value!r}", markup=False)
            console.print()


@config.command("init")
@click.option("--output", "-o", default="kyopro.toml", help="Output file path")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file")
def config_init(output: str, force: bool) -> None:
    """Create a default configuration file."""
    from kyopro.cli.progress import print_error, print_success
    from kyopro.cli.service_helpers import services

    result = services.config.create_default_config(output, force=force)

    if not result.success:
        print_error(result.error)
        if "already exists" in result.error:
            click.echo("Use --force to overwrite.")
        raise SystemExit(1)

    print_success(f"Created configuration file: {output}")


@config.command("path")
def config_path() -> None:
    """Show configuration file search paths."""
    from pathlib import Path

    from rich.markup import escape

    from kyopro.cli.progress import console
    from kyopro.cli.service_helpers import handle_result, services

    console.print("\n[bold]Configuration File Search Paths[/bold]\n")
    console.print("Files are merged in reverse order (earlier entries win):\n")

    active = handle_result(services.config.find_config_file())
    active_config = Path(active) if active else None

    locations = [Path(loc) for loc in handle_result(services.config.get_config_locations())]
    for i, location in enumerate(locations, 1):
        status = (
            "[green]✓ ACTIVE[/green]"
            if location == active_config
            else ("[dim]exists[/dim]" if location.exists() else "[dim]not found[/dim]")
        )
        console.print(f"  {i}. {escape(str(location))} {status}")

    console.print()


@config.command("deps")
@click.option("--install", "do_install", is_flag=True, help="Install missing tools that can be installed automatically")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
def config_deps(do_install: bool, yes: bool) -> None:
    """Check or install the external tools (cargo, cargo-expand, oj, npx).

    \b
      - cargo: builds the Rust solutions
      - cargo-expand: writes expand/main.rs for submission
      - oj: runs the samples
      - npx: runs atcoder-cli

    \b
    Examples:
        kp config deps              # Check tools
        kp config deps --install    # Install missing tools
        kp config deps --install -y # Install without confirmation
    """
    from rich.markup import escape

    from kyopro.cli.progress import console, print_info, print_warning, status
    from kyopro.cli.service_helpers import handle_result, services

    with status("Checking tools..."):
        report = handle_result(services.dependency.check_all())

    console.print("\n[bold]External Tools[/bold]")
    console.print(f"[dim]Detected OS: {report.os_type}[/dim]\n")

    for dep in report.dependencies:
        if dep.installed:
            version_str = f" (v{dep.version})" if dep.version else ""
            console.print(f"[green]✓[/green] {dep.name}{escape(version_str)}")
        else:
            console.print(f"[red]✗[/red] {dep.name} [red]not installed[/red]")
        console.print(f"  [dim]{escape(dep.description)} - {escape(dep.required_for)}[/dim]")
        if not dep.installed and dep.install_hint:
            console.print(f"  [yellow]Install: {escape(dep.install_hint)}[/yellow]")

    console.print()

    if report.all_installed:
        console.print("[green]All external tools are installed![/green]")
        return

    if not do_install:
        print_info("Run: kp config deps --install")
        return

    if not yes and not click.confirm("Install missing tools?"):
        click.echo("Aborted.")
        return

    installed = handle_result(services.dependency.install_missing())
    if installed:
        console.print(f"[green]Installed: {escape(', '.join(installed))}[/green]")
    for dep in report.missing:
        if not dep.install_command:
            print_warning(f"{dep.name} must be installed manually: {dep.install_hint}")
