"""
Aplicación CLI (DSC Control Plane / dsctool).

Solo compone comandos; la lógica vive en dscplane.core y los providers en dsctool.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from dscplane import __version__
from dscplane.core.errors import CmdletError, ConfigError, ValidationError
from dscplane.core.lcm.manager import LocalConfigurationManager
from dsctool.config import DscSettings, load_settings
from dsctool.core.doctor import run_doctor
from dsctool.dsc.lcm_parser import LcmOutputParser
from dsctool.dsc.report import changes_required, changes_to_json, render_changes
from dsctool.logging_utils import configure_logging
from dsctool.powershell.cmdlet import cmdlet_factory

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CHANGES_REQUIRED = 2

app = typer.Typer(
    name="dsctool",
    help="DSC Control Plane - Prueba y aplica configuración DSC en el nodo local",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _load_settings(settings_file: Optional[Path]) -> DscSettings:
    try:
        settings = load_settings(settings_file)
    except ConfigError as e:
        console.print(f"[red]✘ {escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_FAILURE)
    configure_logging(settings.log_level, settings.log_file)
    return settings


def build_manager(settings: DscSettings, config_path: Optional[Path] = None) -> LocalConfigurationManager:
    """Compone el manager con el runner PowerShell y el parser del LCM"""
    return LocalConfigurationManager(
        node=settings.node,
        configuration_path=config_path or settings.configuration_path,
        runner_factory=cmdlet_factory(settings.powershell_executable),
        parser=LcmOutputParser(),
    )


@app.command("test")
def run_test(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Documento MOF"),
    config_path: Optional[Path] = typer.Option(None, "--config-path", "-c", help="Directorio de staging"),
    settings_file: Optional[Path] = typer.Option(None, "--settings", "-s", help="Archivo YAML de ajustes"),
    as_json: bool = typer.Option(False, "--json", help="Salida en JSON"),
):
    """
    Prueba un documento MOF sin modificar el nodo (-WhatIf)

    Código de salida: 0 sin cambios, 2 con cambios pendientes, 1 si el LCM falla.

    Ejemplo: dsctool test ./localhost.mof
    """
    settings = _load_settings(settings_file)
    manager = build_manager(settings, config_path)

    try:
        records = manager.test_configuration(document.read_bytes())
    except (CmdletError, ValidationError) as e:
        console.print(f"[red]✘ {escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_FAILURE)

    elapsed = manager.last_operation_execution_time_seconds()
    if as_json:
        typer.echo(changes_to_json(records, elapsed))
    else:
        render_changes(records, console, elapsed)

    if changes_required(records):
        raise typer.Exit(code=EXIT_CHANGES_REQUIRED)


@app.command("apply")
def run_apply(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Documento MOF"),
    config_path: Optional[Path] = typer.Option(None, "--config-path", "-c", help="Directorio de staging"),
    settings_file: Optional[Path] = typer.Option(None, "--settings", "-s", help="Archivo YAML de ajustes"),
):
    """
    Aplica un documento MOF en el nodo local

    Ejemplo: dsctool apply ./localhost.mof
    """
    settings = _load_settings(settings_file)
    manager = build_manager(settings, config_path)

    try:
        result = manager.apply_configuration(document.read_bytes())
    except (CmdletError, ValidationError) as e:
        console.print(f"[red]✘ {escape(str(e))}[/red]")
        raise typer.Exit(code=EXIT_FAILURE)

    if result.stdout.strip():
        console.print(escape(result.stdout.rstrip()))
    console.print("[green]✔ Configuración aplicada[/green]")
    elapsed = manager.last_operation_execution_time_seconds()
    if elapsed is not None:
        console.print(f"[dim]Operación DSC completada en {elapsed:.3f} segundos[/dim]")


@app.command()
def doctor(
    settings_file: Optional[Path] = typer.Option(None, "--settings", "-s", help="Archivo YAML de ajustes"),
):
    """Verifica PowerShell y el módulo PSDesiredStateConfiguration"""
    settings = _load_settings(settings_file)
    results = run_doctor(console, settings.powershell_executable)
    if not all(results.values()):
        raise typer.Exit(code=EXIT_FAILURE)


@app.command()
def version():
    """Muestra la versión de dsctool"""
    console.print(Panel.fit(
        "[bold cyan]dsctool (DSC Control Plane)[/bold cyan]\n"
        "[dim]Orquestador del Local Configuration Manager de DSC[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan"
    ))


def main():
    app()
