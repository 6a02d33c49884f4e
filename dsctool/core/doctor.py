"""
Módulo Doctor - Verificación de PowerShell y del módulo DSC
"""

from typing import Dict, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .tools import run_command

DSC_MODULE_NAME = "PSDesiredStateConfiguration"


def _powershell(executable: str, script: str) -> Tuple[int, str, str]:
    return run_command(
        [executable, "-NoLogo", "-NonInteractive", "-NoProfile", "-Command", script],
        timeout=30,
    )


def check_powershell(executable: str) -> Tuple[bool, Optional[str]]:
    """
    Verifica que PowerShell esté disponible

    Returns:
        Tuple (is_available, version_info)
    """
    exit_status, stdout, _ = _powershell(executable, "$PSVersionTable.PSVersion.ToString()")
    if exit_status != 0:
        return False, None
    version = stdout.strip().splitlines()[0] if stdout.strip() else None
    return True, version


def check_dsc_module(executable: str) -> Tuple[bool, Optional[str]]:
    """
    Verifica que el módulo PSDesiredStateConfiguration esté instalado

    Returns:
        Tuple (is_installed, version_info)
    """
    script = (
        f"$m = Get-Module -ListAvailable -Name {DSC_MODULE_NAME} | Select-Object -First 1; "
        "if ($m) { $m.Version.ToString() } else { exit 1 }"
    )
    exit_status, stdout, _ = _powershell(executable, script)
    if exit_status != 0:
        return False, None
    return True, stdout.strip() or None


def run_doctor(console: Console, executable: str = "powershell.exe") -> Dict[str, bool]:
    """
    Ejecuta la verificación completa (doctor)

    Args:
        console: Console de Rich para salida
        executable: Ejecutable de PowerShell a verificar

    Returns:
        Dict con resultados de verificación
    """
    console.print(Panel.fit("[bold cyan]Doctor - Verificación de DSC[/bold cyan]", border_style="cyan"))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Componente", style="cyan")
    table.add_column("Estado", style="green")
    table.add_column("Versión", style="dim")

    results: Dict[str, bool] = {}

    available, version = check_powershell(executable)
    results["powershell"] = available
    table.add_row(
        executable,
        "[green]✔ Disponible[/green]" if available else "[red]✘ No encontrado[/red]",
        version or "[dim]N/A[/dim]",
    )

    module_ok = False
    module_version = None
    if available:
        module_ok, module_version = check_dsc_module(executable)
    results["dsc_module"] = module_ok
    table.add_row(
        DSC_MODULE_NAME,
        "[green]✔ Instalado[/green]" if module_ok else "[red]✘ No instalado[/red]",
        module_version or "[dim]N/A[/dim]",
    )

    console.print(table)

    if all(results.values()):
        console.print("\n[bold green]✅ El LCM puede ejecutarse en este nodo[/bold green]")
    else:
        missing = [name for name, ok in results.items() if not ok]
        console.print("\n[yellow]⚠️ Faltan requisitos para ejecutar el LCM[/yellow]")
        console.print(f"[dim]Faltan: {', '.join(missing)}[/dim]")

    return results
