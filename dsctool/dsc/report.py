"""
Presentación de los resultados del LCM (tablas Rich y JSON)
"""

import json
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dscplane.core.runtime.state import ResourceChangeRecord


def changes_required(records: List[ResourceChangeRecord]) -> bool:
    """True si algún recurso cambiaría al aplicar el documento"""
    return any(record.changed for record in records)


def changes_to_json(records: List[ResourceChangeRecord], elapsed_seconds: Optional[float] = None) -> str:
    """Serializa los registros a JSON (para integrarse con otras herramientas)"""
    payload = {
        "changes_required": changes_required(records),
        "resources": [record.to_dict() for record in records],
        "elapsed_seconds": elapsed_seconds,
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render_changes(records: List[ResourceChangeRecord], console: Console, elapsed_seconds: Optional[float] = None):
    """Muestra los registros en formato legible"""
    if not records:
        console.print("[green]✅ Sin cambios: el nodo ya cumple la configuración.[/green]")
    else:
        table = Table(title="Resultado de la prueba (-WhatIf)", show_header=True, header_style="bold")
        table.add_column("Recurso", style="cyan")
        table.add_column("Estado", width=12)
        table.add_column("Detalle", style="white")

        for record in records:
            status = "[yellow]⚠ CAMBIA[/yellow]" if record.changed else "[green]✔ OK[/green]"
            detail = escape("\n".join(record.change_log)) if record.change_log else "[dim]-[/dim]"
            table.add_row(escape(record.name), status, detail)

        console.print(table)

        pending = sum(1 for record in records if record.changed)
        if pending:
            console.print(f"\n[yellow]⚠️ {pending} recurso(s) requieren cambios.[/yellow]")
        else:
            console.print("\n[green]✅ Ningún recurso requiere cambios.[/green]")

    if elapsed_seconds is not None:
        console.print(f"[dim]Operación DSC completada en {elapsed_seconds:.3f} segundos[/dim]")
