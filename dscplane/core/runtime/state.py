"""
Modelos de estado de una invocación del LCM (agnósticos de provider).

El core NO ejecuta comandos ni lee la salida real del motor; aquí solo viven
los valores que circulan entre el manager y sus colaboradores.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ResourceChangeRecord:
    """Cambio (o no) de un recurso DSC reportado por una prueba '-WhatIf'."""
    name: str
    changed: bool
    change_log: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Permite construir con listas sin romper la inmutabilidad
        change_log = self.change_log
        if isinstance(change_log, str):
            change_log = (change_log,) if change_log else ()
        object.__setattr__(self, "change_log", tuple(change_log or ()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "changed": self.changed,
            "change_log": list(self.change_log),
        }


@dataclass(frozen=True)
class ExecutionResult:
    """
    Resultado de una ejecución externa.

    `succeeded` lo decide el runner; no siempre equivale a exit_status == 0.
    """
    exit_status: int
    stdout: str = ""
    stderr: str = ""
    succeeded: bool = False


@dataclass(frozen=True)
class OperationTiming:
    """Tiempos de una invocación completa (staging → ejecución → limpieza)."""
    started_at: datetime
    ended_at: datetime
    elapsed_seconds: float
