"""
Clasificación de fallos de una prueba del LCM (lógica pura).

Entrada = exit status + stderr de un runner que reportó fallo;
salida = LcmFailureKind. Sin I/O ni logging.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple


# HRESULT que devuelve PowerShell cuando falta el módulo PSDesiredStateConfiguration
LCM_MODULE_NOT_INSTALLED_ERROR_CODE = 0x80131500

# El LCM falla si algún recurso no soporta el parámetro opcional -WhatIf
WHATIF_NOT_SUPPORTED_PATTERN = re.compile(
    r"A parameter cannot be found that matches parameter name 'Whatif'",
    re.IGNORECASE,
)

_WHITESPACE = re.compile(r"\s+")


class LcmFailureKind(Enum):
    """Tipo de fallo de una invocación de prueba"""
    TOOL_NOT_INSTALLED = "tool_not_installed"
    DRY_RUN_UNSUPPORTED = "dry_run_unsupported"
    FATAL = "fatal"

    @property
    def is_recoverable(self) -> bool:
        return self is not LcmFailureKind.FATAL


@dataclass(frozen=True)
class FailureRule:
    """Regla de clasificación: si matches(exit_status, stderr) → kind"""
    kind: LcmFailureKind
    matches: Callable[[Optional[int], str], bool]
    description: str


def normalize_stderr(stderr: Optional[str]) -> str:
    """Colapsa cualquier secuencia de espacios/saltos en un solo espacio."""
    return _WHITESPACE.sub(" ", stderr or "").strip()


def is_module_not_installed(exit_status: Optional[int]) -> bool:
    """
    Compara como entero sin signo de 32 bits: Windows reporta 0x80131500,
    mientras que el HRESULT con signo es -2146233088.
    """
    if exit_status is None:
        return False
    return (exit_status & 0xFFFFFFFF) == LCM_MODULE_NOT_INSTALLED_ERROR_CODE


def is_whatif_unsupported(stderr: Optional[str]) -> bool:
    return WHATIF_NOT_SUPPORTED_PATTERN.search(normalize_stderr(stderr)) is not None


# El orden es la prioridad
FAILURE_RULES: Tuple[FailureRule, ...] = (
    FailureRule(
        kind=LcmFailureKind.TOOL_NOT_INSTALLED,
        matches=lambda exit_status, stderr: is_module_not_installed(exit_status),
        description="Módulo DSC de PowerShell no instalado",
    ),
    FailureRule(
        kind=LcmFailureKind.DRY_RUN_UNSUPPORTED,
        matches=lambda exit_status, stderr: is_whatif_unsupported(stderr),
        description="Un recurso no soporta -WhatIf",
    ),
)


def classify_failure(exit_status: Optional[int], stderr: Optional[str]) -> LcmFailureKind:
    """
    Clasifica una prueba fallida.

    Args:
        exit_status: Código de salida del proceso (con o sin signo)
        stderr: Salida de error tal como la capturó el runner

    Returns:
        El primer LcmFailureKind cuya regla coincide; FATAL si ninguna
    """
    for rule in FAILURE_RULES:
        if rule.matches(exit_status, stderr or ""):
            return rule.kind
    return LcmFailureKind.FATAL
