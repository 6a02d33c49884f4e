"""
Módulo Tools - Utilidades compartidas para ejecutar procesos
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# Código reportado cuando el ejecutable no existe (no es un exit status real)
COMMAND_NOT_FOUND_STATUS = -1

# Código reportado cuando el proceso supera el timeout
COMMAND_TIMEOUT_STATUS = -2


def run_command(
    command: List[str],
    cwd: Optional[Path] = None,
    timeout: Optional[int] = None,
) -> Tuple[int, str, str]:
    """
    Ejecuta un comando del sistema sin shell.

    Los bytes que no se pueden decodificar se reemplazan; un timeout
    devuelve COMMAND_TIMEOUT_STATUS en lugar de lanzar.

    Args:
        command: Lista con comando y argumentos
        cwd: Directorio de trabajo
        timeout: Timeout en segundos (None = sin límite)

    Returns:
        Tuple (exit_status, stdout, stderr)
    """
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False
        )
        return result.returncode, result.stdout or "", result.stderr or ""
    except subprocess.TimeoutExpired:
        logger.error("Timeout (%ss) ejecutando: %s", timeout, " ".join(command))
        return COMMAND_TIMEOUT_STATUS, "", f"Timeout ({timeout}s) ejecutando: {command[0]}"
    except FileNotFoundError:
        logger.error("Comando no encontrado: %s", command[0])
        return COMMAND_NOT_FOUND_STATUS, "", f"Comando no encontrado: {command[0]}"
