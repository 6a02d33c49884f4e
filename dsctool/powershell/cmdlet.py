"""
Runner PowerShell: ejecuta un script contra el nodo local.

Implementa el contrato CommandRunner de dscplane.core.infra.
"""

import logging
from typing import Any, List

from dscplane.core.errors import CmdletError
from dscplane.core.infra.contracts import RunnerFactory
from dscplane.core.lcm.classifier import normalize_stderr
from dscplane.core.runtime.state import ExecutionResult

from ..core.tools import run_command

logger = logging.getLogger(__name__)

DEFAULT_POWERSHELL = "powershell.exe"

POWERSHELL_FLAGS = [
    "-NoLogo",
    "-NonInteractive",
    "-NoProfile",
    "-ExecutionPolicy", "Unrestricted",
    "-InputFormat", "None",
]


class PowershellCmdlet:
    """Script PowerShell listo para ejecutar sobre un nodo"""

    def __init__(self, node: Any, command: str, executable: str = DEFAULT_POWERSHELL):
        self.node = node
        self.command = command
        self.executable = executable

    def command_line(self) -> List[str]:
        return [self.executable, *POWERSHELL_FLAGS, "-Command", self.command]

    def run(self) -> ExecutionResult:
        """Ejecuta el script; nunca lanza por un exit status distinto de 0."""
        logger.debug("PowerShell: ejecutando script en nodo %s", self.node)
        exit_status, stdout, stderr = run_command(self.command_line())
        return ExecutionResult(
            exit_status=exit_status,
            stdout=stdout,
            stderr=stderr,
            succeeded=exit_status == 0,
        )

    def run_checked(self) -> ExecutionResult:
        """Ejecuta el script y lanza CmdletError si no tuvo éxito."""
        result = self.run()
        if not result.succeeded:
            stderr = normalize_stderr(result.stderr)
            raise CmdletError(
                f"Powershell Cmdlet failed: {stderr}",
                stderr=stderr,
                exit_status=result.exit_status,
            )
        return result


def cmdlet_factory(executable: str = DEFAULT_POWERSHELL) -> RunnerFactory:
    """RunnerFactory que construye PowershellCmdlet con el ejecutable indicado."""

    def _factory(node: Any, command: str) -> PowershellCmdlet:
        return PowershellCmdlet(node, command, executable=executable)

    return _factory
