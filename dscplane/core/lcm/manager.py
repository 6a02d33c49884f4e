"""
Local Configuration Manager: prueba y aplica documentos DSC sobre un nodo.

Cada llamada hace el ciclo completo staging → comando → ejecución →
clasificación → limpieza. El runner y el parser se inyectan; el core no
depende de ningún provider concreto.

Precondición: un manager por configuration_path a la vez (el artefacto en
staging tiene nombre fijo). No hay locking interno.

Un parser inyectado debería lanzar OutputParseError ante salida mal formada;
ValueError y LookupError (IndexError, KeyError) se tratan igual.
"""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Union

from dscplane.core.errors import CmdletError, OutputParseError
from dscplane.core.infra.contracts import ParserLike, RunnerFactory, as_parse_function
from dscplane.core.lcm.classifier import LcmFailureKind, classify_failure, normalize_stderr
from dscplane.core.lcm.command import LcmMode, build_lcm_command
from dscplane.core.lcm.staging import (
    ConfigurationDocument,
    remove_configuration_document,
    save_configuration_document,
)
from dscplane.core.runtime.state import ExecutionResult, OperationTiming, ResourceChangeRecord

logger = logging.getLogger(__name__)

UNKNOWN_RESOURCES_NAME = "Unknown DSC Resources"
UNPARSABLE_OUTPUT_MESSAGE = "Unknown changes because LCM output was not parsable."


class LocalConfigurationManager:
    """Orquesta el LCM de un nodo en modo prueba (-WhatIf) o aplicación"""

    def __init__(
        self,
        node: Any,
        configuration_path: Union[str, Path],
        runner_factory: RunnerFactory,
        parser: ParserLike,
    ):
        self.node = node
        self.configuration_path = Path(configuration_path)
        self._runner_factory = runner_factory
        self._parse = as_parse_function(parser)
        self._last_timing: Optional[OperationTiming] = None

    @property
    def last_timing(self) -> Optional[OperationTiming]:
        """Tiempos de la última invocación completada (None si no hubo)."""
        return self._last_timing

    def test_configuration(self, configuration_document: ConfigurationDocument) -> List[ResourceChangeRecord]:
        """
        Prueba el documento sin modificar el nodo.

        Args:
            configuration_document: Contenido MOF (bytes o str)

        Returns:
            Registros por recurso; lista vacía si no hay cambios pendientes

        Raises:
            CmdletError: El motor falló por una causa no recuperable
        """
        status = self._run_configuration_cmdlet(configuration_document, LcmMode.TEST)
        what_if_output = status.stdout or ""

        if not status.succeeded:
            failure = classify_failure(status.exit_status, status.stderr)
            if failure is LcmFailureKind.TOOL_NOT_INSTALLED:
                logger.warning(
                    "No se pudo probar la configuración: puede faltar un módulo DSC de PowerShell."
                )
                what_if_output = ""
            elif failure is LcmFailureKind.DRY_RUN_UNSUPPORTED:
                logger.warning(
                    "Error al probar la configuración: un recurso no soporta 'WhatIf'."
                )
            else:
                stderr = normalize_stderr(status.stderr)
                raise CmdletError(
                    f"Powershell Cmdlet failed: {stderr}",
                    stderr=stderr,
                    exit_status=status.exit_status,
                )

        return self._configuration_update_required(what_if_output)

    def apply_configuration(self, configuration_document: ConfigurationDocument) -> ExecutionResult:
        """
        Aplica el documento. El runner lanza CmdletError si no tiene éxito;
        aquí no se reclasifica ni se parsea la salida.
        """
        return self._run_configuration_cmdlet(configuration_document, LcmMode.APPLY)

    set_configuration = apply_configuration

    def last_operation_execution_time_seconds(self) -> Optional[float]:
        if self._last_timing is None:
            return None
        return self._last_timing.elapsed_seconds

    def _run_configuration_cmdlet(
        self,
        configuration_document: ConfigurationDocument,
        mode: LcmMode,
    ) -> ExecutionResult:
        logger.debug("DSC: llamando al LCM para %s el documento de configuración.", mode.value)
        self._last_timing = None
        command = build_lcm_command(mode, self.configuration_path)

        started_at = datetime.now(timezone.utc)
        start = time.monotonic()
        try:
            save_configuration_document(self.configuration_path, configuration_document)
            cmdlet = self._runner_factory(self.node, command)
            if mode is LcmMode.APPLY:
                status = cmdlet.run_checked()
            else:
                status = cmdlet.run()
        finally:
            self._last_timing = OperationTiming(
                started_at=started_at,
                ended_at=datetime.now(timezone.utc),
                elapsed_seconds=max(0.0, time.monotonic() - start),
            )
            remove_configuration_document(self.configuration_path)
            logger.debug(
                "DSC: operación completada en %.3f segundos.",
                self._last_timing.elapsed_seconds,
            )

        logger.debug("DSC: llamada al LCM completada.")
        return status

    def _configuration_update_required(self, what_if_output: str) -> List[ResourceChangeRecord]:
        logger.debug("DSC: salida '-WhatIf' de la prueba:\n%s", what_if_output)
        try:
            return list(self._parse(what_if_output))
        except (OutputParseError, ValueError, LookupError) as e:
            logger.warning("No se pudo parsear la salida del LCM: %s", e)
            # Ante la duda se reporta cambio: nunca se asume "sin cambios"
            return [
                ResourceChangeRecord(UNKNOWN_RESOURCES_NAME, True, (UNPARSABLE_OUTPUT_MESSAGE,))
            ]
