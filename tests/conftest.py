# tests/conftest.py
"""
Fixtures compartidos para los tests del DSC Control Plane.

Proveen dobles de los colaboradores del LCM (runner y parser) para
ejercitar el manager sin PowerShell ni un LCM real:

- FakeLcm: RunnerFactory que registra cada invocación, comprueba el
  artefacto en staging en el momento de ejecutar y devuelve un
  ExecutionResult fijo (o lanza la excepción configurada).
- RecordingParser: parser que registra las entradas y devuelve registros
  fijos (o lanza OutputParseError).

Invariantes:
    - Ningún fixture ejecuta procesos reales
    - El único I/O es el directorio de staging dentro de tmp_path
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional

import pytest

from dscplane.core.errors import CmdletError
from dscplane.core.lcm.classifier import normalize_stderr
from dscplane.core.lcm.staging import configuration_document_path
from dscplane.core.runtime.state import ExecutionResult, ResourceChangeRecord


class FakeCmdlet:
    def __init__(self, owner: "FakeLcm", node: Any, command: str):
        self.owner = owner
        self.node = node
        self.command = command

    def run(self) -> ExecutionResult:
        return self._execute("run")

    def run_checked(self) -> ExecutionResult:
        result = self._execute("run_checked")
        if not result.succeeded:
            stderr = normalize_stderr(result.stderr)
            raise CmdletError(f"Powershell Cmdlet failed: {stderr}", stderr=stderr, exit_status=result.exit_status)
        return result

    def _execute(self, mode: str) -> ExecutionResult:
        self.owner.calls.append((self.node, self.command, mode))
        staged = configuration_document_path(self.owner.configuration_path)
        self.owner.staged_contents.append(staged.read_bytes() if staged.exists() else None)
        if self.owner.on_run is not None:
            self.owner.on_run()
        if self.owner.error is not None:
            raise self.owner.error
        return self.owner.result


class FakeLcm:
    """RunnerFactory doble"""

    def __init__(
        self,
        configuration_path: Path,
        result: Optional[ExecutionResult] = None,
        error: Optional[BaseException] = None,
        on_run: Optional[Callable[[], None]] = None,
    ):
        self.configuration_path = configuration_path
        self.result = result or ExecutionResult(exit_status=0, stdout="", stderr="", succeeded=True)
        self.error = error
        self.on_run = on_run
        self.calls: List[tuple] = []
        self.staged_contents: List[Optional[bytes]] = []

    def __call__(self, node: Any, command: str) -> FakeCmdlet:
        return FakeCmdlet(self, node, command)


class RecordingParser:
    """Parser doble"""

    def __init__(self, records: Optional[List[ResourceChangeRecord]] = None, error: Optional[Exception] = None):
        self.records = records or []
        self.error = error
        self.inputs: List[str] = []

    def parse(self, output: str) -> List[ResourceChangeRecord]:
        self.inputs.append(output)
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def config_dir(tmp_path) -> Path:
    """Directorio de staging (aún no existe: el manager debe crearlo)."""
    return tmp_path / "dsc" / "staging"


@pytest.fixture
def fake_lcm(config_dir) -> Callable[..., FakeLcm]:
    def _make(**kwargs) -> FakeLcm:
        return FakeLcm(config_dir, **kwargs)
    return _make


@pytest.fixture
def recording_parser() -> Callable[..., RecordingParser]:
    return RecordingParser


@pytest.fixture
def restore_root_logging():
    """Restaura los handlers del logger raíz tras tests que configuran logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
