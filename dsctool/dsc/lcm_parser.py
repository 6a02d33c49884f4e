"""
Parser de la salida '-WhatIf' del LCM
Extrae registros por recurso de la salida verbose de Start-DscConfiguration

Ejemplo de entrada:

    What if: [HOST]: LCM:  [ Start  Set      ]
    What if: [HOST]: LCM:  [ Start  Resource ]  [[File]DirectResourceAccess]
    What if: [HOST]: LCM:  [ Start  Test     ]  [[File]DirectResourceAccess]
    What if: [HOST]: LCM:  [ End    Test     ]  [[File]DirectResourceAccess]  in 0.0270 seconds.
    What if: [HOST]: LCM:  [ Start  Set      ]  [[File]DirectResourceAccess]
    What if: [HOST]:                            [[File]DirectResourceAccess] Creating file
    What if: [HOST]: LCM:  [ End    Set      ]  [[File]DirectResourceAccess]  in 0.0020 seconds.
    What if: [HOST]: LCM:  [ End    Resource ]  [[File]DirectResourceAccess]
    What if: [HOST]: LCM:  [ End    Set      ]    in  0.3050 seconds.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from dscplane.core.errors import OutputParseError
from dscplane.core.runtime.state import ResourceChangeRecord

logger = logging.getLogger(__name__)

# What if: [HOST]: LCM: [ Accion Tipo ] info
LCM_LINE = re.compile(r"^.*?:.*?:\s*LCM:\s*\[(.*?)\](.*)")
# What if: [HOST]:     info
INFO_LINE = re.compile(r"^.*?:.*?: \s+(.*)")

KNOWN_ACTIONS = ("start", "end", "skip")


@dataclass
class _ResourceState:
    """Recurso en construcción mientras se recorren las líneas"""
    name: str
    logging: bool = False
    skipped: bool = False
    logs: List[str] = field(default_factory=list)

    def to_record(self) -> ResourceChangeRecord:
        return ResourceChangeRecord(self.name, not self.skipped, tuple(self.logs))


def parse_line(line: str) -> Tuple[str, Optional[str], str]:
    """
    Divide una línea en (accion, tipo, info)

    Las líneas que no son etiquetas del LCM se devuelven como ("info", None, texto).
    """
    match = LCM_LINE.match(line)
    if match:
        operation, info = match.groups()
        parts = operation.split()
        if not parts:
            raise OutputParseError(f"Etiqueta LCM vacía en: {line.strip()!r}")
        action = parts[0].lower()
        if action not in KNOWN_ACTIONS:
            raise OutputParseError(f"Acción LCM desconocida '{parts[0]}' en: {line.strip()!r}")
        op_type = parts[1].lower() if len(parts) > 1 else None
        return action, op_type, info.strip()

    match = INFO_LINE.match(line)
    info = match.group(1) if match else line
    return "info", None, info.strip()


class LcmOutputParser:
    """Convierte la salida '-WhatIf' en ResourceChangeRecord"""

    def parse(self, lcm_output: Optional[str]) -> List[ResourceChangeRecord]:
        """
        Parsea la salida completa del LCM

        Args:
            lcm_output: Texto capturado de stdout (puede ser vacío o None)

        Returns:
            Lista de registros, en el orden en que aparecen los recursos

        Raises:
            OutputParseError: Si una etiqueta LCM está malformada
        """
        if not lcm_output:
            return []

        resources: List[_ResourceState] = []
        current: Optional[_ResourceState] = None

        for line in lcm_output.splitlines():
            if not line.strip():
                continue
            action, op_type, info = parse_line(line)

            if action == "start":
                if op_type == "resource":
                    if current is not None:
                        resources.append(current)
                    current = _ResourceState(name=info)
                elif op_type == "set" and current is not None:
                    current.logging = True
                    current.logs = [info]
                else:
                    logger.debug("Ignorando línea LCM: %s", line.strip())
            elif action == "end":
                # La última línea del set se registra si nombra al recurso
                if current is not None and current.logging and current.name in info:
                    current.logs.append(info)
                if current is not None:
                    current.logging = False
            elif action == "skip":
                if current is not None:
                    current.skipped = True
            elif current is not None and current.logging:
                current.logs.append(info)

        if current is not None:
            resources.append(current)

        return [resource.to_record() for resource in resources]


_default_parser = LcmOutputParser()


def parse(lcm_output: Optional[str]) -> List[ResourceChangeRecord]:
    """Atajo funcional sobre LcmOutputParser.parse"""
    return _default_parser.parse(lcm_output)
