"""
Construcción del script PowerShell que invoca Start-DscConfiguration.

Lógica pura y determinista: (modo, ruta) → texto del comando.
"""

from enum import Enum
from pathlib import Path
from typing import Union

from dscplane.core.errors import ValidationError


class LcmMode(str, Enum):
    """Modo de invocación del LCM"""
    TEST = "test"    # -WhatIf, no modifica el nodo
    APPLY = "apply"  # aplica el documento


# Si el motor rechaza -WhatIf, $? es falso y el proceso termina con exit 1
TEST_ONLY_PARAMETERS = "-whatif; if (! $?) { exit 1 }"

LCM_COMMAND_TEMPLATE = """\
try
{{
  $ProgressPreference = 'SilentlyContinue';start-dscconfiguration -path {path} -wait -force {test_only_parameters} -erroraction 'Stop'
}}
catch [Microsoft.Management.Infrastructure.CimException]
{{
  $exception = $_.Exception
  write-error -Exception $exception
  $StatusCode = 1
  if ( $exception.HResult -ne 0 )
  {{
    $StatusCode = $exception.HResult
  }}
  $exception | format-table -property * -force
  exit $StatusCode
}}
"""


def quote_powershell_literal(value: str) -> str:
    """
    Devuelve value como literal PowerShell entre comillas simples.
    Dentro de comillas simples no hay expansión; la comilla se escapa duplicándola.
    """
    if any(ord(c) < 32 or ord(c) == 127 for c in value):
        raise ValidationError(f"La ruta contiene caracteres de control: {value!r}")
    return "'" + value.replace("'", "''") + "'"


def whatif_parameters(mode: LcmMode) -> str:
    return TEST_ONLY_PARAMETERS if mode is LcmMode.TEST else ""


def build_lcm_command(mode: LcmMode, configuration_path: Union[str, Path]) -> str:
    """
    Construye el script de invocación del LCM.

    Args:
        mode: LcmMode.TEST (dry-run) o LcmMode.APPLY
        configuration_path: Directorio que contiene el documento MOF en staging

    Returns:
        Texto del script listo para el runner
    """
    mode = LcmMode(mode)
    path = str(configuration_path)
    if not path.strip():
        raise ValidationError("La ruta de configuración no puede estar vacía")
    return LCM_COMMAND_TEMPLATE.format(
        path=quote_powershell_literal(path),
        test_only_parameters=whatif_parameters(mode),
    )
