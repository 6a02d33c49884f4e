"""
Core: lógica de orquestación del LCM.

ENFORCEMENT (arquitectura limpia):
- Este paquete NO debe importar: dscplane.cli ni dsctool.* (runner, parser, settings).
- Permitido: typing, pathlib.Path, logging, dscplane.core.* (errors, runtime, infra/contracts, lcm).
- Los providers y la CLI importan desde core; nunca al revés.
"""

from dscplane.core.errors import (
    DscPlaneError,
    ValidationError,
    ConfigError,
    CmdletError,
    OutputParseError,
)

__all__ = ["DscPlaneError", "ValidationError", "ConfigError", "CmdletError", "OutputParseError"]
