"""
Errores del DSC Control Plane.

El core solo define excepciones; las capas (CLI/providers) se encargan del formato de salida.
"""

from typing import Optional


class DscPlaneError(Exception):
    """Error base del control plane."""
    pass


class ValidationError(DscPlaneError):
    """Entrada inválida (p. ej. ruta de configuración insegura)."""
    pass


class ConfigError(DscPlaneError):
    """Error de configuración (archivo faltante, formato inválido)."""
    pass


class CmdletError(DscPlaneError):
    """
    Fallo fatal del motor DSC.

    Lleva el stderr normalizado (espacios colapsados) para que el operador
    pueda diagnosticar el problema del motor.
    """

    def __init__(self, message: str, stderr: str = "", exit_status: Optional[int] = None):
        super().__init__(message)
        self.stderr = stderr
        self.exit_status = exit_status


class OutputParseError(DscPlaneError):
    """La salida '-WhatIf' del LCM no tiene el formato esperado."""
    pass
