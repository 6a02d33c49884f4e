"""
Modelos de configuración de dsctool
Usa Pydantic para validación
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from dscplane.core.runtime.resolver import default_configuration_path


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class DscSettings(BaseModel):
    """Ajustes de ejecución del LCM local"""
    configuration_path: Path = Field(
        default_factory=default_configuration_path,
        description="Directorio donde se deja el documento MOF en staging",
    )
    powershell_executable: str = Field("powershell.exe", description="Ejecutable de PowerShell")
    node: str = Field("localhost", description="Nodo objetivo (solo informativo)")
    log_level: str = Field("INFO", description="Nivel de logging")
    log_file: Optional[Path] = None

    class Config:
        extra = "forbid"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level debe ser uno de: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("powershell_executable")
    @classmethod
    def _require_executable(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("powershell_executable no puede estar vacío")
        return v.strip()
