"""
Cargador de ajustes de dsctool
Lee .env, YAML y variables de entorno y los convierte a DscSettings
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from dscplane.core.errors import ConfigError

from .models import DscSettings

# Proyecto raíz (donde puede vivir .env)
_PROJECT_ROOT = Path(__file__).resolve().parents[2]

SETTINGS_FILE_ENV = "DSCTOOL_SETTINGS_FILE"
DEFAULT_SETTINGS_FILE = Path("dsctool.yaml")

# Variable de entorno → campo de DscSettings
ENV_OVERRIDES = {
    "DSCTOOL_CONFIGURATION_PATH": "configuration_path",
    "DSCTOOL_POWERSHELL": "powershell_executable",
    "DSCTOOL_NODE": "node",
    "DSCTOOL_LOG_LEVEL": "log_level",
}


def load_env_file(env_file: Optional[Path] = None) -> bool:
    """Carga .env del proyecto (no pisa variables ya definidas)"""
    env_file = env_file or _PROJECT_ROOT / ".env"
    if not env_file.exists():
        return False
    return load_dotenv(env_file, override=False)


def _read_yaml(settings_file: Path) -> Dict[str, Any]:
    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Error al parsear YAML {settings_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"No se pudo leer {settings_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{settings_file} debe contener un mapa de ajustes")
    return data


def load_settings(settings_file: Optional[Path] = None, env_file: Optional[Path] = None) -> DscSettings:
    """
    Carga los ajustes efectivos

    Precedencia: variables de entorno > YAML > valores por defecto.

    Args:
        settings_file: YAML explícito (si no existe → ConfigError)
        env_file: .env alternativo

    Returns:
        DscSettings validados
    """
    load_env_file(env_file)

    explicit = settings_file is not None
    if settings_file is None:
        from_env = os.environ.get(SETTINGS_FILE_ENV, "").strip()
        if from_env:
            settings_file = Path(from_env)
            explicit = True
        else:
            settings_file = DEFAULT_SETTINGS_FILE

    data: Dict[str, Any] = {}
    if settings_file.exists():
        data = _read_yaml(settings_file)
    elif explicit:
        raise ConfigError(f"Archivo de ajustes no encontrado: {settings_file}")

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_name, "").strip()
        if value:
            data[field_name] = value

    try:
        return DscSettings(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Ajustes inválidos en {settings_file}: {e}") from e
