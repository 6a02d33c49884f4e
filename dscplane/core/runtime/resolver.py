"""
Resolución de rutas de estado.

- state_root(): directorio canónico de estado/runtime del control plane.
- default_configuration_path(): directorio donde se materializa el documento MOF.

El core NO escribe en disco aquí; solo expone estas rutas. Quién escribe
(staging del LCM) recibe la ruta ya resuelta.
"""

import os
from pathlib import Path


STATE_ROOT_ENV = "DSCPLANE_STATE_ROOT"

# Ruta canónica del estado en hosts no Windows (desarrollo/CI)
POSIX_STATE_ROOT = Path("/var/lib/dscplane")


def state_root() -> Path:
    """
    Directorio raíz del estado del control plane.
    Resolución: DSCPLANE_STATE_ROOT → %ProgramData%\\dscplane → /var/lib/dscplane.
    """
    explicit = os.environ.get(STATE_ROOT_ENV, "").strip()
    if explicit:
        return Path(explicit).expanduser()

    program_data = os.environ.get("ProgramData", "").strip()
    if os.name == "nt" and program_data:
        return Path(program_data) / "dscplane"

    return POSIX_STATE_ROOT


def default_configuration_path() -> Path:
    """Directorio de staging por defecto para el documento de configuración."""
    return state_root() / "staging"
