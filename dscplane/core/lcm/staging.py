"""
Staging del documento de configuración en disco.

El LCM lee los .mof del directorio pasado a -Path; el documento se escribe
como '..mof' (nodo '.', equipo local). La ruta es determinista: dos managers
sobre el mismo directorio se pisan, así que se exige un manager por ruta a la vez.
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

STAGED_DOCUMENT_NAME = "..mof"

ConfigurationDocument = Union[bytes, bytearray, str]


def configuration_document_path(configuration_path: Union[str, Path]) -> Path:
    """Ruta del artefacto en staging para un directorio de configuración."""
    return Path(configuration_path) / STAGED_DOCUMENT_NAME


def save_configuration_document(configuration_path: Union[str, Path], document: ConfigurationDocument) -> Path:
    """
    Escribe el documento (binario) creando el directorio si no existe.

    Returns:
        Ruta del artefacto escrito
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    path = configuration_document_path(configuration_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(bytes(document))
    logger.debug("DSC: documento de configuración escrito en %s (%d bytes)", path, len(document))
    return path


def remove_configuration_document(configuration_path: Union[str, Path]) -> None:
    """Elimina el artefacto; tolera que no exista (p. ej. si falló el staging)."""
    path = configuration_document_path(configuration_path)
    path.unlink(missing_ok=True)
