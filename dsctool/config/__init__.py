"""
Configuración de dsctool (YAML + .env + variables de entorno)
"""

from .loader import load_settings
from .models import DscSettings

__all__ = ["load_settings", "DscSettings"]
