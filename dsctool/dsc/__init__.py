"""
Providers DSC: parser de la salida del LCM y presentación de resultados
"""

from .lcm_parser import LcmOutputParser, parse
from .report import changes_required, changes_to_json, render_changes

__all__ = ["LcmOutputParser", "parse", "changes_required", "changes_to_json", "render_changes"]
