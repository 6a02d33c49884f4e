"""
Runner PowerShell para el LCM
"""

from .cmdlet import PowershellCmdlet, cmdlet_factory

__all__ = ["PowershellCmdlet", "cmdlet_factory"]
