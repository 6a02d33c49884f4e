"""
DSC Control Plane: orquestación del Local Configuration Manager.
"""

__version__ = "1.0.0"
