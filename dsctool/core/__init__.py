"""
Utilidades compartidas: ejecución de procesos y verificación del sistema (doctor)
"""
