"""
dsctool: providers del DSC Control Plane (runner PowerShell, parser del LCM,
ajustes, logging y presentación)
"""
