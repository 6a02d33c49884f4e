"""
Contratos de los colaboradores del LCM.

Los providers (runner PowerShell, parser de salida) implementan estos contratos;
el core no depende de ningún provider concreto.
"""

from dscplane.core.infra.contracts import CommandRunner, OutputParser, RunnerFactory

__all__ = ["CommandRunner", "OutputParser", "RunnerFactory"]
