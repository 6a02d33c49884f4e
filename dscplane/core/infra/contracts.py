"""
Contratos que deben implementar los colaboradores del LCM.

El core solo define interfaces; la implementación vive en dsctool/*
(runner PowerShell, parser de salida '-WhatIf').
"""

from typing import Any, Callable, List, Protocol, Union

from dscplane.core.runtime.state import ExecutionResult, ResourceChangeRecord


class CommandRunner(Protocol):
    """
    Ejecuta un texto de comando contra un nodo.
    Se construye con (node, command) vía RunnerFactory.
    """

    def run(self) -> ExecutionResult:
        """Ejecuta y devuelve el resultado, sea cual sea."""
        ...

    def run_checked(self) -> ExecutionResult:
        """Ejecuta; si el resultado no es exitoso lanza CmdletError."""
        ...


RunnerFactory = Callable[[Any, str], CommandRunner]


class OutputParser(Protocol):
    """Convierte el reporte textual del motor en registros por recurso."""

    def parse(self, output: str) -> List[ResourceChangeRecord]:
        """Lanza OutputParseError si la salida está malformada."""
        ...


ParseFunction = Callable[[str], List[ResourceChangeRecord]]

# Se aceptan objetos con .parse() o funciones puras
ParserLike = Union[OutputParser, ParseFunction]


def as_parse_function(parser: ParserLike) -> ParseFunction:
    """Normaliza un OutputParser o una función a una función de parseo."""
    parse = getattr(parser, "parse", None)
    if callable(parse):
        return parse
    if callable(parser):
        return parser
    raise TypeError(f"Parser no soportado: {parser!r}")
