# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores tipados del cifrado de tokens.
# --------------------------------------------------------------
"""Errores que el paquete propaga hacia quienes cifran o descifran tokens."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Clase de fallo que permite a los llamadores distinguir la causa."""

    CONFIGURATION = "configuration"
    FORMAT = "format"
    AUTHENTICATION = "authentication"


class TokenVaultError(Exception):
    """Error base con el tipo de fallo y la operación que lo produjo.

    Args:
        message (str): Descripción sin material sensible (ni claves ni tokens).
        operation (str): Operación en curso: `encrypt`, `decrypt`, `derive_key`...

    """

    kind: ErrorKind

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(message)
        self.operation = operation

    def __str__(self) -> str:
        message = super().__str__()
        if self.operation:
            return f"[{self.kind.value}:{self.operation}] {message}"
        return f"[{self.kind.value}] {message}"


class ConfigurationError(TokenVaultError):
    """Secreto ausente o parámetros de derivación inválidos."""

    kind = ErrorKind.CONFIGURATION


class FormatError(TokenVaultError):
    """El valor codificado no tiene tres segmentos hexadecimales válidos."""

    kind = ErrorKind.FORMAT


class AuthenticationError(TokenVaultError):
    """La etiqueta GCM no coincide: manipulación, corrupción o clave errónea."""

    kind = ErrorKind.AUTHENTICATION
