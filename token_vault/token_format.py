# --------------------------------------------------------------
# File: token_format.py
# Description: Formato textual nonce:tag:ciphertext de los tokens cifrados.
# --------------------------------------------------------------
"""Serialización y validación estricta del token cifrado almacenado."""

from __future__ import annotations

import re

from pydantic import ValidationError

from token_vault.errors import FormatError
from token_vault.models import NONCE_SIZE, TAG_SIZE, TokenParts

__all__ = ["DELIMITER", "parse", "serialize"]

DELIMITER = ":"

_HEX = re.compile(r"[0-9a-fA-F]*")


def _unhex(segment: str, name: str) -> bytes:
    """Decodifica un segmento hexadecimal rechazando espacios y prefijos."""

    if not _HEX.fullmatch(segment):
        raise FormatError(f"el segmento {name} no es hexadecimal", operation="parse")
    if len(segment) % 2:
        raise FormatError(f"el segmento {name} tiene longitud impar", operation="parse")
    return bytes.fromhex(segment)


def serialize(nonce: bytes, tag: bytes, ciphertext: bytes) -> str:
    """Codifica las tres partes en hexadecimal unidas por `:`.

    Args:
        nonce (bytes): Nonce de 16 bytes.
        tag (bytes): Etiqueta GCM de 16 bytes.
        ciphertext (bytes): Datos cifrados sin etiqueta.

    Returns:
        str: Cadena `hex(nonce):hex(tag):hex(ciphertext)`.

    """

    try:
        parts = TokenParts(nonce=nonce, tag=tag, ciphertext=ciphertext)
    except ValidationError as exc:
        raise FormatError("partes del token con longitud inválida", operation="serialize") from exc
    return DELIMITER.join((parts.nonce.hex(), parts.tag.hex(), parts.ciphertext.hex()))


def parse(value: str) -> TokenParts:
    """Separa y valida un token cifrado antes de cualquier operación criptográfica.

    Args:
        value (str): Cadena almacenada con el formato `nonce:tag:ciphertext`.

    Returns:
        TokenParts: Nonce, tag y ciphertext ya decodificados.

    Raises:
        FormatError: Si no hay exactamente tres segmentos hexadecimales válidos.

    """

    segments = value.split(DELIMITER)
    if len(segments) != 3:
        raise FormatError(
            f"se esperaban 3 segmentos y hay {len(segments)}", operation="parse"
        )

    nonce_hex, tag_hex, ct_hex = segments
    if len(nonce_hex) != NONCE_SIZE * 2:
        raise FormatError("el nonce no mide 16 bytes", operation="parse")
    if len(tag_hex) != TAG_SIZE * 2:
        raise FormatError("el tag no mide 16 bytes", operation="parse")

    return TokenParts(
        nonce=_unhex(nonce_hex, "nonce"),
        tag=_unhex(tag_hex, "tag"),
        ciphertext=_unhex(ct_hex, "ciphertext"),
    )
