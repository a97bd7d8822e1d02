# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Sellado y apertura AES-256-GCM de tokens con la clave derivada.
# --------------------------------------------------------------
"""Primitiva AEAD: cada sellado usa un nonce aleatorio de 128 bits."""

import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from token_vault.errors import AuthenticationError
from token_vault.models import NONCE_SIZE, TAG_SIZE, SymmetricKey, TokenParts


def seal(key: SymmetricKey, plaintext: bytes, aad: Optional[bytes] = None) -> TokenParts:
    """Cifra y autentica `plaintext` con un nonce nuevo.

    AESGCM devuelve el tag concatenado al final del ciphertext; aquí se separa
    para que el formato almacenado lo guarde en su propio segmento.

    Args:
        key (SymmetricKey): Clave AES-256.
        plaintext (bytes): Bytes UTF-8 del token.
        aad (Optional[bytes]): Datos autenticados adicionales, no cifrados.

    Returns:
        TokenParts: Nonce, tag y ciphertext listos para serializar.

    """

    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(key.material).encrypt(nonce, plaintext, aad)
    return TokenParts(nonce=nonce, tag=sealed[-TAG_SIZE:], ciphertext=sealed[:-TAG_SIZE])


def unseal(key: SymmetricKey, parts: TokenParts, aad: Optional[bytes] = None) -> bytes:
    """Verifica el tag y, solo si coincide, devuelve el texto en claro.

    Raises:
        AuthenticationError: Si el tag no verifica con esta clave y nonce.

    """

    try:
        return AESGCM(key.material).decrypt(parts.nonce, parts.ciphertext + parts.tag, aad)
    except InvalidTag as exc:
        raise AuthenticationError(
            "la etiqueta de autenticación no coincide", operation="decrypt"
        ) from exc
