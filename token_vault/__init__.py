# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cifrado de tokens en reposo.
# --------------------------------------------------------------
"""Inicializa el paquete `token_vault` y expone su API pública."""

from token_vault.config import EncryptionSettings
from token_vault.crypto_kdf import derive_key
from token_vault.errors import (
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    FormatError,
    TokenVaultError,
)
from token_vault.models import SymmetricKey, TokenParts
from token_vault.token_cipher import TokenCipher

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "EncryptionSettings",
    "ErrorKind",
    "FormatError",
    "SymmetricKey",
    "TokenCipher",
    "TokenParts",
    "TokenVaultError",
    "derive_key",
]
