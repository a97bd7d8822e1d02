# --------------------------------------------------------------
# File: token_cipher.py
# Description: Servicio de cifrado y descifrado de tokens OAuth en reposo.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM de tokens con clave inyectada."""

from __future__ import annotations

import logging
from typing import Optional

from token_vault.config import EncryptionSettings
from token_vault.crypto_kdf import derive_key
from token_vault.crypto_sym import seal, unseal
from token_vault.errors import FormatError, TokenVaultError
from token_vault.models import SymmetricKey
from token_vault.token_format import parse, serialize

logger = logging.getLogger(__name__)


class TokenCipher:
    """Cifra y descifra tokens con una clave derivada una sola vez.

    La instancia solo lee su clave, por lo que puede compartirse entre hilos
    sin bloqueo.

    Args:
        key (SymmetricKey): Clave AES-256 ya derivada.

    """

    def __init__(self, key: SymmetricKey) -> None:
        self._key = key

    @classmethod
    def from_settings(cls, settings: EncryptionSettings) -> "TokenCipher":
        """Deriva la clave a partir de la configuración y crea el servicio."""

        return cls(derive_key(settings.secret, algorithm=settings.kdf))

    @classmethod
    def from_env(cls, *, dotenv_path: Optional[str] = None) -> "TokenCipher":
        """Atajo para `from_settings(EncryptionSettings.from_env())`."""

        return cls.from_settings(EncryptionSettings.from_env(dotenv_path=dotenv_path))

    def encrypt(self, token: str) -> str:
        """Cifra un token y devuelve `hex(nonce):hex(tag):hex(ciphertext)`.

        Args:
            token (str): Token en claro. La cadena vacía se devuelve tal cual.

        Returns:
            str: Token cifrado listo para persistir.

        """

        if not isinstance(token, str):
            raise TypeError("el token debe ser str")
        if not token:
            return ""

        try:
            try:
                data = token.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise FormatError("el token no es UTF-8 válido", operation="encrypt") from exc
            parts = seal(self._key, data)
            encoded = serialize(parts.nonce, parts.tag, parts.ciphertext)
        except TokenVaultError as exc:
            logger.error("Fallo al cifrar el token: %s", exc)
            raise

        logger.debug("Token cifrado (%d bytes de ciphertext)", len(parts.ciphertext))
        return encoded

    def decrypt(self, encoded: str) -> str:
        """Descifra un token almacenado; nunca devuelve texto parcial.

        Args:
            encoded (str): Valor producido por `encrypt`. La cadena vacía se
                devuelve tal cual.

        Returns:
            str: Token original en claro.

        Raises:
            FormatError: Si el valor no tiene el formato `nonce:tag:ciphertext`.
            AuthenticationError: Si la etiqueta no verifica.

        """

        if not isinstance(encoded, str):
            raise TypeError("el token cifrado debe ser str")
        if not encoded:
            return ""

        try:
            parts = parse(encoded)
            plaintext = unseal(self._key, parts)
            try:
                token = plaintext.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise FormatError("el contenido descifrado no es UTF-8", operation="decrypt") from exc
        except TokenVaultError as exc:
            logger.error("Fallo al descifrar el token: %s", exc)
            raise

        logger.debug("Token descifrado (%d bytes de ciphertext)", len(parts.ciphertext))
        return token
