# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación determinista de la clave de cifrado de tokens.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir del secreto configurado."""

import logging

from argon2.low_level import Type, hash_secret_raw
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from token_vault.errors import ConfigurationError
from token_vault.models import KEY_SIZE, SymmetricKey

logger = logging.getLogger(__name__)

# Constantes de separación de dominio. No son secretas y no pueden cambiar:
# los tokens ya almacenados dependen de ellas.
SCRYPT_SALT = b"salt"
ARGON2_SALT = b"token-vault.argon2id.v1"

SCRYPT_PARAMS = {"n": 2**14, "r": 8, "p": 1}
ARGON2_PARAMS = {"t": 3, "m": 64 * 1024, "p": 1}

ALGORITHMS = ("scrypt", "argon2id")


def derive_key(secret: str, *, algorithm: str = "scrypt") -> SymmetricKey:
    """Deriva la clave AES-256 a partir del secreto de la aplicación.

    La derivación es determinista: el mismo secreto produce siempre la misma
    clave, lo que permite descifrar tokens escritos por ejecuciones anteriores.

    Args:
        secret (str): Secreto configurado (`TOKEN_ENCRYPTION_KEY`).
        algorithm (str): `scrypt` (por defecto) o `argon2id`.

    Returns:
        SymmetricKey: Clave de 32 bytes lista para AES-GCM.

    Raises:
        ConfigurationError: Si el secreto está vacío o el algoritmo no existe.

    """

    if not secret:
        raise ConfigurationError("no se ha configurado ningún secreto", operation="derive_key")

    secret_bytes = secret.encode("utf-8")
    if algorithm == "scrypt":
        kdf = Scrypt(salt=SCRYPT_SALT, length=KEY_SIZE, **SCRYPT_PARAMS)
        material = kdf.derive(secret_bytes)
    elif algorithm == "argon2id":
        material = hash_secret_raw(
            secret_bytes,
            ARGON2_SALT,
            time_cost=ARGON2_PARAMS["t"],
            memory_cost=ARGON2_PARAMS["m"],
            parallelism=ARGON2_PARAMS["p"],
            hash_len=KEY_SIZE,
            type=Type.ID,
        )
    else:
        raise ConfigurationError(
            f"algoritmo de derivación desconocido: {algorithm!r}", operation="derive_key"
        )

    logger.debug("Clave de %d bits derivada con %s", KEY_SIZE * 8, algorithm)
    return SymmetricKey(material=material, algorithm=algorithm)
