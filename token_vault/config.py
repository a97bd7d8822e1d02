# --------------------------------------------------------------
# File: config.py
# Description: Carga y validación de la configuración del cifrado de tokens.
# --------------------------------------------------------------
"""Configuración explícita construida una vez al arrancar el proceso."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from token_vault.crypto_kdf import ALGORITHMS
from token_vault.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Solo válido en desarrollo: cualquiera que lea este fichero conoce el secreto.
INSECURE_DEFAULT_SECRET = "default-key-change-in-production-32-chars!!"
DEV_ENVIRONMENTS = ("development", "test")


class EncryptionSettings(BaseModel):
    """Parámetros del cifrado de tokens.

    Attributes:
        secret (str): Secreto del que se deriva la clave.
        kdf (str): Algoritmo de derivación (`scrypt` o `argon2id`).
        environment (str): Entorno de ejecución (`APP_ENV`).
        insecure_default (bool): Indica si se usa el secreto por defecto.

    """

    model_config = ConfigDict(frozen=True)

    secret: str = Field(repr=False)
    kdf: str = "scrypt"
    environment: str = "production"
    insecure_default: bool = False

    @classmethod
    def from_env(cls, *, dotenv_path: Optional[str] = None) -> "EncryptionSettings":
        """Lee `TOKEN_ENCRYPTION_KEY`, `TOKEN_ENCRYPTION_KDF` y `APP_ENV`.

        Sin secreto, falla en cualquier entorno salvo `development` y `test`,
        donde recurre al secreto por defecto y lo deja registrado en el log.
        """

        load_dotenv(dotenv_path)

        environment = os.getenv("APP_ENV", "production").strip().lower()
        kdf = os.getenv("TOKEN_ENCRYPTION_KDF", "scrypt").strip().lower()
        secret = os.getenv("TOKEN_ENCRYPTION_KEY", "")

        if kdf not in ALGORITHMS:
            raise ConfigurationError(
                f"TOKEN_ENCRYPTION_KDF debe ser uno de {ALGORITHMS}", operation="load_settings"
            )

        if secret.strip():
            return cls(secret=secret, kdf=kdf, environment=environment)

        if environment not in DEV_ENVIRONMENTS:
            raise ConfigurationError(
                f"TOKEN_ENCRYPTION_KEY es obligatorio en el entorno {environment!r}",
                operation="load_settings",
            )

        logger.warning(
            "TOKEN_ENCRYPTION_KEY no está configurado; usando el secreto por defecto "
            "INSEGURO (APP_ENV=%s). No usar en producción.",
            environment,
        )
        return cls(
            secret=INSECURE_DEFAULT_SECRET,
            kdf=kdf,
            environment=environment,
            insecure_default=True,
        )
