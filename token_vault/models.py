# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan la clave y las partes de un token cifrado."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

KEY_SIZE = 32
NONCE_SIZE = 16
TAG_SIZE = 16


class SymmetricKey(BaseModel):
    """Clave AES-256 derivada una sola vez e inmutable durante el proceso.

    Attributes:
        material (bytes): Los 32 bytes de la clave. Nunca aparecen en `repr`.
        algorithm (str): KDF con la que se obtuvo la clave.

    """

    model_config = ConfigDict(frozen=True)

    material: bytes = Field(repr=False)
    algorithm: str = "scrypt"

    @field_validator("material")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if len(value) != KEY_SIZE:
            raise ValueError(f"la clave debe tener {KEY_SIZE} bytes, tiene {len(value)}")
        return value


class TokenParts(BaseModel):
    """Representa las tres partes de un token cifrado con AES-GCM.

    Attributes:
        nonce (bytes): Vector de inicialización de 128 bits.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    tag: bytes
    ciphertext: bytes

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"el nonce debe tener {NONCE_SIZE} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"el tag debe tener {TAG_SIZE} bytes")
        return value
