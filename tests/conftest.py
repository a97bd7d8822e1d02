# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el entorno y reutilizar claves.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from token_vault.crypto_kdf import derive_key
from token_vault.models import SymmetricKey
from token_vault.token_cipher import TokenCipher

TEST_SECRET = "test-secret-for-token-vault"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables de entorno del cifrado antes de cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ("TOKEN_ENCRYPTION_KEY", "TOKEN_ENCRYPTION_KDF", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(scope="session")
def secret() -> str:
    """Secreto configurado en las pruebas."""
    return TEST_SECRET


@pytest.fixture(scope="session")
def key(secret) -> SymmetricKey:
    """Deriva una única vez la clave de pruebas (scrypt es costoso)."""
    return derive_key(secret)


@pytest.fixture
def cipher(key) -> TokenCipher:
    """Servicio de cifrado construido con la clave de pruebas."""
    return TokenCipher(key)
