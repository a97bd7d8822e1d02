# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del sellado y apertura AES-256-GCM.
# --------------------------------------------------------------

import pytest

from token_vault.crypto_sym import seal, unseal
from token_vault.errors import AuthenticationError
from token_vault.models import SymmetricKey, TokenParts


def _with(parts: TokenParts, **changes) -> TokenParts:
    """Copia las partes sustituyendo los campos indicados."""
    return TokenParts(**{**parts.model_dump(), **changes})


def _xor_first(data: bytes) -> bytes:
    return bytes([data[0] ^ 0x80]) + data[1:]


def test_seal_splits_tag_and_keeps_length(key):
    """El ciphertext conserva la longitud del claro y el tag va aparte.

    Args:
        key (SymmetricKey): Clave de pruebas.

    Returns:
        None: Se validan tamaños y apertura.
    """
    parts = seal(key, b"ya29.access-token")
    assert len(parts.nonce) == 16
    assert len(parts.tag) == 16
    assert len(parts.ciphertext) == len(b"ya29.access-token")
    assert unseal(key, parts) == b"ya29.access-token"


@pytest.mark.parametrize("field", ["nonce", "tag", "ciphertext"])
def test_unseal_rejects_any_altered_part(key, field):
    """Alterar nonce, tag o ciphertext impide la apertura.

    Args:
        key (SymmetricKey): Clave de pruebas.
        field (str): Parte que se altera.

    Returns:
        None: Se espera AuthenticationError sin texto en claro.
    """
    parts = seal(key, b"refresh-token")
    altered = _with(parts, **{field: _xor_first(getattr(parts, field))})
    with pytest.raises(AuthenticationError) as info:
        unseal(key, altered)
    assert info.value.operation == "decrypt"


def test_unseal_with_another_key_fails(key):
    parts = seal(key, b"refresh-token")
    with pytest.raises(AuthenticationError):
        unseal(SymmetricKey(material=bytes(32)), parts)


def test_associated_data_must_match(key):
    parts = seal(key, b"token", aad=b"user:42")
    assert unseal(key, parts, aad=b"user:42") == b"token"
    with pytest.raises(AuthenticationError):
        unseal(key, parts, aad=b"user:43")
    with pytest.raises(AuthenticationError):
        unseal(key, parts)


def test_each_seal_draws_a_fresh_nonce(key):
    """Sellar repetidamente el mismo valor nunca reutiliza el nonce.

    Args:
        key (SymmetricKey): Clave de pruebas.

    Returns:
        None: Todos los nonces y ciphertexts son distintos.
    """
    sealed = [seal(key, b"same") for _ in range(100)]
    assert len({parts.nonce for parts in sealed}) == 100
    assert len({parts.ciphertext + parts.tag for parts in sealed}) == 100
