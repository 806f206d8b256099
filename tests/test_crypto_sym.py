# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado y descifrado simétrico con secretbox.
# --------------------------------------------------------------

import os

import pytest
from nacl.exceptions import CryptoError

from chatseal.crypto_sym import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    new_key,
    secretbox_decrypt_with_key,
    secretbox_encrypt_with_key,
)


def test_sizes_match_secretbox():
    """Comprueba las longitudes fijas que comparten todas las implementaciones."""
    assert (KEY_SIZE, NONCE_SIZE, TAG_SIZE) == (32, 24, 16)
    assert len(new_key()) == KEY_SIZE


def test_secretbox_roundtrip_ok():
    """Comprueba que un cifrado con secretbox pueda revertirse correctamente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    key = new_key()
    plaintext = os.urandom(128)
    nonce, ct = secretbox_encrypt_with_key(key, plaintext)
    assert len(nonce) == NONCE_SIZE
    assert len(ct) == len(plaintext) + TAG_SIZE
    assert secretbox_decrypt_with_key(key, nonce, ct) == plaintext


def test_secretbox_detects_tampering_ciphertext():
    """Verifica que cualquier alteración del ciphertext sea detectada."""
    key = new_key()
    nonce, ct = secretbox_encrypt_with_key(key, b"hola mundo")
    tampered = ct[:-1] + bytes([ct[-1] ^ 1])
    with pytest.raises(CryptoError):
        secretbox_decrypt_with_key(key, nonce, tampered)


def test_secretbox_detects_tampering_nonce():
    """Comprueba que modificar el nonce provoque fallo en la autenticación."""
    key = new_key()
    nonce, ct = secretbox_encrypt_with_key(key, b"msg")
    bad_nonce = bytes([nonce[0] ^ 1]) + nonce[1:]
    with pytest.raises(CryptoError):
        secretbox_decrypt_with_key(key, bad_nonce, ct)


def test_secretbox_nonce_uniqueness():
    """Evalúa que los nonces aleatorios generados no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    key = new_key()
    nonces = set()
    for _ in range(200):
        nonce, _ = secretbox_encrypt_with_key(key, b"x")
        assert nonce not in nonces
        nonces.add(nonce)
