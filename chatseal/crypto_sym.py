# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas XSalsa20-Poly1305 (secretbox) para cifrado simétrico.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado sobre bytes en crudo."""

from typing import Tuple

from nacl.secret import SecretBox
from nacl.utils import random as nacl_random

KEY_SIZE = SecretBox.KEY_SIZE
NONCE_SIZE = SecretBox.NONCE_SIZE
TAG_SIZE = SecretBox.MACBYTES


def new_key() -> bytes:
    """Genera una clave secretbox aleatoria de 256 bits."""

    return nacl_random(KEY_SIZE)


def new_nonce() -> bytes:
    """Genera un nonce aleatorio de 192 bits para un único sellado."""

    return nacl_random(NONCE_SIZE)


def secretbox_encrypt_with_key(key: bytes, plaintext: bytes) -> Tuple[bytes, bytes]:
    """Cifra datos con secretbox utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.

    Returns:
        Tuple[bytes, bytes]: Nonce y ciphertext con etiqueta Poly1305 incluida.

    """

    nonce = new_nonce()
    box = SecretBox(key)
    encrypted = box.encrypt(plaintext, nonce)
    return nonce, encrypted.ciphertext


def secretbox_decrypt_with_key(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Descifra datos con secretbox utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Nonce de 192 bits usado al cifrar.
        ciphertext (bytes): Datos cifrados con la etiqueta de autenticación.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        nacl.exceptions.CryptoError: Si la etiqueta no verifica.

    """

    box = SecretBox(key)
    return box.decrypt(ciphertext, nonce)
