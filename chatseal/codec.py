# --------------------------------------------------------------
# File: codec.py
# Description: Sellado y apertura de sobres cifrados para mensajes de chat.
# --------------------------------------------------------------
"""Códec de sobres: clave Base64, valor JSON y sobre Base64 opaco.

Formato del sobre: ``Base64(nonce[24] || secretbox(json_utf8)[len + 16])``,
compatible con ``secretbox`` de tweetnacl.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Set, Union

from nacl.exceptions import CryptoError

from chatseal.crypto_sym import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    new_key,
    secretbox_decrypt_with_key,
    secretbox_encrypt_with_key,
)
from chatseal.errors import (
    DecryptionFailed,
    EnvelopeError,
    InvalidKeyLength,
    MalformedPayload,
    SerializationError,
)
from chatseal.models import EnvelopeParts, OpenOutcome

__all__ = [
    "MIN_ENVELOPE_SIZE",
    "generate_key",
    "open_envelope",
    "seal",
    "split_envelope",
    "try_open",
]

logger = logging.getLogger(__name__)

MIN_ENVELOPE_SIZE = NONCE_SIZE + TAG_SIZE

Text = Union[str, bytes]


def _b64(data: bytes) -> str:
    """Codifica datos binarios en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def _unb64(value: Text) -> bytes:
    """Decodifica Base64 estándar rechazando caracteres fuera del alfabeto."""

    if isinstance(value, str):
        value = value.encode("ascii")
    return base64.b64decode(value, validate=True)


def _decode_key(key: Text) -> bytes:
    """Decodifica la clave y comprueba su longitud antes de cualquier cifrado.

    Args:
        key (Text): Clave simétrica en Base64.

    Returns:
        bytes: Clave de exactamente `KEY_SIZE` bytes.

    """

    try:
        raw = _unb64(key)
    except (binascii.Error, UnicodeEncodeError, TypeError) as exc:
        raise InvalidKeyLength("La clave no es Base64 válido.") from exc
    if len(raw) != KEY_SIZE:
        raise InvalidKeyLength(
            f"La clave debe medir {KEY_SIZE} bytes; se recibieron {len(raw)}."
        )
    return raw


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Constante no válida en JSON: {name}")


def _check_keys(value: Any, seen: Set[int]) -> None:
    """Rechaza claves de diccionario que JSON convertiría en texto."""

    if isinstance(value, (dict, list, tuple)):
        if id(value) in seen:
            return
        seen.add(id(value))
    if isinstance(value, dict):
        for name, item in value.items():
            if not isinstance(name, str):
                raise SerializationError(
                    f"Las claves deben ser texto; se recibió {type(name).__name__}."
                )
            _check_keys(item, seen)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_keys(item, seen)


def _serialize(value: Any) -> bytes:
    # Sin ordenar claves: el orden de inserción sobrevive al viaje de ida y vuelta
    try:
        _check_keys(value, set())
        text = json.dumps(
            value, ensure_ascii=False, separators=(",", ":"), allow_nan=False
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(
            f"El valor no es representable como JSON: {type(exc).__name__}."
        ) from exc
    return text.encode("utf-8")


def generate_key() -> str:
    """Genera una clave simétrica aleatoria lista para compartir.

    Returns:
        str: Clave de 256 bits codificada en Base64.

    """

    return _b64(new_key())


def seal(value: Any, key: Text) -> str:
    """Sella un valor JSON en un sobre cifrado y autenticado.

    Args:
        value (Any): Valor serializable a JSON (dict, list, str, int, ...).
        key (Text): Clave simétrica en Base64.

    Returns:
        str: Sobre Base64 con el nonce seguido del ciphertext autenticado.

    Raises:
        InvalidKeyLength: Si la clave no decodifica a `KEY_SIZE` bytes.
        SerializationError: Si el valor no se puede convertir a JSON.

    """

    raw_key = _decode_key(key)
    plaintext = _serialize(value)
    nonce, ciphertext = secretbox_encrypt_with_key(raw_key, plaintext)
    logger.debug(
        "Sobre sellado: claro=%d bytes sobre=%d bytes",
        len(plaintext),
        len(nonce) + len(ciphertext),
    )
    return _b64(nonce + ciphertext)


def split_envelope(envelope: Text) -> EnvelopeParts:
    """Decodifica un sobre y separa el nonce del ciphertext sin usar la clave.

    Args:
        envelope (Text): Sobre Base64 producido por `seal`.

    Returns:
        EnvelopeParts: Nonce y ciphertext con etiqueta.

    Raises:
        DecryptionFailed: Si el sobre no es Base64 o es demasiado corto.

    """

    try:
        raw = _unb64(envelope)
    except (binascii.Error, UnicodeEncodeError, TypeError) as exc:
        raise DecryptionFailed("El sobre no es Base64 válido.") from exc
    if len(raw) < MIN_ENVELOPE_SIZE:
        raise DecryptionFailed(
            f"Sobre truncado: {len(raw)} bytes, mínimo {MIN_ENVELOPE_SIZE}."
        )
    return EnvelopeParts(nonce=raw[:NONCE_SIZE], ciphertext=raw[NONCE_SIZE:])


def open_envelope(envelope: Text, key: Text) -> Any:
    """Abre un sobre sellado y devuelve el valor JSON original.

    Args:
        envelope (Text): Sobre Base64 producido por `seal`.
        key (Text): Clave simétrica en Base64.

    Returns:
        Any: Valor JSON recuperado.

    Raises:
        InvalidKeyLength: Si la clave no decodifica a `KEY_SIZE` bytes.
        DecryptionFailed: Si el sobre está truncado, manipulado o la clave no
            corresponde.
        MalformedPayload: Si el contenido autenticado no es JSON UTF-8.

    """

    raw_key = _decode_key(key)
    parts = split_envelope(envelope)
    try:
        plaintext = secretbox_decrypt_with_key(raw_key, parts.nonce, parts.ciphertext)
    except CryptoError as exc:
        logger.warning(
            "Autenticación fallida al abrir un sobre de %d bytes",
            NONCE_SIZE + len(parts.ciphertext),
        )
        raise DecryptionFailed("No se ha podido descifrar el mensaje.") from exc

    try:
        value = json.loads(
            plaintext.decode("utf-8"), parse_constant=_reject_constant
        )
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise MalformedPayload(
            "El contenido descifrado no es JSON UTF-8 válido."
        ) from exc
    logger.debug("Sobre abierto: claro=%d bytes", parts.plaintext_length)
    return value


def try_open(envelope: Text, key: Text) -> OpenOutcome:
    """Abre un sobre devolviendo un resultado etiquetado en lugar de lanzar.

    Args:
        envelope (Text): Sobre Base64 producido por `seal`.
        key (Text): Clave simétrica en Base64.

    Returns:
        OpenOutcome: `ok=True` con el valor, o `ok=False` con el código del
        error tipado (`invalid_key_length`, `decryption_failed`,
        `malformed_payload`).

    """

    try:
        value = open_envelope(envelope, key)
    except EnvelopeError as exc:
        return OpenOutcome(ok=False, error=exc.code, detail=str(exc))
    return OpenOutcome(ok=True, value=value)
