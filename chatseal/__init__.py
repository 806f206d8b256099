# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de sobres cifrados para chat.
# --------------------------------------------------------------
"""Inicializa el paquete `chatseal` y reexporta su API pública.

El paquete solo registra un `NullHandler`; para ver sus registros en consola
llama a `chatseal.config.configure_logging()`, que toma el nivel de
`CHATSEAL_LOG_LEVEL`.
"""

import logging

from chatseal.codec import (
    MIN_ENVELOPE_SIZE,
    generate_key,
    open_envelope,
    seal,
    split_envelope,
    try_open,
)
from chatseal.crypto_sym import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from chatseal.errors import (
    DecryptionFailed,
    EnvelopeError,
    InvalidKeyLength,
    MalformedPayload,
    SerializationError,
)
from chatseal.models import EnvelopeParts, OpenOutcome

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DecryptionFailed",
    "EnvelopeError",
    "EnvelopeParts",
    "InvalidKeyLength",
    "KEY_SIZE",
    "MIN_ENVELOPE_SIZE",
    "MalformedPayload",
    "NONCE_SIZE",
    "OpenOutcome",
    "SerializationError",
    "TAG_SIZE",
    "generate_key",
    "open_envelope",
    "seal",
    "split_envelope",
    "try_open",
]
