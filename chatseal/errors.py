# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores tipados del códec de sobres cifrados.
# --------------------------------------------------------------
"""Errores que el códec devuelve al llamador inmediato."""

from __future__ import annotations

__all__ = [
    "EnvelopeError",
    "InvalidKeyLength",
    "DecryptionFailed",
    "MalformedPayload",
    "SerializationError",
]


class EnvelopeError(Exception):
    """Error base del códec.

    Attributes:
        code (str): Identificador estable del tipo de fallo.

    """

    code = "envelope_error"


class InvalidKeyLength(EnvelopeError):
    """La clave no es Base64 válido o no mide los bytes requeridos."""

    code = "invalid_key_length"


class DecryptionFailed(EnvelopeError):
    """Fallo de autenticación: manipulación, clave incorrecta o sobre truncado."""

    code = "decryption_failed"


class MalformedPayload(EnvelopeError):
    """El descifrado fue correcto pero el contenido no es JSON UTF-8."""

    code = "malformed_payload"


class SerializationError(EnvelopeError):
    """El valor a sellar no se puede representar como JSON."""

    code = "serialization_error"
