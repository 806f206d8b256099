# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del sobre y del resultado de apertura.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan las piezas de un sobre cifrado."""

from typing import Any, Optional

from pydantic import BaseModel

from chatseal.crypto_sym import TAG_SIZE


class EnvelopeParts(BaseModel):
    """Representa un sobre ya decodificado de Base64.

    Attributes:
        nonce (bytes): Nonce de 192 bits usado al sellar.
        ciphertext (bytes): Salida de secretbox (etiqueta Poly1305 y cifrado).

    """

    nonce: bytes
    ciphertext: bytes

    @property
    def plaintext_length(self) -> int:
        """Longitud en bytes del JSON protegido."""

        return len(self.ciphertext) - TAG_SIZE


class OpenOutcome(BaseModel):
    """Resultado etiquetado de abrir un sobre sin lanzar excepciones.

    Attributes:
        ok (bool): Indica si el sobre se abrió y se interpretó correctamente.
        value (Any): Valor JSON recuperado cuando `ok` es verdadero.
        error (Optional[str]): Código del error tipado en caso de fallo.
        detail (Optional[str]): Mensaje descriptivo del fallo.

    """

    ok: bool
    value: Any = None
    error: Optional[str] = None
    detail: Optional[str] = None
