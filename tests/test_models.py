# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de los modelos Pydantic del sobre y del resultado.
# --------------------------------------------------------------

from chatseal.crypto_sym import NONCE_SIZE, TAG_SIZE
from chatseal.models import EnvelopeParts, OpenOutcome


def test_envelope_parts_plaintext_length():
    """La longitud del claro descuenta la etiqueta de autenticación."""
    parts = EnvelopeParts(nonce=b"\x00" * NONCE_SIZE, ciphertext=b"\x01" * (TAG_SIZE + 5))
    assert parts.plaintext_length == 5


def test_open_outcome_defaults():
    """Un resultado correcto no arrastra código ni detalle de error."""
    outcome = OpenOutcome(ok=True, value=[1, 2])
    assert outcome.value == [1, 2]
    assert outcome.error is None and outcome.detail is None
