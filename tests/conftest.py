# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas de claves y aislamiento del logger del paquete.
# --------------------------------------------------------------

import logging
from typing import Iterator

import pytest

from chatseal.codec import generate_key


@pytest.fixture
def key() -> str:
    """Clave Base64 recién generada para cada prueba."""

    return generate_key()


@pytest.fixture
def other_key() -> str:
    """Segunda clave independiente para comprobar rechazos."""

    return generate_key()


@pytest.fixture(autouse=True)
def _isolate_logger() -> Iterator[None]:
    """Restaura handlers y nivel del logger `chatseal` tras cada prueba.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    logger = logging.getLogger("chatseal")
    handlers = list(logger.handlers)
    level = logger.level

    yield

    logger.handlers[:] = handlers
    logger.setLevel(level)
