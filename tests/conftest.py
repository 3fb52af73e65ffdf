"""Pytest configuration and fixtures."""

import pytest

from smart_router.models.currency import Token
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D, TOKEN_E, make_token


@pytest.fixture
def token_a() -> Token:
    return make_token(TOKEN_A, "A")


@pytest.fixture
def token_b() -> Token:
    return make_token(TOKEN_B, "B")


@pytest.fixture
def token_c() -> Token:
    return make_token(TOKEN_C, "C")


@pytest.fixture
def token_d() -> Token:
    return make_token(TOKEN_D, "D")


@pytest.fixture
def token_e() -> Token:
    return make_token(TOKEN_E, "E")
