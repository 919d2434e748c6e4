"""Pytest fixtures for natspecdocs tests."""

import pytest

from tests.helpers import TOKEN_ABI, TOKEN_SOURCE, TOKEN_TREE


@pytest.fixture
def token_tree():
    return TOKEN_TREE


@pytest.fixture
def token_source():
    return TOKEN_SOURCE


@pytest.fixture
def token_lines():
    return TOKEN_SOURCE.split("\n")


@pytest.fixture
def token_abi():
    return TOKEN_ABI
