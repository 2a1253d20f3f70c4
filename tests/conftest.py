"""Shared fixtures for the Othello test suite."""

from __future__ import annotations

import pytest

from engine.board import OthelloBoardManager


@pytest.fixture
def manager() -> OthelloBoardManager:
    return OthelloBoardManager()
