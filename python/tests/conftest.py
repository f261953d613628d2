"""Shared helpers for the test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.models.board import Board

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"
SAMPLES_DIR = PROJECT_ROOT / "samples"


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def board_from_data(data: dict) -> Board:
    """Reconstruct a ``Board`` from its JSON representation."""
    flat = [v for row in data["tiles"] for v in row]
    return Board.from_flat(data["width"], data["height"], flat)


def board_from_rows(*rows: list[int]) -> Board:
    return Board.from_flat(len(rows[0]), len(rows), [v for row in rows for v in row])


@pytest.fixture
def two_step_board() -> Board:
    return board_from_rows([1, 2, 3], [4, 0, 6], [7, 5, 8])


@pytest.fixture
def solved_3x3() -> Board:
    return Board.solved(3, 3)
