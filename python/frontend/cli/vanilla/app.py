"""Vanilla terminal frontend: plain lines on stdout."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.result import SearchResult


def render(title: str, board: Board, result: SearchResult) -> str:
    """Return the banner line followed by the statistics line."""
    return f"{title}\n{result}"


def run(title: str, board: Board, result: SearchResult) -> None:
    print(render(title, board, result))
