"""Text rendering helpers for puzzles."""

from .board import render_board, render_status, board_cells

__all__ = ["render_board", "render_status", "board_cells"]
