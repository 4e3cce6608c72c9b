"""Puzzle construction: curated content, loading and procedural generation."""

from .models import PuzzleContent, GeneratedContent
from .convert import parse_content, validate_content, content_to_puzzle
from .loader import load_content, load_daily_content, daily_filename
from .generator import (
    WordIndex,
    auto_generate_content,
    generate_content_options,
    generate_content,
    generate_puzzle,
)

__all__ = [
    "PuzzleContent",
    "GeneratedContent",
    "parse_content",
    "validate_content",
    "content_to_puzzle",
    "load_content",
    "load_daily_content",
    "daily_filename",
    "WordIndex",
    "auto_generate_content",
    "generate_content_options",
    "generate_content",
    "generate_puzzle",
]
