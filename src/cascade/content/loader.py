"""Loading curated puzzle content from JSON or YAML files."""

import json
from datetime import date as date_type
from pathlib import Path
from typing import Optional, Union

import yaml

from ..engine.errors import InvalidContent
from .convert import parse_content
from .models import PuzzleContent


def load_content(path: Union[str, Path]) -> PuzzleContent:
    """
    Load one curated puzzle from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the extension is not supported
        InvalidContent: If the data does not describe a puzzle
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Puzzle file not found: {path}")

    with open(path) as f:
        if path.suffix == ".json":
            data = json.load(f)
        elif path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported puzzle file type: {path.suffix}")

    if not isinstance(data, dict):
        raise InvalidContent([f"Expected a mapping of puzzle fields in {path.name}"])
    return parse_content(data)


def daily_filename(day: Optional[date_type] = None) -> str:
    """File name of the puzzle for a day, ``YYYY-MM-DD.json``."""
    day = day or date_type.today()
    return f"{day.isoformat()}.json"


def load_daily_content(directory: Union[str, Path], day: Optional[date_type] = None) -> Optional[PuzzleContent]:
    """
    Load the curated puzzle for a given day from a directory of daily files.

    Returns:
        The content, or None when no puzzle exists for that day
    """
    path = Path(directory) / daily_filename(day)
    if not path.exists():
        return None
    content = load_content(path)
    if content.date is None:
        content = content.model_copy(update={"date": path.stem})
    return content
