"""Low-level puzzle input operations."""

from pathlib import Path
from typing import List


def load_puzzle_input(file_path) -> str:
    """Load puzzle input text from a path."""
    path = Path(file_path)
    if not path.is_file():
        raise ValueError(f"Could not load puzzle input: {file_path}")
    return path.read_text()


def lines(puzzle_input: str) -> List[str]:
    """Split input into lines, ignoring leading and trailing blank space."""
    return puzzle_input.strip().splitlines()


def sections(input_lines: List[str]) -> List[List[str]]:
    """
    Split lines into sections separated by blank lines.

    Args:
        input_lines: Lines as returned by lines()

    Returns:
        List of sections, each a list of non-blank lines
    """
    result = []
    current = []
    for line in input_lines:
        if line.strip():
            current.append(line)
        elif current:
            result.append(current)
            current = []
    if current:
        result.append(current)
    return result


def integers(puzzle_input: str) -> List[int]:
    """Parse one integer per line."""
    values = []
    for line_no, line in enumerate(lines(puzzle_input), start=1):
        try:
            values.append(int(line))
        except ValueError:
            raise ValueError(f"Line {line_no}: expected an integer, got {line!r}") from None
    return values
