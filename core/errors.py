"""Error types for malformed puzzle input."""


class PuzzleInputError(ValueError):
    """Base class for input that cannot be turned into a puzzle."""


class TileParseError(PuzzleInputError):
    """
    A tile block could not be parsed.

    Attributes:
        block_index: Position of the offending block in the input (0-based)
        header: Header line of the block, if there was one
    """

    def __init__(self, message, block_index=None, header=None):
        self.block_index = block_index
        self.header = header
        if block_index is not None:
            location = f"block {block_index}"
            if header:
                location += f" ({header!r})"
            message = f"{location}: {message}"
        super().__init__(message)


class GridConfigurationError(PuzzleInputError):
    """The tile set cannot form a square arrangement."""
