"""Core input handling: loading, splitting, tile parsing."""
from .errors import PuzzleInputError, TileParseError, GridConfigurationError
from .puzzle_input import load_puzzle_input, lines, sections, integers
from .tiles import Tile, parse_tiles
from .grid_detection import detect_grid_size
