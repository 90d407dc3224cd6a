"""
Loading of point datasets from text files.

Each non-blank line holds one point as two whitespace-separated numbers.
Files are only read when a caller asks for them.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Union

from .base.data_structures import Point
from .base.errors import InvalidInput


PathLike = Union[str, Path]


def parse_number(token: str) -> Union[int, float]:
    """Parse a coordinate, preferring ``int`` over ``float``."""
    try:
        return int(token)
    except ValueError:
        return float(token)


def parse_line(line: str) -> Point:
    """Parse one ``"x y"`` line into a point.

    Raises:
        InvalidInput: If the line does not hold exactly two numbers
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise InvalidInput(f"Expected 2 coordinates, got {len(tokens)}: {line!r}")
    try:
        return Point(*(parse_number(token) for token in tokens))
    except ValueError as e:
        raise InvalidInput(f"Invalid coordinate in {line!r}: {e}") from e


def parse_file(path: PathLike) -> List[Point]:
    """Read every point of a coordinate file, in file order.

    Blank lines are skipped.

    Raises:
        InvalidInput: If a line is malformed; the message names the file
            and line number
    """
    path = Path(path)
    points = []
    with path.open() as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                points.append(parse_line(line))
            except InvalidInput as e:
                raise InvalidInput(f"{path}:{lineno}: {e}") from e
    return points


def load_datasets(paths: Iterable[PathLike]) -> Dict[str, List[Point]]:
    """Load several coordinate files keyed by file stem (``data1.txt`` -> ``data1``)."""
    return {Path(path).stem: parse_file(path) for path in paths}
