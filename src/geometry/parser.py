"""
Parser — multi-type parse of serialized vectors

Tries every serializable type in a fixed priority order and returns the
first one whose grammar matches:

    Vector2 → Vector3 → Vector4 → Quaternion → Rotation

Each attempt is a try_parse() returning None on a grammar mismatch.
Errors raised while constructing a matched type (missing or non-finite
fields) are not grammar mismatches and propagate unchanged.
"""

import logging
from typing import Final, Union

from src.geometry.quaternion import Quaternion
from src.geometry.rotation import Rotation
from src.geometry.serialization import VectorFormatError
from src.geometry.vector import Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)

ParsedVector = Union[Vector2, Vector3, Vector4, Quaternion, Rotation]

PARSE_ORDER: Final[tuple[type, ...]] = (Vector2, Vector3, Vector4, Quaternion, Rotation)


def parse_vector(s: str) -> ParsedVector:
    """
    Parse a string produced by str() of any vector-family type.

    Args:
        s: Serialized vector

    Returns:
        Instance of the first type in PARSE_ORDER whose grammar matches

    Raises:
        VectorFormatError: If no type matches
        ValueError: If the matching type rejects the parsed fields

    Examples:
        >>> parse_vector("Vector3{x=1.0, y=2.0, z=3.0}")
        Vector3(x=1.0, y=2.0, z=3.0)
    """
    for candidate in PARSE_ORDER:
        parsed = candidate.try_parse(s)
        if parsed is not None:
            return parsed
        logger.debug("Rejected %s for %r", candidate.__name__, s)

    logger.debug("No vector type matches %r", s)
    raise VectorFormatError(f"String is not a vector: {s!r}")
