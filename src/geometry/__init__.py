"""
Geometry — immutable vectors, quaternions and axis/angle rotations.

Contains the vector-family value types, their text serialization and the
multi-type parser.
"""

from src.geometry.parser import PARSE_ORDER, ParsedVector, parse_vector
from src.geometry.quaternion import Quaternion
from src.geometry.rotation import Rotation
from src.geometry.serialization import (
    FieldScan,
    TextSerializable,
    VectorFormatError,
    format_fields,
    scan_fields,
)
from src.geometry.vector import Vector, Vector2, Vector3, Vector4

__all__ = [
    # Vectors
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    # Rotations
    "Quaternion",
    "Rotation",
    # Serialization
    "FieldScan",
    "TextSerializable",
    "VectorFormatError",
    "format_fields",
    "scan_fields",
    # Parser
    "PARSE_ORDER",
    "ParsedVector",
    "parse_vector",
]
