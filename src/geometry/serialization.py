"""
Serialization — text form of vector-family types

Grammar shared by every type:

    TypeName{field1=v1, field2=v2, ...}

- Fields are rendered in a fixed order with repr(float) (shortest
  round-trip representation of the 64-bit value).
- On parse, fields are matched by name: order is not significant,
  unknown names are ignored, missing names stay NaN and are rejected
  later by the finiteness validation of the model.
- Each scan yields a FieldScan result instead of raising, so callers can
  try several grammars in turn without using exceptions as control flow.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional

# =============================================================================
# EXCEPTIONS
# =============================================================================


class VectorFormatError(ValueError):
    """
    Input string does not match the TypeName{key=value, ...} grammar.

    Raised by every parse routine for a wrong prefix, a segment that does
    not split into exactly two '='-delimited parts, or a value that is not
    a number.
    """

    pass


# =============================================================================
# SCAN RESULT
# =============================================================================


@dataclass(frozen=True)
class FieldScan:
    """Result of scanning a string against one type grammar."""

    values: Optional[dict[str, float]]
    reason: str

    @property
    def ok(self) -> bool:
        return self.values is not None


# =============================================================================
# CODEC
# =============================================================================

FIELD_SEPARATOR = ", "
KEY_VALUE_SEPARATOR = "="


def format_fields(type_name: str, fields: Iterable[tuple[str, float]]) -> str:
    """
    Render fields as TypeName{k1=v1, k2=v2, ...}.

    Args:
        type_name: Literal type name used as prefix
        fields: (name, value) pairs in output order

    Returns:
        Serialized string

    Examples:
        >>> format_fields("Vector2", [("x", 1.0), ("y", -2.5)])
        'Vector2{x=1.0, y=-2.5}'
    """
    body = FIELD_SEPARATOR.join(
        f"{name}{KEY_VALUE_SEPARATOR}{value!r}" for name, value in fields
    )
    return f"{type_name}{{{body}}}"


def scan_fields(s: str, type_name: str, field_names: tuple[str, ...]) -> FieldScan:
    """
    Scan a string against the grammar of one type.

    Args:
        s: String to scan
        type_name: Expected literal type name
        field_names: Recognised field names

    Returns:
        FieldScan with a value per recognised field (NaN where missing),
        or values=None and a reason when the string does not match
    """
    prefix = f"{type_name}{{"
    if not s.startswith(prefix):
        return FieldScan(None, f"Given string is not a {type_name}: missing '{prefix}' prefix")

    body = s[len(prefix):].replace("}", "")
    values = dict.fromkeys(field_names, math.nan)

    for segment in body.split(FIELD_SEPARATOR):
        parts = segment.split(KEY_VALUE_SEPARATOR)
        if len(parts) != 2:
            return FieldScan(None, f"Given string is not a {type_name}: bad segment {segment!r}")

        key, raw = parts
        if key not in values:
            continue

        try:
            values[key] = float(raw)
        except ValueError:
            return FieldScan(None, f"Given string is not a {type_name}: {raw!r} is not a number")

    return FieldScan(values, "")


# =============================================================================
# MIXIN
# =============================================================================


class TextSerializable:
    """
    Text form for models whose constructor takes FIELD_NAMES as keywords.

    Subclasses declare TYPE_NAME and FIELD_NAMES as ClassVars.
    """

    TYPE_NAME: ClassVar[str]
    FIELD_NAMES: ClassVar[tuple[str, ...]]

    def __str__(self) -> str:
        return format_fields(
            self.TYPE_NAME, ((name, getattr(self, name)) for name in self.FIELD_NAMES)
        )

    @classmethod
    def parse(cls, s: str):
        """
        Deserialize a string produced by str().

        Raises:
            VectorFormatError: If the string does not match the grammar
            ValueError: If a field is missing or non-finite
        """
        scan = scan_fields(s, cls.TYPE_NAME, cls.FIELD_NAMES)
        if not scan.ok:
            raise VectorFormatError(scan.reason)
        return cls(**scan.values)

    @classmethod
    def try_parse(cls, s: str):
        """Like parse(), but return None when the grammar does not match."""
        scan = scan_fields(s, cls.TYPE_NAME, cls.FIELD_NAMES)
        if not scan.ok:
            return None
        return cls(**scan.values)
