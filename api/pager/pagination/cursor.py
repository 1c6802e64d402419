"""Cursor token codec for keyset pagination.

A token is the standard base64 encoding (with padding) of the UTF-8 string
``"<uuid>;<serial>;<direction-code>"``. The format is fixed: tokens issued by
earlier releases must keep decoding to the same values.

Neither a canonical UUID nor a decimal integer can contain the separator, so
the payload is split on it without escaping. Anything that does not split into
exactly three parseable fields is rejected as malformed.
"""

import base64
import binascii
import logging
import re
from enum import Enum
from typing import NamedTuple
from uuid import UUID

from .errors import (
    DirectionMismatchError,
    InherentlyInvalidDirectionError,
    MalformedTokenError,
)


logger = logging.getLogger(__name__)

SEPARATOR = ";"

# Wire code reserved for "no usable direction". Never issued, always rejected.
INVALID_DIRECTION_CODE = 3

SERIAL_MIN = -(2 ** 63)
SERIAL_MAX = 2 ** 63 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")
_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class Direction(Enum):
    """Traversal direction embedded in a token."""

    PREV = 1
    NEXT = 2

    def __str__(self) -> str:
        return self.name.lower()


class CursorKey(NamedTuple):
    """Sort key of a row: identifier plus monotonic serial tiebreaker."""

    id: UUID
    serial: int


class CursorData(NamedTuple):
    """Decoded contents of a cursor token."""

    id: UUID
    serial: int
    direction: Direction


def encode_cursor(item_id: UUID, serial: int, direction: Direction) -> str:
    """Encode a row key and direction into an opaque token.

    Args:
        item_id: Identifier of the boundary row
        serial: Serial number of the boundary row
        direction: Direction the token navigates to

    Returns:
        Base64 encoded cursor string
    """
    payload = f"{item_id}{SEPARATOR}{serial}{SEPARATOR}{direction.value}"
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def _malformed(reason: str) -> MalformedTokenError:
    logger.debug(f"Rejected cursor token: {reason}")
    return MalformedTokenError(f"invalid token: {reason}")


def parse_integer(value: str) -> int:
    """Parse an optionally signed run of ASCII digits.

    Underscores, whitespace and non-ASCII digits, all of which int() accepts,
    raise ValueError.
    """
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def decode_cursor(token: str, expected_direction: Direction) -> CursorData:
    """Decode a cursor token and check it navigates in the expected direction.

    Args:
        token: Base64 encoded cursor string
        expected_direction: Direction the caller is about to traverse

    Returns:
        Decoded cursor data

    Raises:
        MalformedTokenError: If the token is not base64, has the wrong number
            of fields, or a field fails to parse
        InherentlyInvalidDirectionError: If the token embeds the invalid
            direction code
        DirectionMismatchError: If the token's direction differs from
            ``expected_direction``
    """
    try:
        payload = base64.b64decode(token.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise _malformed("not base64") from e

    fields = payload.split(SEPARATOR)
    if len(fields) != 3:
        raise _malformed("incorrect format")
    raw_id, raw_serial, raw_direction = fields

    if not _CANONICAL_UUID.fullmatch(raw_id):
        raise _malformed("invalid uuid")
    item_id = UUID(raw_id)

    try:
        serial = parse_integer(raw_serial)
    except ValueError as e:
        raise _malformed("invalid serial number") from e
    if not SERIAL_MIN <= serial <= SERIAL_MAX:
        raise _malformed("serial number out of range")

    try:
        code = parse_integer(raw_direction)
    except ValueError as e:
        raise _malformed("non-integer direction") from e

    if code == INVALID_DIRECTION_CODE:
        logger.debug("Rejected cursor token: invalid direction sentinel")
        raise InherentlyInvalidDirectionError()

    try:
        direction = Direction(code)
    except ValueError as e:
        raise _malformed("unknown direction value") from e

    if direction != expected_direction:
        logger.debug(f"Rejected cursor token: expected {expected_direction}, got {direction}")
        raise DirectionMismatchError(expected_direction, direction)

    return CursorData(id=item_id, serial=serial, direction=direction)
