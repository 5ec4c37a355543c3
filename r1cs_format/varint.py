# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Varint encoding/decoding (LEB128-style).

Unsigned values use plain LEB128: 7-bit groups, least significant group
first, MSB set on every byte except the last. Signed values are zigzag
mapped onto unsigned ones first, so the sign ends up in bit 0:

    0 -> 0, -1 -> 1, 1 -> 2, -2 -> 3, ...

Both flavours are limited to 64 bits.
"""

from typing import Tuple

from .errors import IntegerOverflowError, TruncatedInputError

U64_MAX = (1 << 64) - 1
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Args:
        value: Integer in the range 0..2**64-1

    Returns:
        Varint-encoded bytes
    """
    if value < 0:
        raise ValueError("Cannot encode negative value as varint")
    if value > U64_MAX:
        raise ValueError(f"Cannot encode {value} as varint: exceeds 64 bits")

    result = []
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7
    result.append(value)
    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a varint from bytes.

    Args:
        data: Bytes containing the varint
        offset: Starting offset in data

    Returns:
        Tuple of (decoded value, new offset after varint)

    Raises:
        TruncatedInputError: If data ends before the final byte
        IntegerOverflowError: If the value does not fit in 64 bits
    """
    value = 0
    shift = 0

    while True:
        if offset >= len(data):
            raise TruncatedInputError(
                f"Varint decode: unexpected end of data at offset {offset}"
            )

        byte = data[offset]
        offset += 1
        value |= (byte & 0x7F) << shift

        if not (byte & 0x80):
            break

        shift += 7
        if shift > 63:
            raise IntegerOverflowError("Varint decode: value too large")

    if value > U64_MAX:
        raise IntegerOverflowError("Varint decode: value too large")

    return value, offset


def zigzag_encode(value: int) -> int:
    """Map a signed 64-bit integer onto an unsigned one."""
    if not I64_MIN <= value <= I64_MAX:
        raise ValueError(f"Cannot encode {value} as signed varint: exceeds 64 bits")
    # Python's >> on negative ints is arithmetic, so this is (n << 1) ^ (n >> 63)
    return ((value << 1) ^ (value >> 63)) & U64_MAX


def zigzag_decode(value: int) -> int:
    """Inverse of zigzag_encode."""
    if value & 1:
        return -((value >> 1) + 1)
    return value >> 1


def encode_signed_varint(value: int) -> bytes:
    """
    Encode a signed integer as a zigzag varint.

    Args:
        value: Integer in the range -2**63..2**63-1

    Returns:
        Varint-encoded bytes
    """
    return encode_varint(zigzag_encode(value))


def decode_signed_varint(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode a zigzag varint from bytes.

    Returns:
        Tuple of (decoded value, new offset after varint)
    """
    value, offset = decode_varint(data, offset)
    return zigzag_decode(value), offset
