# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Binary serialization of R1CS and assignments files.

File layouts:

    R1CS file:        | "R1CS" | Header | Sequence of Constraint |
    Assignments file: | "R1as" | Header | 1 + nx + nw SignedVarInts |

    Header:            | version (VarInt) | Sequence of SignedVarInt |
    Sequence:          | count (VarInt) | entry 0 | entry 1 | ... |
    Constraint:        | A | B | C |  (each a LinearCombination)
    LinearCombination: Sequence of (VariableIndex, Coefficient)
    VariableIndex:     SignedVarInt (0 constant, <0 instance, >0 witness)
    Coefficient:       SignedVarInt

Every decode_* helper takes (data, offset) and returns (value, new_offset),
like decode_varint. Trailing bytes after a complete file are ignored.
"""

from typing import Callable, List, Sequence, Tuple, TypeVar

from .errors import EncodeError, MalformedTagError, TruncatedInputError
from .model import (
    Assignments,
    Constraint,
    Header,
    LinearCombination,
    R1CS,
    VariableIndex,
)
from .varint import (
    decode_signed_varint,
    decode_varint,
    encode_signed_varint,
    encode_varint,
)

R1CS_MAGIC = b"\x52\x31\x43\x53"  # "R1CS"
ASSIGNMENTS_MAGIC = b"\x52\x31\x61\x73"  # "R1as"

# Smallest possible encodings, used to reject counts the input cannot hold
_TERM_MIN_SIZE = 2
_CONSTRAINT_MIN_SIZE = 3

T = TypeVar("T")


# Sequence

def encode_sequence(items: Sequence[T], encode_item: Callable[[T], bytes]) -> bytes:
    """Encode a count-prefixed list of items."""
    return encode_varint(len(items)) + b"".join(encode_item(item) for item in items)


def decode_sequence(
    data: bytes,
    offset: int,
    decode_item: Callable[[bytes, int], Tuple[T, int]],
    min_item_size: int = 1,
) -> Tuple[List[T], int]:
    """
    Decode a count-prefixed list of items.

    Args:
        data: Input bytes
        offset: Offset of the count
        decode_item: Decoder for a single item
        min_item_size: Smallest encoded size of one item

    Returns:
        Tuple of (list of items, new offset)

    Raises:
        TruncatedInputError: If the count cannot fit in the remaining data
    """
    count, offset = decode_varint(data, offset)

    remaining = len(data) - offset
    if count * min_item_size > remaining:
        raise TruncatedInputError(
            f"Sequence of {count} entries does not fit in {remaining} bytes "
            f"at offset {offset}"
        )

    items = []
    for _ in range(count):
        item, offset = decode_item(data, offset)
        items.append(item)
    return items, offset


# VariableIndex and Coefficient

def encode_variable_index(index: VariableIndex) -> bytes:
    return encode_signed_varint(index.to_int())


def decode_variable_index(data: bytes, offset: int = 0) -> Tuple[VariableIndex, int]:
    value, offset = decode_signed_varint(data, offset)
    return VariableIndex.from_int(value), offset


encode_coefficient = encode_signed_varint
decode_coefficient = decode_signed_varint


# LinearCombination

def _encode_term(term: Tuple[VariableIndex, int]) -> bytes:
    index, coefficient = term
    return encode_variable_index(index) + encode_coefficient(coefficient)


def _decode_term(data: bytes, offset: int) -> Tuple[Tuple[VariableIndex, int], int]:
    index, offset = decode_variable_index(data, offset)
    coefficient, offset = decode_coefficient(data, offset)
    return (index, coefficient), offset


def encode_linear_combination(lc: LinearCombination) -> bytes:
    """Encode a linear combination as a sequence of terms."""
    return encode_sequence(lc.terms, _encode_term)


def decode_linear_combination(
    data: bytes, offset: int = 0
) -> Tuple[LinearCombination, int]:
    """
    Decode a linear combination.

    Terms are returned exactly as stored: no sorting, no merging and no
    rejection of zero coefficients.
    """
    terms, offset = decode_sequence(data, offset, _decode_term, _TERM_MIN_SIZE)
    return LinearCombination(terms), offset


# Constraint

def encode_constraint(constraint: Constraint) -> bytes:
    """Encode a constraint as A, B, C back to back."""
    return (
        encode_linear_combination(constraint.a)
        + encode_linear_combination(constraint.b)
        + encode_linear_combination(constraint.c)
    )


def decode_constraint(data: bytes, offset: int = 0) -> Tuple[Constraint, int]:
    """Decode a constraint."""
    a, offset = decode_linear_combination(data, offset)
    b, offset = decode_linear_combination(data, offset)
    c, offset = decode_linear_combination(data, offset)
    return Constraint(a=a, b=b, c=c), offset


# Header

def encode_header(header: Header) -> bytes:
    """Encode a header, including any entries beyond the known four."""
    for name in ("characteristic", "degree", "num_instance", "num_witness"):
        if getattr(header, name) < 0:
            raise ValueError(f"Header field {name} is negative")
    return encode_varint(header.version) + encode_sequence(
        header.to_entries(), encode_signed_varint
    )


def decode_header(data: bytes, offset: int = 0) -> Tuple[Header, int]:
    """
    Decode a header.

    Raises:
        InvalidHeaderError: If fewer than four entries are present or one
            of the known fields is negative
    """
    version, offset = decode_varint(data, offset)
    entries, offset = decode_sequence(data, offset, decode_signed_varint)
    return Header.from_entries(version, entries), offset


# Files

def _check_magic(data: bytes, magic: bytes, name: str) -> int:
    """Check the magic tag and return the offset just after it."""
    head = bytes(data[:len(magic)])
    if head != magic[:len(head)]:
        raise MalformedTagError(f"Not an {name} file: bad magic {head!r}")
    if len(head) < len(magic):
        raise TruncatedInputError(f"{name} file truncated inside magic tag")
    return len(magic)


def encode_r1cs(r1cs: R1CS) -> bytes:
    """
    Encode an R1CS file.

    Raises:
        EncodeError: If a value cannot be represented in the file format
    """
    try:
        return (
            R1CS_MAGIC
            + encode_header(r1cs.header)
            + encode_sequence(r1cs.constraints, encode_constraint)
        )
    except ValueError as e:
        raise EncodeError(f"could not encode R1CS: {e}") from e


def decode_r1cs(data: bytes) -> R1CS:
    """
    Decode an R1CS file.

    Args:
        data: Complete file contents

    Returns:
        Decoded R1CS

    Raises:
        DecodeError: If data is not a well-formed R1CS file
    """
    offset = _check_magic(data, R1CS_MAGIC, "R1CS")
    header, offset = decode_header(data, offset)
    constraints, offset = decode_sequence(
        data, offset, decode_constraint, _CONSTRAINT_MIN_SIZE
    )
    return R1CS(header=header, constraints=constraints)


def _check_assignment_layout(assignments: Assignments) -> None:
    header = assignments.header
    if len(assignments.values) != header.num_assignments:
        raise ValueError(
            f"header expects {header.num_assignments} assignments, "
            f"got {len(assignments.values)}"
        )

    nx = header.num_instance
    expected = [VariableIndex.constant()]
    expected += [VariableIndex.instance(j) for j in range(nx)]
    expected += [VariableIndex.witness(j) for j in range(header.num_witness)]
    for position, (assignment, index) in enumerate(zip(assignments.values, expected)):
        if assignment.index != index:
            raise ValueError(
                f"assignment {position} is for {assignment.index}, expected {index}"
            )


def encode_assignments(assignments: Assignments) -> bytes:
    """
    Encode an assignments file.

    Raises:
        EncodeError: If the values do not match the header layout or a
            value cannot be represented
    """
    try:
        _check_assignment_layout(assignments)
        return (
            ASSIGNMENTS_MAGIC
            + encode_header(assignments.header)
            + b"".join(encode_signed_varint(a.value) for a in assignments.values)
        )
    except ValueError as e:
        raise EncodeError(f"could not encode Assignments: {e}") from e


def decode_assignments(data: bytes) -> Assignments:
    """
    Decode an assignments file.

    The value array has no length prefix; its size comes from the
    header's instance and witness counts.

    Raises:
        DecodeError: If data is not a well-formed assignments file
    """
    offset = _check_magic(data, ASSIGNMENTS_MAGIC, "assignments")
    header, offset = decode_header(data, offset)

    count = header.num_assignments
    remaining = len(data) - offset
    if count > remaining:
        raise TruncatedInputError(
            f"Header declares {count} assignments but only {remaining} bytes remain"
        )

    values = []
    for _ in range(count):
        value, offset = decode_signed_varint(data, offset)
        values.append(value)

    return Assignments.from_values(header, values)
