# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
R1CS file format - Python codec library.

This package reads and writes the binary R1CS constraint system format
and its companion assignments format, and renders both as text.

Example usage:
    from r1cs_format import decode_r1cs, encode_r1cs, format_r1cs

    with open("circuit.r1cs", "rb") as f:
        r1cs = decode_r1cs(f.read())

    print(f"Characteristic: {r1cs.header.characteristic}")
    print(format_r1cs(r1cs))

    data = encode_r1cs(r1cs)
"""

from .display import (
    format_assignment,
    format_assignments,
    format_constraint,
    format_header,
    format_linear_combination,
    format_r1cs,
    format_variable,
)
from .encoding import (
    ASSIGNMENTS_MAGIC,
    R1CS_MAGIC,
    decode_assignments,
    decode_constraint,
    decode_header,
    decode_linear_combination,
    decode_r1cs,
    decode_sequence,
    decode_variable_index,
    encode_assignments,
    encode_constraint,
    encode_header,
    encode_linear_combination,
    encode_r1cs,
    encode_sequence,
    encode_variable_index,
)
from .errors import (
    R1CSFormatError,
    DecodeError,
    TruncatedInputError,
    MalformedTagError,
    InvalidHeaderError,
    IntegerOverflowError,
    EncodeError,
)
from .model import (
    Assignment,
    Assignments,
    Constraint,
    Header,
    LinearCombination,
    R1CS,
    VariableIndex,
    VariableKind,
)
from .varint import (
    encode_varint,
    decode_varint,
    encode_signed_varint,
    decode_signed_varint,
    zigzag_encode,
    zigzag_decode,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "VariableKind",
    "VariableIndex",
    "LinearCombination",
    "Constraint",
    "Header",
    "R1CS",
    "Assignment",
    "Assignments",
    # File codecs
    "R1CS_MAGIC",
    "ASSIGNMENTS_MAGIC",
    "encode_r1cs",
    "decode_r1cs",
    "encode_assignments",
    "decode_assignments",
    # Structure codecs
    "encode_sequence",
    "decode_sequence",
    "encode_variable_index",
    "decode_variable_index",
    "encode_linear_combination",
    "decode_linear_combination",
    "encode_constraint",
    "decode_constraint",
    "encode_header",
    "decode_header",
    # Display
    "format_variable",
    "format_linear_combination",
    "format_constraint",
    "format_assignment",
    "format_header",
    "format_r1cs",
    "format_assignments",
    # Errors
    "R1CSFormatError",
    "DecodeError",
    "TruncatedInputError",
    "MalformedTagError",
    "InvalidHeaderError",
    "IntegerOverflowError",
    "EncodeError",
    # Varint
    "encode_varint",
    "decode_varint",
    "encode_signed_varint",
    "decode_signed_varint",
    "zigzag_encode",
    "zigzag_decode",
]
