# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
In-memory representation of R1CS and assignments files.

These are plain value types; serialization lives in encoding.py and text
rendering in display.py.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple

from .errors import InvalidHeaderError
from .varint import I64_MAX


class VariableKind(IntEnum):
    """Kind of variable a VariableIndex refers to."""
    CONSTANT = 0
    INSTANCE = 1
    WITNESS = 2

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class VariableIndex:
    """
    Reference to the constant, an instance variable or a witness variable.

    On the wire this is a single signed integer:
        0  -> constant
        -n -> instance n - 1
        +n -> witness n - 1
    """
    kind: VariableKind
    index: int = 0

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Variable index must be non-negative, got {self.index}")
        if self.kind == VariableKind.CONSTANT and self.index != 0:
            raise ValueError("Constant variable has no index")
        if self.kind == VariableKind.INSTANCE and self.index > I64_MAX:
            raise ValueError(f"Instance index {self.index} out of range")
        if self.kind == VariableKind.WITNESS and self.index > I64_MAX - 1:
            raise ValueError(f"Witness index {self.index} out of range")

    @classmethod
    def constant(cls) -> "VariableIndex":
        return cls(VariableKind.CONSTANT)

    @classmethod
    def instance(cls, index: int) -> "VariableIndex":
        return cls(VariableKind.INSTANCE, index)

    @classmethod
    def witness(cls, index: int) -> "VariableIndex":
        return cls(VariableKind.WITNESS, index)

    @classmethod
    def from_int(cls, value: int) -> "VariableIndex":
        """Build a VariableIndex from its signed integer form."""
        if value == 0:
            return cls.constant()
        if value < 0:
            return cls.instance(-value - 1)
        return cls.witness(value - 1)

    def to_int(self) -> int:
        """Return the signed integer form of this index."""
        if self.kind == VariableKind.CONSTANT:
            return 0
        if self.kind == VariableKind.INSTANCE:
            return -(self.index + 1)
        return self.index + 1


@dataclass
class LinearCombination:
    """
    Weighted sum of variables, as (variable, coefficient) pairs.

    Producers should emit non-zero coefficients ordered as the constant,
    then instances by descending index, then witnesses by ascending index.
    Nothing here enforces it.
    """
    terms: List[Tuple[VariableIndex, int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.terms)


@dataclass
class Constraint:
    """Rank-1 constraint A * B = C."""
    a: LinearCombination
    b: LinearCombination
    c: LinearCombination


@dataclass
class Header:
    """
    Versioned file header shared by R1CS and assignments files.

    Entries after the four known fields are kept in `ignored` so they
    survive a decode/encode round trip.
    """
    version: int
    characteristic: int
    degree: int
    num_instance: int
    num_witness: int
    ignored: List[int] = field(default_factory=list)

    @classmethod
    def from_entries(cls, version: int, entries: List[int]) -> "Header":
        """
        Build a header from its version and list of signed entries.

        Raises:
            InvalidHeaderError: If fewer than four entries are present or
                one of the first four is negative
        """
        if len(entries) < 4:
            raise InvalidHeaderError(
                f"Header has {len(entries)} entries, expected at least 4"
            )

        names = ("characteristic", "degree", "num_instance", "num_witness")
        for name, value in zip(names, entries):
            if value < 0:
                raise InvalidHeaderError(f"Header field {name} is negative: {value}")

        return cls(
            version=version,
            characteristic=entries[0],
            degree=entries[1],
            num_instance=entries[2],
            num_witness=entries[3],
            ignored=list(entries[4:]),
        )

    def to_entries(self) -> List[int]:
        """Return the header entries in file order."""
        return [
            self.characteristic,
            self.degree,
            self.num_instance,
            self.num_witness,
        ] + list(self.ignored)

    @property
    def num_assignments(self) -> int:
        """Number of values in an assignments file using this header."""
        return 1 + self.num_instance + self.num_witness


@dataclass
class R1CS:
    """A constraint system: header plus constraints."""
    header: Header
    constraints: List[Constraint] = field(default_factory=list)


@dataclass
class Assignment:
    """Value assigned to a single variable."""
    index: VariableIndex
    value: int


@dataclass
class Assignments:
    """
    Values for every variable of a constraint system.

    `values` holds the constant first, then the instance variables, then
    the witness variables, as laid out by the header.
    """
    header: Header
    values: List[Assignment] = field(default_factory=list)

    @classmethod
    def from_values(cls, header: Header, values: List[int]) -> "Assignments":
        """
        Pair a flat list of values with their variables.

        Raises:
            ValueError: If the list length does not match the header
        """
        if len(values) != header.num_assignments:
            raise ValueError(
                f"Expected {header.num_assignments} values, got {len(values)}"
            )

        nx = header.num_instance
        result = [Assignment(VariableIndex.constant(), values[0])]
        result.extend(
            Assignment(VariableIndex.instance(j), v)
            for j, v in enumerate(values[1:1 + nx])
        )
        result.extend(
            Assignment(VariableIndex.witness(j), v)
            for j, v in enumerate(values[1 + nx:])
        )
        return cls(header=header, values=result)
