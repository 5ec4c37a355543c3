# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures: a small XOR circuit and its satisfying assignments."""

import pytest

from r1cs_format.encoding import encode_assignments, encode_r1cs
from r1cs_format.model import (
    Assignments,
    Constraint,
    Header,
    LinearCombination,
    R1CS,
    VariableIndex,
)

# Field used by the XOR circuit
CHARACTERISTIC = 64513

ONE = VariableIndex.constant()
X0 = VariableIndex.instance(0)
W0 = VariableIndex.witness(0)
W1 = VariableIndex.witness(1)


def lc(*terms) -> LinearCombination:
    """Build a LinearCombination from (variable, coefficient) pairs."""
    return LinearCombination(list(terms))


def make_xor_r1cs() -> R1CS:
    """
    Build the XOR circuit:

        (1 - w_0) * (w_0) = 0
        (1 - w_1) * (w_1) = 0
        (w_0 * 2) * (w_1) = -x_0 + w_0 + w_1
    """
    header = Header.from_entries(0, [CHARACTERISTIC, 1, 1, 2])
    constraints = [
        Constraint(
            a=lc((ONE, 1), (W0, -1)),
            b=lc((W0, 1)),
            c=lc((ONE, 0)),
        ),
        Constraint(
            a=lc((ONE, 1), (W1, -1)),
            b=lc((W1, 1)),
            c=lc((ONE, 0)),
        ),
        Constraint(
            a=lc((W0, 2)),
            b=lc((W1, 1)),
            c=lc((X0, -1), (W0, 1), (W1, 1)),
        ),
    ]
    return R1CS(header=header, constraints=constraints)


def make_xor_assignments() -> Assignments:
    """Assignments satisfying the XOR circuit: 1, x_0 = 1, w_0 = 0, w_1 = 1."""
    header = Header.from_entries(0, [CHARACTERISTIC, 1, 1, 2])
    return Assignments.from_values(header, [1, 1, 0, 1])


@pytest.fixture
def xor_r1cs() -> R1CS:
    return make_xor_r1cs()


@pytest.fixture
def xor_assignments() -> Assignments:
    return make_xor_assignments()


@pytest.fixture
def r1cs_file(tmp_path, xor_r1cs):
    """XOR circuit written to disk."""
    path = tmp_path / "xor.r1cs"
    path.write_bytes(encode_r1cs(xor_r1cs))
    return path


@pytest.fixture
def assignments_file(tmp_path, xor_assignments):
    """XOR assignments written to disk."""
    path = tmp_path / "xor.assignments"
    path.write_bytes(encode_assignments(xor_assignments))
    return path
