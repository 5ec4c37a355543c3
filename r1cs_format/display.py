# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Human-readable rendering of decoded R1CS and assignments files.

Example output for a constraint over a field of characteristic 64513:

    (1 - w_0) * (w_0) = 0
    (w_0 * 2) * (w_1) = -x_0 + w_0 + w_1
"""

from typing import List, Tuple

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

# Coefficients this close below the characteristic are shown as negatives
NEGATIVE_DISPLAY_RANGE = 10


def _split_sign(coefficient: int, characteristic: int) -> Tuple[bool, int]:
    """Return (negate, magnitude) for displaying a coefficient."""
    # Field elements just below p are treated as small negatives
    distance = characteristic - coefficient
    if 1 <= distance <= NEGATIVE_DISPLAY_RANGE:
        return True, distance
    if coefficient < 0:
        return True, -coefficient
    return False, coefficient


def format_variable(index: VariableIndex) -> str:
    """Render a variable name: x_j for instances, w_j for witnesses."""
    if index.kind == VariableKind.INSTANCE:
        return f"x_{index.index}"
    if index.kind == VariableKind.WITNESS:
        return f"w_{index.index}"
    return "Constant"


def format_linear_combination(lc: LinearCombination, characteristic: int) -> str:
    """Render a linear combination, e.g. "1 - w_0 + x_1 * 3"."""
    if not lc.terms:
        return "0"

    parts: List[str] = []
    for i, (index, coefficient) in enumerate(lc.terms):
        negate, k = _split_sign(coefficient, characteristic)
        if negate:
            parts.append(" - " if i > 0 else "-")
        elif i > 0:
            parts.append(" + ")

        if index.kind == VariableKind.CONSTANT:
            parts.append(str(k))
        elif k == 1:
            parts.append(format_variable(index))
        else:
            parts.append(f"{format_variable(index)} * {k}")

    return "".join(parts)


def format_constraint(constraint: Constraint, characteristic: int) -> str:
    """Render a constraint as "(A) * (B) = C"."""
    a = format_linear_combination(constraint.a, characteristic)
    b = format_linear_combination(constraint.b, characteristic)
    c = format_linear_combination(constraint.c, characteristic)
    return f"({a}) * ({b}) = {c}"


def format_assignment(assignment: Assignment) -> str:
    return f"{format_variable(assignment.index)} = {assignment.value}"


def format_header(header: Header) -> str:
    return "\n".join([
        f"Version:           {header.version}",
        f"Characteristic:    {header.characteristic}",
        f"Degree:            {header.degree}",
        f"Input variables:   {header.num_instance}",
        f"Witness variables: {header.num_witness}",
    ])


def format_r1cs(r1cs: R1CS) -> str:
    """Render an R1CS file: header fields, then one constraint per line."""
    p = r1cs.header.characteristic
    lines = [format_header(r1cs.header), "Constraints:"]
    lines.extend(f"  {format_constraint(c, p)}" for c in r1cs.constraints)
    return "\n".join(lines)


def format_assignments(assignments: Assignments) -> str:
    """Render an assignments file: header fields, then one value per line."""
    lines = [format_header(assignments.header), "Assignments:"]
    lines.extend(f"  {format_assignment(a)}" for a in assignments.values)
    return "\n".join(lines)
