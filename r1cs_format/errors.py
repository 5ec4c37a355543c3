# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Exceptions raised by the R1CS and assignments codecs.

Decode errors also derive from ValueError, so code that only cares about
"bad input" can keep catching ValueError.
"""


class R1CSFormatError(Exception):
    """Base exception for R1CS format errors."""
    pass


class DecodeError(R1CSFormatError, ValueError):
    """Input bytes could not be decoded."""
    pass


class TruncatedInputError(DecodeError):
    """Input ended before a complete structure was read."""
    pass


class MalformedTagError(DecodeError):
    """Magic bytes at the start of a file do not match the expected tag."""
    pass


class InvalidHeaderError(DecodeError):
    """Header has fewer than four entries or a negative known field."""
    pass


class IntegerOverflowError(DecodeError):
    """Decoded integer does not fit in 64 bits."""
    pass


class EncodeError(R1CSFormatError):
    """A structure could not be serialized."""
    pass
