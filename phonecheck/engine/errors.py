"""Typed failures raised by ``validate``.

Only malformed or unresolvable input raises.  A well-formed number that
matches no region is returned as a ``ParsedPhoneNumber`` with
``is_valid=False``.
"""
from __future__ import annotations


class ValidationError(Exception):
    """Base class for input the engine cannot turn into a phone number."""

    code = "validation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInputError(ValidationError):
    """No digit or ``+`` remained after normalization."""

    code = "empty_input"


class InputTooLongError(ValidationError):
    code = "too_long"


class AmbiguousRegionError(ValidationError):
    """The calling code cannot be determined.

    Raised when there is no ``+``, no recognised IDD prefix and no default
    region.  The caller should ask for a region or a ``+`` prefix.
    """

    code = "ambiguous_region"


class UnknownCallingCodeError(AmbiguousRegionError):
    """An explicit ``+``/IDD prefix was followed by digits that are not a calling code."""

    code = "invalid_country_code"


class UnknownRegionError(AmbiguousRegionError):
    """The supplied default region is not in the metadata store."""

    code = "unknown_region"
