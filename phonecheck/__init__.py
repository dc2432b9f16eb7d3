"""Phone number validation engine and its HTTP surface.

The engine lives in ``phonecheck.engine``; ``validate`` is re-exported
here as the single entry point collaborators are expected to call::

    from phonecheck import validate

    result = validate("+44 20 7946 0958")
    result.region_code          # "GB"
    result.international_format # "+44 20 7946 0958"
"""
from __future__ import annotations

from phonecheck.engine.errors import (
    AmbiguousRegionError,
    EmptyInputError,
    InputTooLongError,
    UnknownCallingCodeError,
    UnknownRegionError,
    ValidationError,
)
from phonecheck.engine.models import NumberType, ParsedPhoneNumber
from phonecheck.engine.validator import validate

__all__ = [
    "AmbiguousRegionError",
    "EmptyInputError",
    "InputTooLongError",
    "NumberType",
    "ParsedPhoneNumber",
    "UnknownCallingCodeError",
    "UnknownRegionError",
    "ValidationError",
    "validate",
]
