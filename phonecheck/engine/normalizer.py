"""Input normalizer.

Reduces user-typed text to a run of ASCII digits plus a flag recording
whether the text opened with an explicit ``+``.

Rules
-----
- Every character other than a digit or ``+`` is noise and is dropped.
- Any Unicode decimal digit (full-width, Arabic-Indic, Devanagari …) is
  folded to its ASCII value.
- ``+`` (or the full-width ``＋``) counts only in the first retained
  position; a plus anywhere later is noise.
- Nothing but noise raises ``EmptyInputError``.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import unicodedata

from phonecheck.engine.errors import EmptyInputError, InputTooLongError
from phonecheck.engine.models import NormalizedInput

logger = logging.getLogger(__name__)

_PLUS_CHARS = frozenset({"+", "＋"})


def normalize(raw: str, *, max_length: int | None = None) -> NormalizedInput:
    """Return the digits of *raw* and whether it carried a leading ``+``.

    Raises
    ------
    InputTooLongError
        If *raw* is longer than *max_length* characters.
    EmptyInputError
        If *raw* contains no digits.
    """
    if max_length is not None and len(raw) > max_length:
        raise InputTooLongError(f"Input exceeds {max_length} characters")

    digits: list[str] = []
    explicit_plus = False
    for ch in raw:
        if ch in _PLUS_CHARS:
            if not digits and not explicit_plus:
                explicit_plus = True
            continue
        value = unicodedata.decimal(ch, None)
        if value is not None:
            digits.append(str(value))

    if not digits:
        logger.debug("normalize: no digits found (length=%d)", len(raw))
        raise EmptyInputError("Input contains no digits")

    return NormalizedInput(digits="".join(digits), explicit_plus=explicit_plus)
