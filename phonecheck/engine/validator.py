"""Validation facade.

``validate`` is the one operation collaborators call.  It composes the
normalizer, resolver, matcher and formatter and is a pure function of
its arguments and the metadata snapshot: identical input always yields
an identical result.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from dataclasses import replace

from phonecheck.engine.errors import EmptyInputError
from phonecheck.engine.formatter import format_number
from phonecheck.engine.matcher import match
from phonecheck.engine.models import ParsedPhoneNumber
from phonecheck.engine.normalizer import normalize
from phonecheck.engine.resolver import resolve
from phonecheck.metadata.store import MetadataStore, get_metadata_store

logger = logging.getLogger(__name__)


def validate(
    raw_input: str,
    default_region: str | None = None,
    *,
    store: MetadataStore | None = None,
    max_length: int | None = None,
) -> ParsedPhoneNumber:
    """Parse *raw_input* into a ``ParsedPhoneNumber``.

    Parameters
    ----------
    raw_input:
        Text as typed by the user, formatting noise included.
    default_region:
        Region code assumed when *raw_input* has neither a ``+`` nor an
        international dial-out prefix.
    store:
        Metadata to validate against.  Defaults to the process-wide store.
    max_length:
        Longest accepted input.  Defaults to ``MAX_INPUT_LENGTH``.

    Returns
    -------
    ParsedPhoneNumber
        ``is_valid`` tells whether a region accepted the number; invalid
        numbers are returned, not raised.

    Raises
    ------
    ValidationError
        ``EmptyInputError``, ``InputTooLongError`` or
        ``AmbiguousRegionError`` (and its subclasses) for input that
        cannot be resolved to a calling code at all.
    """
    if raw_input is None:
        raise EmptyInputError("Input contains no digits")

    if store is None:
        store = get_metadata_store()
    if max_length is None:
        from phonecheck.core.settings import get_settings

        max_length = get_settings().max_input_length

    normalized = normalize(raw_input, max_length=max_length)
    resolution = resolve(normalized, store, default_region)
    parsed = match(resolution, store, raw_input)

    if parsed.is_valid:
        formatted = format_number(parsed, store)
        parsed = replace(
            parsed,
            national_format=formatted.national_format,
            international_format=formatted.international_format,
            e164_format=formatted.e164_format,
        )

    logger.debug(
        "validate: calling_code=%d region=%s valid=%s",
        parsed.country_calling_code,
        parsed.region_code,
        parsed.is_valid,
    )
    return parsed
