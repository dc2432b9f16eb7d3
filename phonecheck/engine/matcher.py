"""Number matcher.

Tries each candidate region in resolver order and keeps the first whose
length and general-pattern checks both pass.  A configured national
prefix is stripped when present but never required: the digits are
tried with the prefix removed first, then as typed.

No match is a normal outcome, returned with ``is_valid=False`` and
``region_code="unknown"``.
"""
from __future__ import annotations

import logging

from phonecheck.engine.models import UNKNOWN_REGION, ParsedPhoneNumber, Resolution
from phonecheck.metadata.region import NumberType, RegionMetadata
from phonecheck.metadata.store import MetadataStore

logger = logging.getLogger(__name__)


def _nsn_candidates(region: RegionMetadata, digits: str) -> list[str]:
    stripped = region.strip_national_prefix(digits)
    if stripped:
        return [stripped, digits]
    return [digits]


def match(resolution: Resolution, store: MetadataStore, raw_input: str) -> ParsedPhoneNumber:
    """Return the parsed number for the first candidate region that accepts the digits."""
    digits = resolution.national_digits

    for region_code in resolution.candidates:
        region = store.get(region_code)
        for nsn in _nsn_candidates(region, digits):
            if region.is_valid_nsn(nsn):
                number_type = region.classify(nsn)
                logger.debug(
                    "match: region=%s type=%s nsn_length=%d",
                    region.region_code,
                    number_type.value,
                    len(nsn),
                )
                return ParsedPhoneNumber(
                    country_calling_code=resolution.country_calling_code,
                    region_code=region.region_code,
                    national_significant_number=nsn,
                    raw_input=raw_input,
                    number_type=number_type,
                    is_valid=True,
                    candidate_regions=resolution.candidates,
                    country_code_source=resolution.source,
                )

    # Best-effort NSN for diagnostics: strip the first candidate's prefix.
    nsn = digits
    if resolution.candidates:
        nsn = _nsn_candidates(store.get(resolution.candidates[0]), digits)[0]

    logger.debug(
        "match: no region accepted calling_code=%d nsn_length=%d",
        resolution.country_calling_code,
        len(nsn),
    )
    return ParsedPhoneNumber(
        country_calling_code=resolution.country_calling_code,
        region_code=UNKNOWN_REGION,
        national_significant_number=nsn,
        raw_input=raw_input,
        number_type=NumberType.UNKNOWN,
        is_valid=False,
        candidate_regions=resolution.candidates,
        country_code_source=resolution.source,
    )
