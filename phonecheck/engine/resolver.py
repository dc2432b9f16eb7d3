"""Calling-code resolver.

Turns normalized digits into the ordered list of regions the matcher
should try.

Resolution order
----------------
1. Explicit ``+``: the calling code is read from the leading digits.
2. Default region given: if the digits open with that region's IDD
   prefix (e.g. ``011`` in the US), strip it and read the calling code;
   otherwise the default region is the only candidate.
3. No default region: try the two widespread IDD prefixes, "011" (North
   America) and "00" (most of the world).  Region-specific ones such as
   "0011" or "810" need the default region to be recognised.
4. Nothing applies: ``AmbiguousRegionError``.

Calling codes are read greedily, three digits down to one.  Codes in the
data set are prefix-free, so the first registered length is the only one.
"""
from __future__ import annotations

import logging

from phonecheck.engine.errors import (
    AmbiguousRegionError,
    UnknownCallingCodeError,
    UnknownRegionError,
)
from phonecheck.engine.models import CountryCodeSource, NormalizedInput, Resolution
from phonecheck.metadata.store import MAX_CALLING_CODE_DIGITS, MetadataStore

logger = logging.getLogger(__name__)

COMMON_IDD_PREFIXES: tuple[str, ...] = ("011", "00")


def extract_calling_code(digits: str, store: MetadataStore) -> tuple[int, str] | None:
    """Split *digits* into ``(calling_code, rest)``, or ``None`` if no code matches."""
    for size in range(min(MAX_CALLING_CODE_DIGITS, len(digits)), 0, -1):
        prefix = digits[:size]
        if prefix.startswith("0"):
            # no calling code begins with 0
            return None
        code = int(prefix)
        if store.has_calling_code(code):
            return code, digits[size:]
    return None


def _from_code(
    digits: str, store: MetadataStore, source: CountryCodeSource
) -> Resolution | None:
    extracted = extract_calling_code(digits, store)
    if extracted is None:
        return None
    code, rest = extracted
    resolution = Resolution(
        country_calling_code=code,
        candidates=tuple(r.region_code for r in store.regions_for_calling_code(code)),
        national_digits=rest,
        source=source,
    )
    logger.debug("resolve: source=%s candidates=%s", source.value, resolution.pairs())
    return resolution


def resolve(
    normalized: NormalizedInput,
    store: MetadataStore,
    default_region: str | None = None,
) -> Resolution:
    """Return the candidate regions for *normalized*.

    Raises
    ------
    UnknownCallingCodeError
        An explicit ``+`` or IDD prefix is followed by an unregistered code.
    UnknownRegionError
        *default_region* is needed but not in *store*.
    AmbiguousRegionError
        No ``+``, no IDD prefix and no default region.
    """
    digits = normalized.digits

    if normalized.explicit_plus:
        resolution = _from_code(digits, store, CountryCodeSource.PLUS)
        if resolution is None:
            raise UnknownCallingCodeError("No known country calling code follows '+'")
        return resolution

    if default_region:
        try:
            region = store.get(default_region)
        except KeyError:
            raise UnknownRegionError(f"Unknown default region: {default_region!r}") from None

        idd = region.international_prefix
        if idd and digits.startswith(idd) and len(digits) > len(idd):
            resolution = _from_code(digits[len(idd):], store, CountryCodeSource.IDD)
            if resolution is None:
                raise UnknownCallingCodeError(
                    f"No known country calling code follows the {region.region_code} "
                    "international prefix"
                )
            return resolution

        logger.debug("resolve: using default region %s", region.region_code)
        return Resolution(
            country_calling_code=region.country_calling_code,
            candidates=(region.region_code,),
            national_digits=digits,
            source=CountryCodeSource.DEFAULT_REGION,
        )

    for idd in COMMON_IDD_PREFIXES:
        if digits.startswith(idd) and len(digits) > len(idd):
            resolution = _from_code(digits[len(idd):], store, CountryCodeSource.IDD)
            if resolution is not None:
                return resolution

    raise AmbiguousRegionError(
        "Cannot determine the country: add a '+' and country code or supply a default region"
    )
