"""Export numbering plans from the ``phonenumbers`` library.

Converts libphonenumber metadata into this repository's YAML schema so
new regions can be added by generating a file and reviewing it, rather
than writing patterns by hand.

Format rules whose capture pattern is not a plain run of ``\\d`` groups,
or whose digit counts fall outside the region's possible lengths, are
dropped: the loader would reject them.
"""
from __future__ import annotations

import logging
from typing import Any

import phonenumbers
import yaml
from phonenumbers import PhoneMetadata

from phonecheck.metadata.region import NumberType, capture_lengths

logger = logging.getLogger(__name__)

# libphonenumber descriptor attribute -> our number type, in match order
_TYPE_DESCRIPTORS: tuple[tuple[str, NumberType], ...] = (
    ("toll_free", NumberType.TOLL_FREE),
    ("premium_rate", NumberType.PREMIUM_RATE),
    ("shared_cost", NumberType.SHARED_COST),
    ("personal_number", NumberType.PERSONAL_NUMBER),
    ("voip", NumberType.VOIP),
    ("pager", NumberType.PAGER),
    ("uan", NumberType.UAN),
    ("voicemail", NumberType.VOICEMAIL),
)


def _pattern(desc: Any) -> str | None:
    if desc is None:
        return None
    return desc.national_number_pattern


def _number_types(meta: PhoneMetadata) -> list[dict[str, str]]:
    types: list[dict[str, str]] = []
    for attr, number_type in _TYPE_DESCRIPTORS:
        pattern = _pattern(getattr(meta, attr, None))
        if pattern:
            types.append({"type": number_type.value, "pattern": pattern})

    fixed = _pattern(meta.fixed_line)
    mobile = _pattern(meta.mobile)
    if fixed and fixed == mobile:
        types.append({"type": NumberType.FIXED_LINE_OR_MOBILE.value, "pattern": fixed})
    else:
        if mobile:
            types.append({"type": NumberType.MOBILE.value, "pattern": mobile})
        if fixed:
            types.append({"type": NumberType.FIXED_LINE.value, "pattern": fixed})
    return types


def _format_rules(meta: PhoneMetadata, possible_lengths: set[int]) -> list[dict[str, Any]]:
    intl_by_pattern = {f.pattern: f.format for f in meta.intl_number_format or ()}

    rules: list[dict[str, Any]] = []
    for fmt in meta.number_format or ():
        lengths = capture_lengths(fmt.pattern)
        if lengths is None or not lengths <= possible_lengths:
            logger.debug("export: %s dropping format %s", meta.id, fmt.pattern)
            continue

        rule: dict[str, Any] = {}
        if fmt.leading_digits_pattern:
            # the last entry is the most specific one
            rule["leading_digits"] = fmt.leading_digits_pattern[-1]
        rule["pattern"] = fmt.pattern
        rule["national"] = fmt.format

        intl = intl_by_pattern.get(fmt.pattern)
        if intl and intl != "NA" and intl != fmt.format:
            rule["international"] = intl

        np_rule = fmt.national_prefix_formatting_rule
        rule["with_national_prefix"] = bool(
            np_rule and meta.national_prefix and np_rule.startswith(meta.national_prefix)
        )
        rules.append(rule)
    return rules


def export_region(region_code: str) -> dict[str, Any]:
    """Return *region_code*'s numbering plan as a loader-compatible mapping.

    Raises
    ------
    KeyError
        If ``phonenumbers`` has no metadata for *region_code*.
    """
    region_code = region_code.upper()
    meta = PhoneMetadata.metadata_for_region(region_code)
    if meta is None:
        raise KeyError(f"phonenumbers has no metadata for region {region_code!r}")

    possible_lengths = sorted(n for n in meta.general_desc.possible_length if n > 0)
    main_region = phonenumbers.region_code_for_country_code(meta.country_code) == region_code

    data: dict[str, Any] = {
        "region_code": region_code,
        "country_calling_code": meta.country_code,
        "main_region": main_region,
    }
    if meta.national_prefix:
        data["national_prefix"] = meta.national_prefix
    if meta.international_prefix and meta.international_prefix.isdigit():
        data["international_prefix"] = meta.international_prefix
    data["possible_lengths"] = possible_lengths
    data["general_pattern"] = meta.general_desc.national_number_pattern
    data["number_types"] = _number_types(meta)
    data["format_rules"] = _format_rules(meta, set(possible_lengths))
    return data


def dump_region(data: dict[str, Any]) -> str:
    """Serialise an exported region as YAML, preserving key order."""
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
