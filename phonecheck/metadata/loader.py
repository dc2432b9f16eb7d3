"""Region metadata YAML loader.

Loads one region per ``*.yaml`` file and returns ``RegionMetadata``
instances.  Files are read in sorted filename order; that order is the
data set's stable order for regions sharing a calling code.

Document shape::

    region_code: GB
    country_calling_code: 44
    main_region: true            # optional, default true
    national_prefix: "0"         # optional
    international_prefix: "00"   # optional
    format_with_national_prefix: true   # optional, default true
    possible_lengths: [10]
    general_pattern: '[1-357-9]\\d{9}'
    number_types:                # optional, ordered
      - type: MOBILE
        pattern: '7[1-57-9]\\d{8}'
    format_rules:                # optional, ordered
      - leading_digits: '2'
        pattern: '(\\d{2})(\\d{4})(\\d{4})'
        national: '\\1 \\2 \\3'
        international: '\\1 \\2 \\3'   # optional
        with_national_prefix: false      # optional, overrides the region
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from phonecheck.metadata.region import FormatRule, NumberType, RegionMetadata

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS: frozenset[str] = frozenset({
    "region_code",
    "country_calling_code",
    "possible_lengths",
    "general_pattern",
})

_OPTIONAL_FIELDS: frozenset[str] = frozenset({
    "main_region",
    "national_prefix",
    "international_prefix",
    "format_with_national_prefix",
    "number_types",
    "format_rules",
})

_RULE_REQUIRED: frozenset[str] = frozenset({"pattern", "national"})

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


def _digits_or_none(value: Any, name: str, source: str) -> str | None:
    if value is None:
        return None
    text = str(value)
    if not text.isdigit():
        raise ValueError(f"{source}: {name} must be a digit string, got {text!r}")
    return text


def _parse_format_rules(raw: Any, source: str) -> tuple[FormatRule, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValueError(f"{source}: format_rules must be a list")

    rules: list[FormatRule] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ValueError(f"{source}: format_rules[{idx}] must be a mapping")
        missing = _RULE_REQUIRED - entry.keys()
        if missing:
            raise ValueError(f"{source}: format_rules[{idx}] missing fields: {sorted(missing)}")
        try:
            rule = FormatRule(
                pattern=entry["pattern"],
                national_template=entry["national"],
                leading_digits=entry.get("leading_digits"),
                international_template=entry.get("international"),
                national_prefix_formatting=entry.get("with_national_prefix"),
            )
        except re.error as exc:
            raise ValueError(f"{source}: format_rules[{idx}] invalid pattern: {exc}") from exc
        rules.append(rule)
    return tuple(rules)


def _parse_number_types(raw: Any, source: str) -> tuple[tuple[NumberType, str], ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ValueError(f"{source}: number_types must be a list")

    parsed: list[tuple[NumberType, str]] = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, dict) or "type" not in entry or "pattern" not in entry:
            raise ValueError(f"{source}: number_types[{idx}] needs 'type' and 'pattern'")
        try:
            number_type = NumberType(str(entry["type"]).upper())
        except ValueError:
            raise ValueError(f"{source}: unknown number type {entry['type']!r}") from None
        parsed.append((number_type, entry["pattern"]))
    return tuple(parsed)


def region_from_dict(data: dict[str, Any], source: str = "<dict>") -> RegionMetadata:
    """Build a ``RegionMetadata`` from a parsed YAML mapping.

    Raises
    ------
    ValueError
        If a required field is missing, an unknown field is present, or
        the region violates a metadata invariant.
    """
    missing = _REQUIRED_FIELDS - data.keys()
    if missing:
        raise ValueError(f"{source}: missing required fields: {sorted(missing)}")

    unknown = data.keys() - _REQUIRED_FIELDS - _OPTIONAL_FIELDS
    if unknown:
        raise ValueError(f"{source}: unknown fields: {sorted(unknown)}")

    lengths = data["possible_lengths"]
    if isinstance(lengths, int):
        lengths = [lengths]

    format_rules = _parse_format_rules(data.get("format_rules"), source)
    number_types = _parse_number_types(data.get("number_types"), source)
    national_prefix = _digits_or_none(data.get("national_prefix"), "national_prefix", source)
    international_prefix = _digits_or_none(
        data.get("international_prefix"), "international_prefix", source
    )

    try:
        return RegionMetadata(
            region_code=str(data["region_code"]).upper(),
            country_calling_code=int(data["country_calling_code"]),
            general_pattern=data["general_pattern"],
            possible_lengths=frozenset(int(n) for n in lengths),
            is_main_region_for_code=bool(data.get("main_region", True)),
            format_rules=format_rules,
            national_prefix=national_prefix,
            international_prefix=international_prefix,
            format_with_national_prefix=bool(data.get("format_with_national_prefix", True)),
            number_types=number_types,
        )
    except re.error as exc:
        raise ValueError(f"{source}: invalid pattern: {exc}") from exc
    except ValueError as exc:
        raise ValueError(f"{source}: {exc}") from exc


def load_region(path: str | Path) -> RegionMetadata:
    """Load a single region from a YAML file.

    Raises
    ------
    ValueError
        If the document is not a mapping or fails validation.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a YAML mapping, got {type(data).__name__}")

    return region_from_dict(data, source=str(path))


def load_all_regions(directory: str | Path = DEFAULT_DATA_DIR) -> list[RegionMetadata]:
    """Load all ``*.yaml`` region files from *directory*, sorted by filename.

    Raises
    ------
    ValueError
        If any YAML file fails validation.
    """
    directory = Path(directory)
    regions: list[RegionMetadata] = []
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".yaml", ".yml"):
            continue
        regions.append(load_region(path))
    logger.debug("load_all_regions: %d region files read from %s", len(regions), directory)
    return regions


def read_version(directory: str | Path = DEFAULT_DATA_DIR) -> str:
    """Return the data set version from ``VERSION``, or ``"unversioned"``."""
    path = Path(directory) / "VERSION"
    if not path.is_file():
        return "unversioned"
    return path.read_text(encoding="utf-8").strip() or "unversioned"
