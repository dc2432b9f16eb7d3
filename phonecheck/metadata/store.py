"""Metadata store — the read-only region table shared by the engine.

Built once from a list of ``RegionMetadata`` and never mutated
afterwards.  Supports the three lookups the engine needs:

* by region code,
* by calling code, returning every sharing region with the main region
  first and the rest in load order,
* enumeration, in load order.

Construction validates the cross-region invariants that a single YAML
file cannot check on its own (unique region codes, one main region per
calling code, prefix-free calling codes).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from phonecheck.metadata.loader import DEFAULT_DATA_DIR, load_all_regions, read_version
from phonecheck.metadata.region import RegionMetadata

logger = logging.getLogger(__name__)

MAX_CALLING_CODE_DIGITS = 3


class MetadataStore:
    """Immutable lookup table of region metadata."""

    def __init__(self, regions: Iterable[RegionMetadata], version: str = "unversioned") -> None:
        ordered = tuple(regions)
        by_region: dict[str, RegionMetadata] = {}
        grouped: dict[int, list[RegionMetadata]] = {}

        for region in ordered:
            if region.region_code in by_region:
                raise ValueError(f"Duplicate region code: {region.region_code!r}")
            by_region[region.region_code] = region
            grouped.setdefault(region.country_calling_code, []).append(region)

        by_code: dict[int, tuple[RegionMetadata, ...]] = {}
        for code, members in grouped.items():
            if not 1 <= len(str(code)) <= MAX_CALLING_CODE_DIGITS:
                raise ValueError(f"Calling code {code} must have 1-{MAX_CALLING_CODE_DIGITS} digits")
            mains = [r for r in members if r.is_main_region_for_code]
            if len(mains) != 1:
                raise ValueError(
                    f"Calling code {code} needs exactly one main region, "
                    f"found {sorted(r.region_code for r in mains)}"
                )
            # sorted() is stable, so secondary regions keep load order
            by_code[code] = tuple(sorted(members, key=lambda r: not r.is_main_region_for_code))

        codes = [str(c) for c in by_code]
        for code in codes:
            for other in codes:
                if other != code and other.startswith(code):
                    raise ValueError(f"Calling code {code} is a prefix of calling code {other}")

        self._regions = ordered
        self._by_region = MappingProxyType(by_region)
        self._by_code = MappingProxyType(by_code)
        self._version = version

    @property
    def version(self) -> str:
        return self._version

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, region_code: object) -> bool:
        return isinstance(region_code, str) and region_code.upper() in self._by_region

    def get(self, region_code: str) -> RegionMetadata:
        """Return the region with *region_code* or raise ``KeyError``."""
        try:
            return self._by_region[region_code.upper()]
        except KeyError:
            raise KeyError(f"Region not found: {region_code!r}")

    def regions_for_calling_code(self, calling_code: int) -> tuple[RegionMetadata, ...]:
        """Return every region dialled under *calling_code*, main region first.

        Returns an empty tuple for an unregistered code.
        """
        return self._by_code.get(calling_code, ())

    def has_calling_code(self, calling_code: int) -> bool:
        return calling_code in self._by_code

    def calling_codes(self) -> list[int]:
        return sorted(self._by_code)

    def list_all(self) -> list[RegionMetadata]:
        """Return all regions in load order."""
        return list(self._regions)

    @classmethod
    def from_directory(cls, directory: str | Path = DEFAULT_DATA_DIR) -> MetadataStore:
        regions = load_all_regions(directory)
        store = cls(regions, version=read_version(directory))
        logger.info(
            "Metadata store loaded: version=%s regions=%d calling_codes=%d",
            store.version,
            len(store),
            len(store.calling_codes()),
        )
        return store


@lru_cache(maxsize=1)
def get_metadata_store() -> MetadataStore:
    """Return the process-wide store loaded from ``METADATA_DIR`` (or the packaged data)."""
    from phonecheck.core.settings import get_settings

    directory = get_settings().metadata_dir or DEFAULT_DATA_DIR
    return MetadataStore.from_directory(directory)
