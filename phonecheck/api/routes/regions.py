"""Metadata enumeration and UI shortcuts.

GET /regions lists every region in the metadata store.
GET /examples lists sample inputs for one-click shortcuts.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from phonecheck.api.deps import get_store
from phonecheck.core.constants import EXAMPLE_NUMBERS, get_region_display_name
from phonecheck.metadata.store import MetadataStore

router = APIRouter(tags=["regions"])


@router.get("/regions", summary="List supported regions")
def list_regions(store: MetadataStore = Depends(get_store)) -> list[dict]:
    return [
        {
            "region_code": region.region_code,
            "region_name": get_region_display_name(region.region_code),
            "country_calling_code": region.country_calling_code,
            "is_main_region_for_code": region.is_main_region_for_code,
            "possible_lengths": sorted(region.possible_lengths),
        }
        for region in store.list_all()
    ]


@router.get("/examples", summary="Example numbers for UI shortcuts")
def list_examples() -> list[dict[str, str]]:
    return [
        {
            "raw_input": raw,
            "region_code": region_code,
            "label": f"{raw} ({region_code})",
        }
        for raw, region_code in EXAMPLE_NUMBERS
    ]
