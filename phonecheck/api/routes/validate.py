"""POST /validate — run the validation engine on one input.

The response is the engine result plus ``region_name``, a cosmetic label
looked up in ``phonecheck.core.constants``.  Malformed or unresolvable
input answers 422 with the error's ``code`` and message; a well-formed
number that is simply not valid answers 200 with ``is_valid: false``.

Safety: the raw input is never logged.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from phonecheck.api.deps import get_store
from phonecheck.core.constants import get_region_display_name
from phonecheck.core.settings import get_settings
from phonecheck.engine.errors import ValidationError
from phonecheck.engine.validator import validate
from phonecheck.metadata.store import MetadataStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["validate"])


class ValidateBody(BaseModel):
    raw_input: str
    default_region: str | None = Field(default=None, min_length=2, max_length=3)


@router.post("/validate", summary="Validate and format a phone number")
def validate_number(
    body: ValidateBody,
    store: MetadataStore = Depends(get_store),
) -> dict:
    default_region = body.default_region or get_settings().default_region
    try:
        parsed = validate(body.raw_input, default_region, store=store)
    except ValidationError as exc:
        logger.info("validate_number: rejected input (code=%s)", exc.code)
        raise HTTPException(status_code=422, detail={"code": exc.code, "message": exc.message})

    result = parsed.to_dict()
    result["region_name"] = get_region_display_name(parsed.region_code) if parsed.is_valid else None
    return result
