"""Value types passed between engine stages and returned to callers."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

from phonecheck.metadata.region import NumberType

__all__ = [
    "UNKNOWN_REGION",
    "CountryCodeSource",
    "FormattedNumber",
    "NormalizedInput",
    "NumberType",
    "ParsedPhoneNumber",
    "Resolution",
]

UNKNOWN_REGION = "unknown"


class CountryCodeSource(str, Enum):
    """Where the calling code came from."""

    PLUS = "PLUS"
    IDD = "IDD"
    DEFAULT_REGION = "DEFAULT_REGION"


@dataclass(frozen=True)
class NormalizedInput:
    digits: str
    explicit_plus: bool


@dataclass(frozen=True)
class Resolution:
    """Resolver output: candidates to try, in order, and the digits left to match."""

    country_calling_code: int
    candidates: tuple[str, ...]
    national_digits: str
    source: CountryCodeSource

    def pairs(self) -> list[tuple[int, str]]:
        return [(self.country_calling_code, region) for region in self.candidates]


@dataclass(frozen=True)
class ParsedPhoneNumber:
    """Result of a validation call.

    ``is_valid`` is true only when a region's length and pattern checks
    both passed; ``region_code`` is ``"unknown"`` otherwise.  The format
    fields are populated for valid numbers only.
    """

    country_calling_code: int
    region_code: str
    national_significant_number: str
    raw_input: str
    number_type: NumberType = NumberType.UNKNOWN
    is_valid: bool = False
    candidate_regions: tuple[str, ...] = field(default_factory=tuple)
    country_code_source: CountryCodeSource = CountryCodeSource.PLUS
    national_format: str | None = None
    international_format: str | None = None
    e164_format: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["number_type"] = self.number_type.value
        data["country_code_source"] = self.country_code_source.value
        data["candidate_regions"] = list(self.candidate_regions)
        return data


@dataclass(frozen=True)
class FormattedNumber:
    national_format: str
    international_format: str
    e164_format: str
