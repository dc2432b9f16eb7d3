"""Region metadata dataclasses.

A ``RegionMetadata`` describes one numbering-plan administration: the
calling code it dials under, which national significant numbers (NSNs)
are valid, how they are classified and how they are grouped for display.

Instances are frozen.  Regular expressions are compiled once in
``__post_init__`` and cached on the instance, so a loaded region can be
shared by any number of threads without synchronisation.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

# A capture pattern we can reason about: digit tokens and groups only,
# e.g. ``(\d{2})(\d{4})(\d{4})`` or ``(\d{3})(\d{3,4})``.
_DIGIT_TOKEN = re.compile(r"\\d(?:\{(\d+)(?:,(\d+))?\})?")
_SIMPLE_CAPTURE = re.compile(r"(?:\\d(?:\{\d+(?:,\d+)?\})?)+")


class NumberType(str, Enum):
    """Classification tag derived from the labelled sub-pattern that matched."""

    FIXED_LINE = "FIXED_LINE"
    MOBILE = "MOBILE"
    FIXED_LINE_OR_MOBILE = "FIXED_LINE_OR_MOBILE"
    TOLL_FREE = "TOLL_FREE"
    PREMIUM_RATE = "PREMIUM_RATE"
    SHARED_COST = "SHARED_COST"
    VOIP = "VOIP"
    PERSONAL_NUMBER = "PERSONAL_NUMBER"
    PAGER = "PAGER"
    UAN = "UAN"
    VOICEMAIL = "VOICEMAIL"
    UNKNOWN = "UNKNOWN"


def capture_lengths(pattern: str) -> frozenset[int] | None:
    """Return every digit count *pattern* can match, or ``None`` if unknown.

    Only patterns built from ``\\d`` tokens (optionally quantified with
    ``{n}`` or ``{n,m}``) and capture groups are understood.  Anything else
    returns ``None``.
    """
    flat = pattern.replace("(", "").replace(")", "")
    if not _SIMPLE_CAPTURE.fullmatch(flat):
        return None

    low = high = 0
    for m in _DIGIT_TOKEN.finditer(flat):
        lo_str, hi_str = m.groups()
        lo = int(lo_str) if lo_str else 1
        hi = int(hi_str) if hi_str else lo
        low += lo
        high += hi
    return frozenset(range(low, high + 1))


@dataclass(frozen=True)
class FormatRule:
    """One entry of a region's ordered format table.

    ``leading_digits`` selects the rule (anchored at the start of the NSN,
    ``None`` matches everything).  ``pattern`` must then fully match the
    NSN; its groups are substituted into the templates with
    ``re.Match.expand`` (``\\1 \\2 \\3``).  A national template may
    position the national prefix with ``$NP``; otherwise it is prepended.
    """

    pattern: str
    national_template: str
    leading_digits: str | None = None
    international_template: str | None = None
    # None defers to the region's format_with_national_prefix
    national_prefix_formatting: bool | None = None

    _leading_re: re.Pattern | None = field(init=False, repr=False, compare=False, default=None)
    _pattern_re: re.Pattern | None = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_pattern_re", re.compile(self.pattern))
        if self.leading_digits is not None:
            object.__setattr__(self, "_leading_re", re.compile(self.leading_digits))

    def applies_to(self, nsn: str) -> bool:
        if self._leading_re is None:
            return True
        return self._leading_re.match(nsn) is not None

    def apply(self, nsn: str, *, international: bool = False) -> str | None:
        """Substitute *nsn* into the template, or ``None`` when the capture
        structure does not fit the digit count."""
        m = self._pattern_re.fullmatch(nsn)
        if m is None:
            return None
        template = self.national_template
        if international and self.international_template is not None:
            template = self.international_template
        return m.expand(template)

    def lengths(self) -> frozenset[int] | None:
        return capture_lengths(self.pattern)


@dataclass(frozen=True)
class RegionMetadata:
    """Numbering-plan rules for a single region."""

    region_code: str
    country_calling_code: int
    general_pattern: str
    possible_lengths: frozenset[int]
    is_main_region_for_code: bool = True
    format_rules: tuple[FormatRule, ...] = ()
    national_prefix: str | None = None
    international_prefix: str | None = None
    format_with_national_prefix: bool = True
    # Ordered (type, pattern) pairs; the first full match wins.
    number_types: tuple[tuple[NumberType, str], ...] = ()

    _general_re: re.Pattern | None = field(init=False, repr=False, compare=False, default=None)
    _type_res: tuple[tuple[NumberType, re.Pattern], ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self) -> None:
        if not self.possible_lengths:
            raise ValueError(f"{self.region_code}: possible_lengths must not be empty")
        for rule in self.format_rules:
            lengths = rule.lengths()
            if lengths is None:
                raise ValueError(
                    f"{self.region_code}: cannot determine digit counts for format pattern {rule.pattern!r}"
                )
            stray = lengths - self.possible_lengths
            if stray:
                raise ValueError(
                    f"{self.region_code}: format pattern {rule.pattern!r} produces lengths "
                    f"{sorted(stray)} outside possible_lengths"
                )
        object.__setattr__(self, "_general_re", re.compile(self.general_pattern))
        object.__setattr__(
            self,
            "_type_res",
            tuple((number_type, re.compile(p)) for number_type, p in self.number_types),
        )

    def is_possible_length(self, nsn: str) -> bool:
        return len(nsn) in self.possible_lengths

    def matches_general_pattern(self, nsn: str) -> bool:
        return self._general_re.fullmatch(nsn) is not None

    def is_valid_nsn(self, nsn: str) -> bool:
        """True when *nsn* has a possible length and fully matches the general pattern."""
        return self.is_possible_length(nsn) and self.matches_general_pattern(nsn)

    def classify(self, nsn: str) -> NumberType:
        for number_type, regex in self._type_res:
            if regex.fullmatch(nsn):
                return number_type
        return NumberType.UNKNOWN

    def strip_national_prefix(self, digits: str) -> str | None:
        """Return *digits* without the national prefix, or ``None`` if it is absent."""
        if self.national_prefix and digits.startswith(self.national_prefix):
            return digits[len(self.national_prefix):]
        return None

    def format_rule_for(self, nsn: str) -> FormatRule | None:
        for rule in self.format_rules:
            if rule.applies_to(nsn):
                return rule
        return None
