"""Formatter: national, international and E.164 renderings.

The region's ``format_rules`` are scanned top to bottom; the first rule
whose leading-digits pattern matches the start of the national
significant number supplies the templates.  When no rule applies, or the
chosen rule's capture pattern does not fit the digit count, the NSN is
rendered undivided.

National formats carry the region's national prefix: prepended, or placed
wherever the template writes ``$NP``.
"""
from __future__ import annotations

from phonecheck.engine.models import FormattedNumber, ParsedPhoneNumber
from phonecheck.metadata.region import FormatRule, RegionMetadata
from phonecheck.metadata.store import MetadataStore

NATIONAL_PREFIX_PLACEHOLDER = "$NP"


def _national_prefix(region: RegionMetadata, rule: FormatRule | None) -> str:
    if not region.national_prefix:
        return ""
    use_prefix = region.format_with_national_prefix
    if rule is not None and rule.national_prefix_formatting is not None:
        use_prefix = rule.national_prefix_formatting
    return region.national_prefix if use_prefix else ""


def format_number(parsed: ParsedPhoneNumber, store: MetadataStore) -> FormattedNumber:
    """Render *parsed* using its region's format rules.

    Raises
    ------
    ValueError
        If *parsed* is not a valid number.
    """
    if not parsed.is_valid:
        raise ValueError("Only valid numbers can be formatted")

    region = store.get(parsed.region_code)
    nsn = parsed.national_significant_number
    code = parsed.country_calling_code

    national_body = international_body = None
    rule = region.format_rule_for(nsn)
    if rule is not None:
        national_body = rule.apply(nsn)
        international_body = rule.apply(nsn, international=True)

    prefix = _national_prefix(region, rule)
    if national_body is None:
        national = prefix + nsn
    elif NATIONAL_PREFIX_PLACEHOLDER in national_body:
        national = national_body.replace(NATIONAL_PREFIX_PLACEHOLDER, prefix).strip()
    else:
        national = prefix + national_body

    if international_body is not None:
        # the prefix is never dialled from abroad
        international_body = international_body.replace(NATIONAL_PREFIX_PLACEHOLDER, "").strip()

    return FormattedNumber(
        national_format=national,
        international_format=f"+{code} {international_body or nsn}",
        e164_format=f"+{code}{nsn}",
    )
