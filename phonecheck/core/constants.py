"""Presentation tables consumed by the HTTP layer.

Nothing in here influences validation.  The engine returns plain region
codes; these tables only turn them into labels and UI shortcuts.

Region display names
--------------------
Keyed by region code.  Regions without an entry are displayed by their
code, so the table may lag behind the metadata data set without breaking
anything.

Example numbers
---------------
Sample inputs offered as one-click shortcuts.  They are ordinary inputs,
not metadata; the test-suite checks that each one still validates.
"""
from __future__ import annotations

REGION_DISPLAY_NAMES: dict[str, str] = {
    "US": "United States",
    "CA": "Canada",
    "PR": "Puerto Rico",
    "JM": "Jamaica",
    "GB": "United Kingdom",
    "AU": "Australia",
    "DE": "Germany",
    "FR": "France",
    "IT": "Italy",
    "ES": "Spain",
    "BR": "Brazil",
    "IN": "India",
    "CN": "China",
    "JP": "Japan",
    "RU": "Russia",
    "MX": "Mexico",
    "AR": "Argentina",
    "CL": "Chile",
    "CO": "Colombia",
    "PE": "Peru",
    "VE": "Venezuela",
    "ZA": "South Africa",
    "EG": "Egypt",
    "NG": "Nigeria",
    "KE": "Kenya",
    "MA": "Morocco",
    "TN": "Tunisia",
    "GH": "Ghana",
    "TR": "Turkey",
    "SA": "Saudi Arabia",
    "AE": "United Arab Emirates",
    "IL": "Israel",
    "KW": "Kuwait",
    "QA": "Qatar",
    "BH": "Bahrain",
    "OM": "Oman",
    "JO": "Jordan",
    "LB": "Lebanon",
    "SY": "Syria",
    "IQ": "Iraq",
    "IR": "Iran",
    "AF": "Afghanistan",
    "PK": "Pakistan",
    "BD": "Bangladesh",
    "LK": "Sri Lanka",
    "NP": "Nepal",
    "BT": "Bhutan",
    "MV": "Maldives",
    "TH": "Thailand",
    "VN": "Vietnam",
    "KH": "Cambodia",
    "LA": "Laos",
    "MM": "Myanmar",
    "MY": "Malaysia",
    "SG": "Singapore",
    "ID": "Indonesia",
    "PH": "Philippines",
    "KR": "South Korea",
    "TW": "Taiwan",
    "HK": "Hong Kong",
    "MO": "Macau",
    "MN": "Mongolia",
    "KZ": "Kazakhstan",
    "UZ": "Uzbekistan",
    "TM": "Turkmenistan",
    "KG": "Kyrgyzstan",
    "TJ": "Tajikistan",
}

# (input, expected region code)
EXAMPLE_NUMBERS: list[tuple[str, str]] = [
    ("+1 555-123-4567", "US"),
    ("+91 98765 43210", "IN"),
    ("+44 20 7946 0958", "GB"),
    ("+49 30 12345678", "DE"),
]


def get_region_display_name(region_code: str | None) -> str | None:
    """Return the display label for *region_code*, falling back to the code itself."""
    if not region_code:
        return None
    return REGION_DISPLAY_NAMES.get(region_code.upper(), region_code)
