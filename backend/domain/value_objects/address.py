"""
Address Value Object

US-style postal address with normalization and formatting helpers.
"""

import re
from dataclasses import dataclass, replace
from typing import List, Optional

STATE_PATTERN = re.compile(r"^[A-Z]{2}$")
ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")

MAX_STREET_LENGTH = 100
MAX_CITY_LENGTH = 50
DEFAULT_COUNTRY = "US"

STATE_NAMES = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho",
    "IL": "Illinois", "IN": "Indiana", "IA": "Iowa", "KS": "Kansas",
    "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma",
    "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah",
    "VT": "Vermont", "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming", "DC": "District of Columbia",
}


def _title_words(raw: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in raw.split())


@dataclass(frozen=True)
class Address:
    """
    Immutable postal address value object.

    Street and city are title-cased, state and country are uppercased, so
    comparisons are effectively case-insensitive.
    """

    street: str
    city: str
    state: str
    zip_code: str
    country: str = DEFAULT_COUNTRY
    street2: Optional[str] = None

    def __post_init__(self):
        """Validate and normalize every component."""
        if not self.street or not self.street.strip():
            raise ValueError("Street address is required")
        street = _title_words(self.street)
        if len(street) > MAX_STREET_LENGTH:
            raise ValueError(f"Street address cannot exceed {MAX_STREET_LENGTH} characters")

        street2 = None
        if self.street2 and self.street2.strip():
            street2 = _title_words(self.street2)
            if len(street2) > MAX_STREET_LENGTH:
                raise ValueError(f"Street address line 2 cannot exceed {MAX_STREET_LENGTH} characters")

        if not self.city or not self.city.strip():
            raise ValueError("City is required")
        city = _title_words(self.city)
        if len(city) > MAX_CITY_LENGTH:
            raise ValueError(f"City cannot exceed {MAX_CITY_LENGTH} characters")

        state = (self.state or "").strip().upper()
        if not STATE_PATTERN.match(state):
            raise ValueError("State must be a 2-letter code")

        zip_code = (self.zip_code or "").strip()
        if not ZIP_PATTERN.match(zip_code):
            raise ValueError("ZIP code must be in format 12345 or 12345-6789")

        if not self.country or not self.country.strip():
            raise ValueError("Country is required")
        country = self.country.strip().upper()

        object.__setattr__(self, "street", street)
        object.__setattr__(self, "street2", street2)
        object.__setattr__(self, "city", city)
        object.__setattr__(self, "state", state)
        object.__setattr__(self, "zip_code", zip_code)
        object.__setattr__(self, "country", country)

    @property
    def full_address(self) -> str:
        """Single-line address; the country is only shown for non-US addresses."""
        parts = [self.street]
        if self.street2:
            parts.append(self.street2)
        parts.append(self.city)
        line = f"{', '.join(parts)}, {self.state} {self.zip_code}"
        if self.country != DEFAULT_COUNTRY:
            line = f"{line}, {self.country}"
        return line

    @property
    def mailing_lines(self) -> List[str]:
        """Address split into envelope lines."""
        lines = [self.street]
        if self.street2:
            lines.append(self.street2)
        lines.append(f"{self.city}, {self.state} {self.zip_code}")
        if self.country != DEFAULT_COUNTRY:
            lines.append(self.country)
        return lines

    @property
    def zip5(self) -> str:
        return self.zip_code[:5]

    @property
    def zip_extension(self) -> Optional[str]:
        return self.zip_code[6:] if len(self.zip_code) == 10 else None

    @property
    def is_po_box(self) -> bool:
        street = self.street.upper()
        return street.startswith("PO BOX") or street.startswith("P.O. BOX")

    @property
    def state_name(self) -> str:
        return STATE_NAMES.get(self.state, self.state)

    def with_street(self, street: str, street2: Optional[str] = None) -> "Address":
        return replace(self, street=street, street2=street2)

    def with_city(self, city: str) -> "Address":
        return replace(self, city=city)

    def with_state(self, state: str) -> "Address":
        return replace(self, state=state)

    def with_zip(self, zip_code: str) -> "Address":
        return replace(self, zip_code=zip_code)

    def __str__(self) -> str:
        return self.full_address
