"""
PhoneNumber Value Object

North American (NANP) phone number stored in "(XXX) XXX-XXXX" form.
"""

import re
from dataclasses import dataclass

COUNTRY_CODE = "+1"

TOLL_FREE_AREA_CODES = frozenset({"800", "833", "844", "855", "866", "877", "888"})

# Rough heuristic only, number portability makes this unreliable
MOBILE_AREA_CODES = frozenset({"201", "202", "203", "205", "206", "207", "208", "209", "210"})

REGIONS = {
    "2": "Eastern US",
    "3": "Eastern US",
    "4": "Southeast US",
    "5": "Central US",
    "6": "Central US",
    "7": "Western US",
    "8": "Toll-Free",
    "9": "Western US",
}

_NON_DIALABLE = re.compile(r"[^\d+]")


def _extract_digits(raw: str) -> str:
    cleaned = _NON_DIALABLE.sub("", raw)
    if cleaned.startswith("+1"):
        cleaned = cleaned[2:]
    cleaned = cleaned.replace("+", "")
    if len(cleaned) == 11 and cleaned.startswith("1"):
        cleaned = cleaned[1:]
    return cleaned


@dataclass(frozen=True)
class PhoneNumber:
    """
    Immutable US phone number value object.

    Accepts most common spellings ("555-234-5678", "+1 (555) 234 5678",
    "15552345678") and stores the national format.
    """

    value: str

    def __post_init__(self):
        if self.value is None or not str(self.value).strip():
            raise ValueError("Phone number cannot be empty")

        digits = _extract_digits(str(self.value))

        if len(digits) != 10 or not digits.isdigit():
            raise ValueError("Phone number must be 10 digits (US format)")
        if digits[0] in "01":
            raise ValueError("Area code cannot start with 0 or 1")
        if digits[3] in "01":
            raise ValueError("Exchange code cannot start with 0 or 1")

        object.__setattr__(self, "value", f"({digits[:3]}) {digits[3:6]}-{digits[6:]}")

    @property
    def digits(self) -> str:
        return re.sub(r"\D", "", self.value)

    @property
    def country_code(self) -> str:
        return COUNTRY_CODE

    @property
    def area_code(self) -> str:
        return self.digits[:3]

    @property
    def exchange_code(self) -> str:
        return self.digits[3:6]

    @property
    def subscriber_number(self) -> str:
        return self.digits[6:]

    @property
    def e164(self) -> str:
        return f"{COUNTRY_CODE}{self.digits}"

    @property
    def national(self) -> str:
        return self.value

    @property
    def dot_format(self) -> str:
        return f"{self.area_code}.{self.exchange_code}.{self.subscriber_number}"

    @property
    def dash_format(self) -> str:
        return f"{self.area_code}-{self.exchange_code}-{self.subscriber_number}"

    @property
    def is_toll_free(self) -> bool:
        return self.area_code in TOLL_FREE_AREA_CODES

    @property
    def is_mobile(self) -> bool:
        return self.area_code in MOBILE_AREA_CODES

    @property
    def region(self) -> str:
        return REGIONS.get(self.area_code[0], "Unknown")

    def masked(self, visible_digits: int = 4) -> str:
        """
        Mask all but the trailing digits.

        Args:
            visible_digits: Number of trailing digits to keep (0-10)

        Returns:
            Number in national format with hidden digits replaced by X
        """
        if visible_digits < 0 or visible_digits > 10:
            raise ValueError("Visible digits must be between 0 and 10")

        hidden = 10 - visible_digits
        masked_digits = "X" * hidden + self.digits[hidden:]
        return f"({masked_digits[:3]}) {masked_digits[3:6]}-{masked_digits[6:]}"

    def __str__(self) -> str:
        return self.value
