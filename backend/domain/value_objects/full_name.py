"""
FullName Value Object

Person name normalized to title case, split into first/middle/last parts.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

NAME_PATTERN = re.compile(r"^[a-zA-Z\s\-\.\']+$")
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


def _normalize(raw: str) -> str:
    words = raw.split()
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


@dataclass(frozen=True)
class FullName:
    """
    Immutable full name value object.

    Whitespace is collapsed and each word is title-cased, so "  jOHN   doe "
    becomes "John Doe". At least a first and a last name are required.
    """

    value: str

    def __post_init__(self):
        if self.value is None or not str(self.value).strip():
            raise ValueError("Full name cannot be empty")

        normalized = _normalize(str(self.value))

        if len(normalized) < MIN_NAME_LENGTH:
            raise ValueError(f"Full name must be at least {MIN_NAME_LENGTH} characters long")
        if len(normalized) > MAX_NAME_LENGTH:
            raise ValueError(f"Full name cannot exceed {MAX_NAME_LENGTH} characters")
        if not NAME_PATTERN.match(normalized):
            raise ValueError(
                "Full name can only contain letters, spaces, hyphens, periods, and apostrophes"
            )
        if len(normalized.split(" ")) < 2:
            raise ValueError("Full name must contain at least first and last name")

        object.__setattr__(self, "value", normalized)

    @classmethod
    def from_parts(cls, first_name: str, last_name: str, middle_name: Optional[str] = None) -> "FullName":
        """Build a name from its separate parts."""
        if not first_name or not first_name.strip():
            raise ValueError("First name cannot be empty")
        if not last_name or not last_name.strip():
            raise ValueError("Last name cannot be empty")

        parts = [first_name.strip()]
        if middle_name and middle_name.strip():
            parts.append(middle_name.strip())
        parts.append(last_name.strip())
        return cls(" ".join(parts))

    @property
    def parts(self) -> List[str]:
        return self.value.split(" ")

    @property
    def first_name(self) -> str:
        return self.parts[0]

    @property
    def last_name(self) -> str:
        return self.parts[-1]

    @property
    def middle_name(self) -> Optional[str]:
        """Everything between first and last name, or None for two-part names."""
        middle = self.parts[1:-1]
        return " ".join(middle) if middle else None

    @property
    def initials(self) -> str:
        """First and last initials, e.g. "J.D."."""
        return f"{self.first_name[0]}.{self.last_name[0]}."

    @property
    def display_name(self) -> str:
        """Directory-style "Last, First" form."""
        return f"{self.last_name}, {self.first_name}"

    def formal_name(self, title: Optional[str] = None) -> str:
        if title and title.strip():
            return f"{title.strip()} {self.value}"
        return self.value

    def contains(self, text: str) -> bool:
        """Case-insensitive substring match against the full name."""
        if not text:
            return False
        return text.strip().lower() in self.value.lower()

    def __str__(self) -> str:
        return self.value
