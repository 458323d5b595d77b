"""
Email Value Object

Immutable, normalized email address with domain classification helpers.
"""

import re
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
MAX_EMAIL_LENGTH = 254

# Free webmail providers; anything else counts as a corporate address
PERSONAL_EMAIL_DOMAINS = frozenset({
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "live.com",
})


@dataclass(frozen=True)
class Email:
    """
    Immutable email address value object.

    The address is trimmed and lowercased on construction, so two emails that
    differ only by case compare equal.
    """

    value: str

    def __post_init__(self):
        """Normalize and validate the address."""
        if self.value is None or not str(self.value).strip():
            raise ValueError("Email cannot be empty or whitespace")

        normalized = str(self.value).strip().lower()

        if len(normalized) > MAX_EMAIL_LENGTH:
            raise ValueError("Email address is too long")

        if not EMAIL_PATTERN.match(normalized):
            raise ValueError(f"Invalid email format: {self.value}")

        object.__setattr__(self, "value", normalized)

    @property
    def local_part(self) -> str:
        """Part of the address before the @."""
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        """Part of the address after the @."""
        return self.value.split("@", 1)[1]

    @property
    def is_university_email(self) -> bool:
        """True for addresses on an .edu domain."""
        return self.domain.endswith(".edu")

    @property
    def is_corporate_email(self) -> bool:
        """True unless the domain is a well-known personal mail provider."""
        return self.domain not in PERSONAL_EMAIL_DOMAINS

    def with_domain(self, new_domain: str) -> "Email":
        """Return a copy of this address on another domain."""
        if not new_domain or not new_domain.strip():
            raise ValueError("Domain cannot be empty")
        return Email(f"{self.local_part}@{new_domain.strip()}")

    def __str__(self) -> str:
        return self.value
