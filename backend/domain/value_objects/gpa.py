"""
GPA Value Object

Grade point average on the 4.0 scale with grade/standing classification.
"""

from dataclasses import dataclass

MIN_GPA = 0.0
MAX_GPA = 4.0

HONORS_THRESHOLD = 3.5
DEANS_LIST_THRESHOLD = 3.7
PASSING_THRESHOLD = 2.0

# (minimum GPA, label) pairs, highest first
LETTER_GRADES = [
    (3.7, "A"),
    (3.3, "A-"),
    (3.0, "B+"),
    (2.7, "B"),
    (2.3, "B-"),
    (2.0, "C+"),
    (1.7, "C"),
    (1.3, "C-"),
    (1.0, "D"),
]

ACADEMIC_STANDINGS = [
    (3.7, "Summa Cum Laude"),
    (3.5, "Magna Cum Laude"),
    (3.3, "Cum Laude"),
    (3.0, "Good Standing"),
    (2.0, "Satisfactory"),
]

QUALITY_DESCRIPTIONS = [
    (3.8, "Excellent"),
    (3.5, "Very Good"),
    (3.0, "Good"),
    (2.5, "Satisfactory"),
    (2.0, "Acceptable"),
]


def _band(value: float, bands, fallback: str) -> str:
    for minimum, label in bands:
        if value >= minimum:
            return label
    return fallback


@dataclass(frozen=True, order=True)
class GPA:
    """
    Immutable GPA value object.

    Values are rounded to two decimals and must lie within 0.0 - 4.0.
    """

    value: float

    def __post_init__(self):
        """Validate range and round to two decimals."""
        try:
            numeric = float(self.value)
        except (TypeError, ValueError):
            raise ValueError(f"GPA must be a number: {self.value!r}")

        if not MIN_GPA <= numeric <= MAX_GPA:
            raise ValueError(f"GPA must be between {MIN_GPA} and {MAX_GPA}")

        object.__setattr__(self, "value", round(numeric, 2))

    @classmethod
    def from_percentage(cls, percentage: float) -> "GPA":
        """
        Convert a percentage score to GPA.

        60% maps to 0.0 and every further 10 points adds one grade point.

        Args:
            percentage: Score between 0 and 100

        Returns:
            Equivalent GPA
        """
        if percentage < 0 or percentage > 100:
            raise ValueError("Percentage must be between 0 and 100")
        if percentage >= 60:
            return cls((percentage - 60) / 10)
        return cls(0.0)

    @property
    def is_honors(self) -> bool:
        return self.value >= HONORS_THRESHOLD

    @property
    def is_passing(self) -> bool:
        return self.value >= PASSING_THRESHOLD

    @property
    def is_deans_list(self) -> bool:
        return self.value >= DEANS_LIST_THRESHOLD

    @property
    def is_on_probation(self) -> bool:
        return self.value < PASSING_THRESHOLD

    @property
    def letter_grade(self) -> str:
        return _band(self.value, LETTER_GRADES, "F")

    @property
    def academic_standing(self) -> str:
        return _band(self.value, ACADEMIC_STANDINGS, "Academic Probation")

    @property
    def quality_description(self) -> str:
        return _band(self.value, QUALITY_DESCRIPTIONS, "Below Standards")

    def weighted_with(self, other: "GPA", credit_hours: float, other_credit_hours: float) -> "GPA":
        """
        Combine two GPAs weighted by the credit hours behind each.

        Args:
            other: GPA to combine with
            credit_hours: Hours behind this GPA
            other_credit_hours: Hours behind the other GPA

        Returns:
            Credit-weighted GPA
        """
        if credit_hours <= 0 or other_credit_hours <= 0:
            raise ValueError("Credit hours must be positive")
        total_points = self.value * credit_hours + other.value * other_credit_hours
        return GPA(total_points / (credit_hours + other_credit_hours))

    def apply_bonus(self, bonus: float) -> "GPA":
        """Add bonus points, capped at the scale maximum."""
        return GPA(min(self.value + bonus, MAX_GPA))

    def meets_requirement(self, minimum: float) -> bool:
        return self.value >= minimum

    def to_percentage(self) -> float:
        return round(60 + self.value * 10, 1)

    def str_with_grade(self) -> str:
        return f"{self} ({self.letter_grade})"

    def __str__(self) -> str:
        return f"{self.value:.2f}"

    def __float__(self) -> float:
        return self.value
