"""Applicant data model."""

from enum import IntEnum
from typing import Union

from pydantic import BaseModel, Field


class Classification(IntEnum):
    """Education level of an applicant."""

    UNDER_GRADUATE = 0
    GRADUATE = 1
    POST_GRADUATE = 2

    @property
    def label(self) -> str:
        """Human-readable name of the classification."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: Union["Classification", int, str]) -> "Classification":
        """Resolve a member from itself, its integer code, or its name or label.

        Raises:
            ValueError: If ``value`` names no classification.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown classification: {value!r}")
        if isinstance(value, str):
            key = value.strip()
            if key.isdigit():
                return cls(int(key))
            normalized = key.upper().replace("-", "_").replace(" ", "_")
            if normalized in cls.__members__:
                return cls[normalized]
            for member, label in _LABELS.items():
                if label.lower() == key.lower():
                    return member
            raise ValueError(f"Unknown classification: {value!r}")
        return cls(value)


_LABELS: dict[Classification, str] = {
    Classification.UNDER_GRADUATE: "Under-graduate",
    Classification.GRADUATE: "Graduate",
    Classification.POST_GRADUATE: "Post-graduate",
}


class Applicant(BaseModel):
    """A job seeker registered by the administrator."""

    id: int = Field(ge=1)
    name: str
    labor_history: str
    skills: str
    available: bool = True
    rating: int = Field(default=0, ge=0, le=5)  # 0 = not yet rated
    classification: Classification

    @property
    def is_rated(self) -> bool:
        """Whether the administrator has rated this applicant."""
        return self.rating > 0

    def to_db_dict(self) -> dict:
        """Convert to dictionary for database storage."""
        return {
            "id": self.id,
            "name": self.name,
            "labor_history": self.labor_history,
            "skills": self.skills,
            "available": int(self.available),
            "rating": self.rating,
            "classification": int(self.classification),
        }

    @classmethod
    def from_db_row(cls, row: dict) -> "Applicant":
        """Create Applicant from database row."""
        return cls(
            id=row["id"],
            name=row["name"],
            labor_history=row["labor_history"],
            skills=row["skills"],
            available=bool(row["available"]),
            rating=row["rating"],
            classification=Classification(row["classification"]),
        )
