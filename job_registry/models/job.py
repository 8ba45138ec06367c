"""Job data model."""

from pydantic import BaseModel, Field


class Job(BaseModel):
    """A job posting registered by the administrator."""

    id: int = Field(ge=1)
    title: str
    description: str
    salary: int = Field(ge=0)
    poster: str  # identity of the account that registered the job
    is_open: bool = True

    def to_db_dict(self) -> dict:
        """Convert to dictionary for database storage."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "salary": self.salary,
            "poster": self.poster,
            "is_open": int(self.is_open),
        }

    @classmethod
    def from_db_row(cls, row: dict) -> "Job":
        """Create Job from database row."""
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            salary=row["salary"],
            poster=row["poster"],
            is_open=bool(row["is_open"]),
        )
