"""Application relation model."""

from pydantic import BaseModel, Field


class Application(BaseModel):
    """Record that an applicant applied to a job."""

    job_id: int = Field(ge=1)
    applicant_id: int = Field(ge=1)

    def to_db_dict(self) -> dict:
        return {"job_id": self.job_id, "applicant_id": self.applicant_id}

    @classmethod
    def from_db_row(cls, row: dict) -> "Application":
        return cls(job_id=row["job_id"], applicant_id=row["applicant_id"])
