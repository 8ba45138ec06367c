"""Tests for the registry data models."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from job_registry.models import Applicant, Application, Classification, Job


@pytest.mark.parametrize(
    ("classification", "label"),
    [
        (Classification.UNDER_GRADUATE, "Under-graduate"),
        (Classification.GRADUATE, "Graduate"),
        (Classification.POST_GRADUATE, "Post-graduate"),
    ],
)
def test_every_classification_has_a_label(classification: Classification, label: str) -> None:
    assert classification.label == label


def test_labels_are_distinct_for_every_member() -> None:
    labels = {member.label for member in Classification}

    assert len(labels) == len(Classification)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, Classification.GRADUATE),
        ("2", Classification.POST_GRADUATE),
        ("under-graduate", Classification.UNDER_GRADUATE),
        ("POST_GRADUATE", Classification.POST_GRADUATE),
        ("Graduate", Classification.GRADUATE),
        (Classification.GRADUATE, Classification.GRADUATE),
    ],
)
def test_classification_parse(value: object, expected: Classification) -> None:
    assert Classification.parse(value) is expected


@pytest.mark.parametrize("value", [3, -1, "doctorate", "", True, False])
def test_classification_parse_rejects_unknown(value: object) -> None:
    with pytest.raises(ValueError):
        Classification.parse(value)


def test_applicant_defaults() -> None:
    applicant = Applicant(
        id=1, name="Asha", labor_history="", skills="", classification=Classification.GRADUATE
    )

    assert applicant.available is True
    assert applicant.rating == 0
    assert applicant.is_rated is False


def test_applicant_rejects_rating_out_of_range() -> None:
    with pytest.raises(ValidationError):
        Applicant(id=1, name="A", labor_history="", skills="", rating=6, classification=0)


def test_applicant_db_row_conversion() -> None:
    applicant = Applicant(
        id=3,
        name="Ravi",
        labor_history="Carpenter, 4 years",
        skills="joinery",
        rating=5,
        classification=Classification.POST_GRADUATE,
    )

    row = applicant.to_db_dict()

    assert row["available"] == 1
    assert row["classification"] == 2
    assert Applicant.from_db_row(row) == applicant


def test_job_rejects_negative_salary() -> None:
    with pytest.raises(ValidationError):
        Job(id=1, title="Mason", description="", salary=-1, poster="0xadmin")


def test_job_db_row_conversion() -> None:
    job = Job(id=1, title="Mason", description="Brick work", salary=500, poster="0xadmin")

    row = job.to_db_dict()

    assert row["is_open"] == 1
    assert Job.from_db_row(row) == job


def test_application_ids_are_positive() -> None:
    with pytest.raises(ValidationError):
        Application(job_id=0, applicant_id=1)
