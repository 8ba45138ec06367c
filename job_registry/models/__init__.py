"""Data models for the job registry."""

from .applicant import Applicant, Classification
from .application import Application
from .job import Job

__all__ = ["Applicant", "Application", "Classification", "Job"]
