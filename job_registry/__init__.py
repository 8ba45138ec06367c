"""Registry pairing job applicants with job postings."""

from .errors import AuthorizationError, NotFoundError, PreconditionError, RegistryError
from .models import Applicant, Application, Classification, Job
from .registry import Registry

__all__ = [
    "Applicant",
    "Application",
    "AuthorizationError",
    "Classification",
    "Job",
    "NotFoundError",
    "PreconditionError",
    "Registry",
    "RegistryError",
]
