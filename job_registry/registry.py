"""Admin-gated registry of applicants, jobs and applications."""

import logging
import threading
from typing import Union

from pydantic import ValidationError

from .errors import AuthorizationError, NotFoundError, PreconditionError
from .models.applicant import Applicant, Classification
from .models.application import Application
from .models.job import Job
from .storage import Database

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class Registry:
    """Registry pairing applicants with job postings.

    The administrator identity is fixed when the registry is first opened
    and stored alongside the data. Registering applicants and jobs and
    rating applicants is restricted to the administrator; any caller may
    apply an applicant to a job. Every mutation is all-or-nothing.
    """

    def __init__(self, db: Database, admin: str):
        """Open the registry stored in ``db``.

        Args:
            db: Database holding the registry state
            admin: Administrator identity. Recorded on first open; later
                opens must present the same identity.

        Raises:
            AuthorizationError: If ``admin`` is empty or differs from the
                stored administrator.
        """
        if not admin:
            raise AuthorizationError("An administrator identity is required")

        self.db = db
        self._lock = threading.RLock()

        with self._lock, self.db.transaction():
            stored = self.db.get_admin()
            if stored is None:
                self.db.set_admin(admin)
                logger.info(f"Initialized registry with administrator {admin}")
            elif stored != admin:
                raise AuthorizationError(
                    f"Registry is administered by {stored}, not {admin}"
                )
        self._admin = admin

    @property
    def admin(self) -> str:
        """The administrator identity."""
        return self._admin

    def _require_admin(self, caller: str, operation: str) -> None:
        if caller != self._admin:
            logger.warning(f"Rejected {operation} from non-administrator {caller}")
            raise AuthorizationError(f"{operation} is restricted to the administrator")

    def _check_applicant_id(self, applicant_id: int) -> None:
        if not _is_int(applicant_id) or not 1 <= applicant_id <= self.db.count_applicants():
            raise NotFoundError(f"Applicant {applicant_id} does not exist")

    def _check_job_id(self, job_id: int) -> None:
        if not _is_int(job_id) or not 1 <= job_id <= self.db.count_jobs():
            raise NotFoundError(f"Job {job_id} does not exist")

    # Applicants

    def register_applicant(
        self,
        caller: str,
        name: str,
        labor_history: str,
        skills: str,
        classification: Union[Classification, int, str],
    ) -> int:
        """Register a new applicant and return its id.

        The applicant starts available and unrated. Text fields are not
        validated beyond being strings.
        """
        self._require_admin(caller, "register_applicant")
        try:
            classification = Classification.parse(classification)
        except ValueError as e:
            raise PreconditionError(str(e)) from e

        with self._lock, self.db.transaction():
            applicant_id = self.db.count_applicants() + 1
            try:
                applicant = Applicant(
                    id=applicant_id,
                    name=name,
                    labor_history=labor_history,
                    skills=skills,
                    classification=classification,
                )
            except ValidationError as e:
                raise PreconditionError(f"Invalid applicant: {e}") from e
            self.db.insert_applicant(applicant)

        logger.info(f"Registered applicant {applicant_id} ({classification.label})")
        return applicant_id

    def get_applicant(self, applicant_id: int) -> Applicant:
        """Get a copy of the stored applicant record."""
        self._check_applicant_id(applicant_id)
        return self.db.get_applicant(applicant_id)

    def get_applicant_classification(self, applicant_id: int) -> tuple[Classification, str]:
        """Get an applicant's classification and its label."""
        classification = self.get_applicant(applicant_id).classification
        return classification, classification.label

    def rate(self, caller: str, applicant_id: int, rating: int) -> None:
        """Overwrite an available applicant's rating with a value in [1, 5]."""
        self._require_admin(caller, "rate")
        if not _is_int(rating) or not MIN_RATING <= rating <= MAX_RATING:
            raise PreconditionError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating!r}"
            )

        with self._lock, self.db.transaction():
            applicant = self.get_applicant(applicant_id)
            if not applicant.available:
                logger.warning(f"Rejected rating of unavailable applicant {applicant_id}")
                raise PreconditionError(f"Applicant {applicant_id} is not available")
            self.db.update_rating(applicant_id, rating)

        logger.info(f"Rated applicant {applicant_id}: {rating}")

    def get_rating(self, applicant_id: int) -> int:
        """Get an applicant's rating; 0 means not yet rated."""
        return self.get_applicant(applicant_id).rating

    # Jobs

    def register_job(self, caller: str, title: str, description: str, salary: int) -> int:
        """Register a new open job and return its id.

        The caller, who must be the administrator, is recorded as poster.
        """
        self._require_admin(caller, "register_job")
        if not _is_int(salary) or salary < 0:
            raise PreconditionError(f"Salary must be a non-negative integer, got {salary!r}")

        with self._lock, self.db.transaction():
            job_id = self.db.count_jobs() + 1
            try:
                job = Job(
                    id=job_id,
                    title=title,
                    description=description,
                    salary=salary,
                    poster=caller,
                )
            except ValidationError as e:
                raise PreconditionError(f"Invalid job: {e}") from e
            self.db.insert_job(job)

        logger.info(f"Registered job {job_id}: {title}")
        return job_id

    def get_job(self, job_id: int) -> Job:
        """Get a copy of the stored job record."""
        self._check_job_id(job_id)
        return self.db.get_job(job_id)

    # Applications

    def apply(self, caller: str, applicant_id: int, job_id: int) -> None:
        """Record that an applicant applied to a job.

        Any caller may apply. The applicant must be available and the job
        open. Applying again is a no-op.
        """
        with self._lock, self.db.transaction():
            applicant = self.get_applicant(applicant_id)
            job = self.get_job(job_id)
            if not applicant.available:
                logger.warning(f"Rejected application of unavailable applicant {applicant_id}")
                raise PreconditionError(f"Applicant {applicant_id} is not available")
            if not job.is_open:
                logger.warning(f"Rejected application to closed job {job_id}")
                raise PreconditionError(f"Job {job_id} is not open")
            inserted = self.db.insert_application(
                Application(job_id=job_id, applicant_id=applicant_id)
            )

        if inserted:
            logger.info(f"{caller} applied applicant {applicant_id} to job {job_id}")
        else:
            logger.debug(f"Applicant {applicant_id} already applied to job {job_id}")

    def has_applied(self, job_id: int, applicant_id: int) -> bool:
        """Whether an applicant has applied to a job."""
        self._check_job_id(job_id)
        self._check_applicant_id(applicant_id)
        return self.db.application_exists(job_id, applicant_id)

    def list_applications(self, job_id: int) -> list[int]:
        """Ids of the applicants that applied to a job, ascending."""
        self._check_job_id(job_id)
        return [a.applicant_id for a in self.db.get_applications_for_job(job_id)]

    # Summary

    def applicant_count(self) -> int:
        return self.db.count_applicants()

    def job_count(self) -> int:
        return self.db.count_jobs()

    def get_stats(self) -> dict:
        """Get registry statistics."""
        return self.db.get_stats()


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
