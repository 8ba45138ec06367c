"""SQLite database for storing registry state."""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..models.applicant import Applicant
from ..models.application import Application
from ..models.job import Job


class Database:
    """SQLite database for the job registry."""

    def __init__(self, db_path: str = "data/registry.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._local = threading.local()
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get database connection with row factory.

        Connections run in autocommit mode; multi-statement work goes
        through :meth:`transaction`.
        """
        conn = sqlite3.connect(self.db_path, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield the thread's open transaction, or a short-lived connection."""
        active = getattr(self._local, "conn", None)
        if active is not None:
            yield active
            return

        conn = self._get_connection()
        try:
            yield conn
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed calls as one all-or-nothing write transaction.

        Every database method called on this thread inside the block joins
        the transaction. Any exception rolls it back and is re-raised.
        Nested blocks join the outer transaction.
        """
        active = getattr(self._local, "conn", None)
        if active is not None:
            yield active
            return

        conn = self._get_connection()
        try:
            conn.execute("BEGIN IMMEDIATE")
            self._local.conn = conn
            try:
                yield conn
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        finally:
            self._local.conn = None
            conn.close()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._connect() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS registry_meta (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    admin TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS applicants (
                    id INTEGER PRIMARY KEY,
                    name TEXT NOT NULL,
                    labor_history TEXT NOT NULL,
                    skills TEXT NOT NULL,
                    available INTEGER NOT NULL DEFAULT 1,
                    rating INTEGER NOT NULL DEFAULT 0 CHECK (rating BETWEEN 0 AND 5),
                    classification INTEGER NOT NULL CHECK (classification IN (0, 1, 2))
                );

                CREATE TABLE IF NOT EXISTS jobs (
                    id INTEGER PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    salary INTEGER NOT NULL CHECK (salary >= 0),
                    poster TEXT NOT NULL,
                    is_open INTEGER NOT NULL DEFAULT 1
                );

                CREATE TABLE IF NOT EXISTS applications (
                    job_id INTEGER NOT NULL,
                    applicant_id INTEGER NOT NULL,
                    PRIMARY KEY (job_id, applicant_id),
                    FOREIGN KEY (job_id) REFERENCES jobs(id),
                    FOREIGN KEY (applicant_id) REFERENCES applicants(id)
                );

                CREATE INDEX IF NOT EXISTS idx_applications_applicant ON applications(applicant_id);
            """)

    def get_admin(self) -> Optional[str]:
        """Get the stored administrator identity, if one was recorded."""
        with self._connect() as conn:
            cursor = conn.execute("SELECT admin FROM registry_meta WHERE id = 1")
            row = cursor.fetchone()
            return row["admin"] if row else None

    def set_admin(self, identity: str) -> None:
        """Record the administrator identity. Fails if one is already stored."""
        with self._connect() as conn:
            conn.execute("INSERT INTO registry_meta (id, admin) VALUES (1, ?)", (identity,))

    def _insert(self, table: str, data: dict) -> None:
        with self._connect() as conn:
            columns = ", ".join(data.keys())
            placeholders = ", ".join("?" * len(data))
            conn.execute(
                f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
                tuple(data.values()),
            )

    def count_applicants(self) -> int:
        """Number of registered applicants."""
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM applicants").fetchone()[0]

    def insert_applicant(self, applicant: Applicant) -> None:
        """Insert a new applicant."""
        self._insert("applicants", applicant.to_db_dict())

    def get_applicant(self, applicant_id: int) -> Optional[Applicant]:
        """Get an applicant by id."""
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT * FROM applicants WHERE id = ?", (applicant_id,)
            )
            row = cursor.fetchone()
            return Applicant.from_db_row(dict(row)) if row else None

    def update_rating(self, applicant_id: int, rating: int) -> None:
        """Overwrite an applicant's rating."""
        with self._connect() as conn:
            conn.execute(
                "UPDATE applicants SET rating = ? WHERE id = ?",
                (rating, applicant_id),
            )

    def count_jobs(self) -> int:
        """Number of registered jobs."""
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM jobs").fetchone()[0]

    def insert_job(self, job: Job) -> None:
        """Insert a new job."""
        self._insert("jobs", job.to_db_dict())

    def get_job(self, job_id: int) -> Optional[Job]:
        """Get a job by id."""
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM jobs WHERE id = ?", (job_id,))
            row = cursor.fetchone()
            return Job.from_db_row(dict(row)) if row else None

    def insert_application(self, application: Application) -> bool:
        """Record an application. Returns True if inserted, False if already present."""
        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT OR IGNORE INTO applications (job_id, applicant_id) VALUES (?, ?)",
                (application.job_id, application.applicant_id),
            )
            return cursor.rowcount == 1

    def application_exists(self, job_id: int, applicant_id: int) -> bool:
        """Check if an applicant has applied to a job."""
        with self._connect() as conn:
            cursor = conn.execute(
                "SELECT 1 FROM applications WHERE job_id = ? AND applicant_id = ?",
                (job_id, applicant_id),
            )
            return cursor.fetchone() is not None

    def get_applications_for_job(self, job_id: int) -> list[Application]:
        """Get applications to a job in applicant id order."""
        with self._connect() as conn:
            cursor = conn.execute(
                """
                SELECT job_id, applicant_id FROM applications
                WHERE job_id = ?
                ORDER BY applicant_id
                """,
                (job_id,),
            )
            return [Application.from_db_row(dict(row)) for row in cursor.fetchall()]

    def get_stats(self) -> dict:
        """Get database statistics."""
        with self._connect() as conn:
            stats = {}

            cursor = conn.execute("SELECT COUNT(*) FROM applicants")
            stats["total_applicants"] = cursor.fetchone()[0]

            cursor = conn.execute("SELECT COUNT(*) FROM applicants WHERE rating > 0")
            stats["rated_applicants"] = cursor.fetchone()[0]

            cursor = conn.execute("SELECT COUNT(*) FROM jobs")
            stats["total_jobs"] = cursor.fetchone()[0]

            cursor = conn.execute("SELECT COUNT(*) FROM applications")
            stats["total_applications"] = cursor.fetchone()[0]

            return stats
