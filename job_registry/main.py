"""Command line entry point for the job registry."""

import argparse
import json
import logging
import sys
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import resolve_config, settings
from .errors import RegistryError
from .registry import Registry
from .storage import Database

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register applicants and jobs, apply and rate.")
    parser.add_argument("--db", default=None, help="Path to the SQLite database")
    parser.add_argument("--config", default=None, help="Path to a YAML configuration file")
    parser.add_argument(
        "--caller",
        default=None,
        help="Identity performing the operation (defaults to the administrator)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("register-applicant", help="Register an applicant (admin only)")
    cmd.add_argument("name")
    cmd.add_argument("--labor-history", default="")
    cmd.add_argument("--skills", default="")
    cmd.add_argument(
        "--classification",
        default="graduate",
        help="under-graduate, graduate or post-graduate (or 0, 1, 2)",
    )

    cmd = commands.add_parser("get-applicant", help="Show an applicant")
    cmd.add_argument("applicant_id", type=int)

    cmd = commands.add_parser("classification", help="Show an applicant's classification")
    cmd.add_argument("applicant_id", type=int)

    cmd = commands.add_parser("register-job", help="Register a job (admin only)")
    cmd.add_argument("title")
    cmd.add_argument("--description", default="")
    cmd.add_argument("--salary", type=int, default=0)

    cmd = commands.add_parser("get-job", help="Show a job")
    cmd.add_argument("job_id", type=int)

    cmd = commands.add_parser("apply", help="Apply an applicant to a job")
    cmd.add_argument("applicant_id", type=int)
    cmd.add_argument("job_id", type=int)

    cmd = commands.add_parser("rate", help="Rate an applicant from 1 to 5 (admin only)")
    cmd.add_argument("applicant_id", type=int)
    cmd.add_argument("rating", type=int)

    cmd = commands.add_parser("rating", help="Show an applicant's rating")
    cmd.add_argument("applicant_id", type=int)

    cmd = commands.add_parser("applications", help="List applicants that applied to a job")
    cmd.add_argument("job_id", type=int)

    commands.add_parser("stats", help="Show registry statistics")

    return parser.parse_args(argv)


def run_command(registry: Registry, args: argparse.Namespace, caller: str) -> object:
    """Run one subcommand and return its printable result, if any."""
    if args.command == "register-applicant":
        applicant_id = registry.register_applicant(
            caller, args.name, args.labor_history, args.skills, args.classification
        )
        return {"id": applicant_id}
    if args.command == "get-applicant":
        return registry.get_applicant(args.applicant_id).model_dump(mode="json")
    if args.command == "classification":
        classification, label = registry.get_applicant_classification(args.applicant_id)
        return {"classification": int(classification), "label": label}
    if args.command == "register-job":
        job_id = registry.register_job(caller, args.title, args.description, args.salary)
        return {"id": job_id}
    if args.command == "get-job":
        return registry.get_job(args.job_id).model_dump(mode="json")
    if args.command == "apply":
        registry.apply(caller, args.applicant_id, args.job_id)
        return None
    if args.command == "rate":
        registry.rate(caller, args.applicant_id, args.rating)
        return None
    if args.command == "rating":
        return {"rating": registry.get_rating(args.applicant_id)}
    if args.command == "applications":
        return {"job_id": args.job_id, "applicants": registry.list_applications(args.job_id)}
    if args.command == "stats":
        return registry.get_stats()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point."""
    args = parse_args(argv)
    try:
        config = resolve_config(settings, args.config)
    except (yaml.YAMLError, ValidationError) as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return 2
    configure_logging("DEBUG" if args.verbose else config.log_level)

    if not config.admin_identity:
        logger.error("No administrator identity configured (set JOB_REGISTRY_ADMIN_IDENTITY)")
        return 2

    try:
        registry = Registry(Database(args.db or settings.db_path), config.admin_identity)
        result = run_command(registry, args, args.caller or config.admin_identity)
    except RegistryError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    if result is not None:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
