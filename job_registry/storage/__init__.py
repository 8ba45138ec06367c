"""Persistence layer."""

from .database import Database

__all__ = ["Database"]
