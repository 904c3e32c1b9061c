"""Error types raised by the evaluation engine."""

from __future__ import annotations


class AcademicScreeningError(Exception):
    """Base class for engine errors."""


class ValidationError(AcademicScreeningError, ValueError):
    """Raised when a publication source fails registry validation."""

    def __init__(self, errors: list[str]):
        super().__init__("Publication source validation failed")
        self.errors = errors

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Publication source validation failed: {self.errors}"


class StorageError(AcademicScreeningError):
    """Raised when the backing key-value store cannot be read or written."""

    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class DuplicateCandidateError(AcademicScreeningError, ValueError):
    """Raised when a candidate is created with an id that already exists."""

    def __init__(self, candidate_id: str):
        super().__init__(f"Candidate id already exists: {candidate_id!r}")
        self.candidate_id = candidate_id


__all__ = [
    "AcademicScreeningError",
    "DuplicateCandidateError",
    "StorageError",
    "ValidationError",
]
