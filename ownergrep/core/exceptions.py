# ownergrep/core/exceptions.py
"""
Exception Hierarchy for ownergrep

Defines all custom exceptions used throughout the application.
"""

from pathlib import Path
from typing import Any, Optional


class OwnerGrepException(Exception):
    """
    Base exception for all ownergrep errors.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        context: Additional context about the error
        recoverable: Whether the run can continue past the error
    """

    def __init__(
        self,
        message: str,
        code: str = "OWNERGREP_ERROR",
        context: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context or {}
        self.recoverable = recoverable

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "context": self.context,
            "recoverable": self.recoverable,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ============================================
# Input File Exceptions
# ============================================
class InputFileException(OwnerGrepException):
    """Base exception for errors reading one of the input files."""

    def __init__(
        self,
        message: str,
        code: str = "INPUT_FILE_ERROR",
        path: Optional[Path | str] = None,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", {})
        if path is not None:
            context["path"] = str(path)
        super().__init__(message, code=code, context=context, **kwargs)
        self.path = path


class CodeownersNotFoundError(InputFileException):
    """Raised when the CODEOWNERS file is missing or cannot be read."""

    def __init__(self, path: Path | str, reason: str = "", **kwargs: Any):
        message = f"CODEOWNERS file not found at {path}"
        if reason:
            message = f"Could not read CODEOWNERS file {path}: {reason}"
        super().__init__(message, code="CODEOWNERS_NOT_FOUND", path=path, recoverable=True, **kwargs)


class IgnoreFileError(InputFileException):
    """Raised when the ignore file cannot be read. Fatal for the run."""

    def __init__(self, path: Path | str, reason: str = "", **kwargs: Any):
        message = f"Could not read ignore file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="IGNORE_FILE_ERROR", path=path, **kwargs)


# ============================================
# Search Exceptions
# ============================================
class SearchException(OwnerGrepException):
    """Base exception for content search errors."""

    def __init__(
        self,
        message: str,
        code: str = "SEARCH_ERROR",
        path: Optional[Path | str] = None,
        **kwargs: Any,
    ):
        context = kwargs.pop("context", {})
        if path is not None:
            context["path"] = str(path)
        super().__init__(message, code=code, context=context, **kwargs)
        self.path = path


class SearchPathError(SearchException):
    """Raised when a search target is missing or cannot be searched."""

    def __init__(self, path: Path | str, reason: str = "", **kwargs: Any):
        message = f"Path {path} does not exist"
        if reason:
            message = f"Error searching in path {path}: {reason}"
        super().__init__(message, code="SEARCH_PATH_ERROR", path=path, recoverable=True, **kwargs)


class FileReadError(SearchException):
    """Raised when a candidate file cannot be read."""

    def __init__(self, path: Path | str, reason: str = "", **kwargs: Any):
        message = f"Could not read file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="FILE_READ_ERROR", path=path, recoverable=True, **kwargs)
