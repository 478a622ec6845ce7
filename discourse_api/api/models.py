"""
Data models for Discourse API results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

NOT_FOUND = "not_found"


@dataclass
class Result:
    """
    Uniform result envelope returned by every client operation.

    success is the tag; errors is an ordered list of human-readable
    messages; data is the operation payload (None on failure).

    A successful result may still carry errors as warnings, so callers
    should inspect errors even when success is True.

    error_type optionally classifies a failure (e.g. "not_found"); it is
    not part of the rendered envelope.
    """
    success: bool
    errors: List[str] = field(default_factory=list)
    data: Any = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "Result":
        """Successful result carrying a payload."""
        return cls(success=True, errors=[], data=data)

    @classmethod
    def fail(cls, *errors: str, error_type: Optional[str] = None) -> "Result":
        """Failed result; at least one error message is always present."""
        messages = [e for e in errors if e] or ["Unknown error"]
        return cls(success=False, errors=messages, data=None, error_type=error_type)

    @classmethod
    def warning(cls, *errors: str) -> "Result":
        """Nominal success with warnings and an empty payload."""
        return cls(success=True, errors=[e for e in errors if e], data={})

    @property
    def not_found(self) -> bool:
        return not self.success and self.error_type == NOT_FOUND

    @property
    def has_warnings(self) -> bool:
        return self.success and bool(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Render as a plain {success, errors, data} mapping."""
        return {
            "success": self.success,
            "errors": list(self.errors),
            "data": self.data,
        }


@dataclass(frozen=True)
class Honeypot:
    """Spam-prevention challenge/value pair required for user creation."""
    challenge: str
    value: str

    @property
    def answer(self) -> str:
        """The challenge as the platform expects it back: reversed."""
        return self.challenge[::-1]
