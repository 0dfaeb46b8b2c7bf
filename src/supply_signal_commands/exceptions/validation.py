"""Structured validation error model for configuration documents."""

from __future__ import annotations

from dataclasses import dataclass

from supply_signal_commands.constants.validation import LEVEL_ERROR


@dataclass(frozen=True)
class ValidationError:
    """A single validation problem with stable code and location context."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    level: str = LEVEL_ERROR

    @property
    def is_error(self) -> bool:
        return self.level == LEVEL_ERROR

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        location = self.path
        if self.field:
            location = f"{location}: {self.field}"
        parts = [f"[{self.code}]", f"{self.level}:", location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Sort validation errors deterministically by code, path, field."""
    return sorted(errors, key=lambda e: (e.code, e.path, e.field))


def format_errors(errors: list[ValidationError]) -> str:
    """Format a list of validation errors as a multi-line string."""
    return "\n".join(e.format() for e in sort_errors(errors))
