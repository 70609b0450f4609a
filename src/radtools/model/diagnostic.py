"""Findings reported while mapping stylesheet variables to tokens.

Mapping never fails on odd input. Anything it cannot model is kept as
passthrough and reported here instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One finding, tied to the custom property and block it came from.

    ``rule`` is a short machine-readable tag such as
    ``unclassified_variable``; ``source`` names the block (``@theme inline``,
    ``@theme``, ``.dark``).
    """

    rule: str
    severity: Severity
    message: str
    variable: str | None = None
    source: str | None = None

    @classmethod
    def warning(cls, rule: str, message: str, variable: str | None = None, source: str | None = None) -> Diagnostic:
        return cls(rule=rule, severity=Severity.WARNING, message=message, variable=variable, source=source)

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        where = " in ".join(part for part in (self.variable, self.source) if part)
        prefix = f"{self.severity.value} [{where}]" if where else self.severity.value
        return f"{prefix}: {self.message}"
