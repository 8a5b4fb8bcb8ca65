"""Data models for metadata rule evaluation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from constants import Constants


class Severity(Enum):
    """Severity of a reported diagnostic."""
    ERROR = "Error"
    WARNING = "Warning"


@dataclass(frozen=True)
class Diagnostic:
    """One rule violation, rendered as ``<Severity>: <message>``."""
    severity: Severity
    message: str

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        return {"severity": self.severity.value, "message": self.message}

    @classmethod
    def error(cls, message: str) -> "Diagnostic":
        return cls(Severity.ERROR, message)

    @classmethod
    def warning(cls, message: str) -> "Diagnostic":
        return cls(Severity.WARNING, message)


@dataclass(frozen=True)
class LintOptions:
    """Switches controlling which findings fail a run.

    Attributes:
        fail_on_warnings: A run whose error state is set exits non-zero.
        strict_license: An unknown license identifier sets the error state.
        strict_dependencies: An open-ended dependency range sets the error state.
    """
    fail_on_warnings: bool = Constants.DEFAULT_FAIL_ON_WARNINGS
    strict_license: bool = Constants.DEFAULT_STRICT_LICENSE
    strict_dependencies: bool = Constants.DEFAULT_STRICT_DEPENDENCIES


@dataclass
class RuleOutcome:
    """Diagnostics produced by a single rule and whether they set the error state."""
    has_errors: bool = False
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic, fails: bool = True) -> None:
        self.diagnostics.append(diagnostic)
        if fails:
            self.has_errors = True


@dataclass
class LintResult:
    """Outcome of validating one metadata document."""
    has_errors: bool
    diagnostics: List[Diagnostic]
    options: LintOptions

    @property
    def failed(self) -> bool:
        """True when the error state is set and warnings are fatal."""
        return self.has_errors and self.options.fail_on_warnings

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hasErrors": self.has_errors,
            "failed": self.failed,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
