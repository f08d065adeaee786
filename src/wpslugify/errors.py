"""Actionable error hierarchy for wpslugify.

The sanitization pipeline itself never raises.  Errors only come from the
layers around it (settings, CLI input), and they are classified by
**recovery path**, not by origin.  Each error type carries structured
guidance for three audiences:
  - The calling code (typed ``error_type`` for routing)
  - The human operator (``suggestion`` + ``troubleshooting`` steps)
  - An AI agent (``ai_guidance`` with concrete next actions)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


class ErrorType(StrEnum):
    """Recovery-path categories: what to *do*, not where it came from."""

    CONFIG = "config"
    DECODE = "decode"
    INPUT = "input"
    PARSE = "parse"
    VALIDATION = "validation"
    UNEXPECTED = "unexpected"


# ---------------------------------------------------------------------------
# Guidance dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AIGuidance:
    """Machine-readable guidance for an AI agent consuming this error."""

    action_required: str
    command: str | None = None
    discovery_tool: str | None = None
    checks: list[str] | None = None
    steps: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"action_required": self.action_required}
        if self.command is not None:
            result["command"] = self.command
        if self.discovery_tool is not None:
            result["discovery_tool"] = self.discovery_tool
        if self.checks is not None:
            result["checks"] = self.checks
        if self.steps is not None:
            result["steps"] = self.steps
        return result


@dataclass(frozen=True)
class Troubleshooting:
    """Sequential, human-readable recovery steps for the operator."""

    steps: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"steps": self.steps}


# ---------------------------------------------------------------------------
# Base actionable error
# ---------------------------------------------------------------------------


@dataclass
class ActionableError(Exception):
    """Structured error with embedded recovery guidance.

    Use the factory classmethods rather than constructing directly;
    they encode domain knowledge so callers don't have to.
    """

    error: str
    error_type: ErrorType
    service: str

    success: bool = field(default=False, init=False)
    suggestion: str | None = None
    ai_guidance: AIGuidance | None = None
    troubleshooting: Troubleshooting | None = None
    context: dict[str, Any] | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    # Make it work as a real exception
    def __post_init__(self) -> None:
        super().__init__(self.error)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Compact JSON-ready dict; ``None`` values are excluded."""
        result: dict[str, Any] = {
            "success": self.success,
            "error": self.error,
            "error_type": self.error_type.value,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.suggestion is not None:
            result["suggestion"] = self.suggestion
        if self.ai_guidance is not None:
            result["ai_guidance"] = self.ai_guidance.to_dict()
        if self.troubleshooting is not None:
            result["troubleshooting"] = self.troubleshooting.to_dict()
        if self.context is not None:
            result["context"] = self.context
        return result

    # -- factory methods -----------------------------------------------------

    @classmethod
    def config(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Missing settings file or missing configuration section."""
        return cls(
            error=f"Configuration error: {field_name}: {reason}",
            error_type=ErrorType.CONFIG,
            service="settings.toml",
            suggestion=suggestion or f"Fix '{field_name}' in config/settings.toml",
            ai_guidance=AIGuidance(
                action_required=f"Correct the '{field_name}' value in config/settings.toml",
                checks=[
                    "Verify the settings file passed with --config exists",
                    f"Verify '{field_name}' is present and valid",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    "1. Open config/settings.toml (or the file given to --config)",
                    f"2. Locate the '{field_name}' setting",
                    f"3. Fix the issue: {reason}",
                    "4. Save and re-run",
                ]
            ),
        )

    @classmethod
    def decode(
        cls,
        source: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Input bytes are not valid UTF-8."""
        return cls(
            error=f"Cannot decode {source} as UTF-8: {raw_error}",
            error_type=ErrorType.DECODE,
            service="input",
            suggestion=suggestion or f"Re-encode {source} as UTF-8 before slugifying",
            ai_guidance=AIGuidance(
                action_required=f"Convert {source} to UTF-8",
                command=f"iconv -t UTF-8 {source}",
                checks=[
                    f"What encoding does {source} actually use?",
                    "Does the file contain binary data?",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Detect the encoding: file -i {source}",
                    f"2. Convert: iconv -f <encoding> -t UTF-8 {source} > converted.txt",
                    "3. Re-run with the converted file",
                ]
            ),
        )

    @classmethod
    def input(
        cls,
        source: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Input file missing, unreadable, or a directory."""
        return cls(
            error=f"Cannot read input {source}: {raw_error}",
            error_type=ErrorType.INPUT,
            service="input",
            suggestion=suggestion or f"Check that {source} exists and is a readable file",
            ai_guidance=AIGuidance(
                action_required=f"Provide a readable input file instead of {source}",
                command=f"ls -l {source}",
                checks=[
                    f"Does {source} exist?",
                    f"Is {source} a regular file and not a directory?",
                    "Does the current user have read permission?",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Verify the path: ls -l {source}",
                    "2. Fix the path or permissions",
                    "3. Re-run the batch command",
                ]
            ),
        )

    @classmethod
    def parse(
        cls,
        source: str,
        location: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Structured input (TOML) could not be parsed."""
        return cls(
            error=f"Parse failure in {source} at {location}: {raw_error}",
            error_type=ErrorType.PARSE,
            service=source,
            suggestion=suggestion or f"Fix the syntax of {source}",
            ai_guidance=AIGuidance(
                action_required=f"Repair the syntax of {source} near {location}",
                checks=[
                    f"Open {source} and inspect {location}",
                    "Look for unclosed quotes, brackets or duplicate keys",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Open {source}",
                    f"2. Go to {location}",
                    f"3. Fix the syntax error: {raw_error}",
                    "4. Save and re-run",
                ]
            ),
        )

    @classmethod
    def validation(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Input validation failure (TOML values, policy limits, CLI args)."""
        return cls(
            error=f"Validation error: {field_name}: {reason}",
            error_type=ErrorType.VALIDATION,
            service="validation",
            suggestion=suggestion or f"Fix '{field_name}': {reason}",
            ai_guidance=AIGuidance(
                action_required=f"Correct the value for '{field_name}'",
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Check the value of '{field_name}'",
                    f"2. Issue: {reason}",
                    "3. Correct and retry",
                ]
            ),
        )

    @classmethod
    def unexpected(
        cls,
        service: str,
        operation: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Catch-all for truly unexpected failures."""
        return cls(
            error=f"Unexpected error in {service} during {operation}: {raw_error}",
            error_type=ErrorType.UNEXPECTED,
            service=service,
            suggestion=suggestion or "This is an unexpected error; check logs for details",
            ai_guidance=AIGuidance(
                action_required="Analyze the error and escalate if needed",
                checks=[
                    "Check the full traceback in logs",
                    f"Is {service} in a known-good state?",
                ],
            ),
        )

    @classmethod
    def from_exception(
        cls,
        error: Exception,
        service: str,
        operation: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Auto-classify an exception by type, then by keyword patterns.

        A caller-supplied ``suggestion`` is always preserved; it carries
        context the generic classifier cannot infer.
        """
        error_str = str(error).lower()
        raw_error = str(error)

        # Type wins over keywords: a missing "titles-utf-8.txt" is still INPUT
        if isinstance(error, UnicodeDecodeError):
            return cls.decode(service, raw_error, suggestion=suggestion)
        if isinstance(error, OSError):
            return cls.input(service, raw_error, suggestion=suggestion)

        if any(kw in error_str for kw in ("codec can't decode", "invalid start byte")):
            return cls.decode(service, raw_error, suggestion=suggestion)
        if any(kw in error_str for kw in ("no such file", "permission denied", "is a directory")):
            return cls.input(service, raw_error, suggestion=suggestion)

        return cls.unexpected(service, operation, raw_error, suggestion=suggestion)
