"""Error Hierarchy — typed, categorized exceptions for all item list failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Contract errors (malformed keys, missing collaborators) are loud: always raised
    - Data-shape surprises (missing item properties) are NOT errors and have no class here
    - to_dict() produces a JSON-safe envelope for structured logging

Design Decisions:
    - Single hierarchy with ItemListError base: callers can catch all engine faults at once
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - MalformedConditionKeyError also subclasses ValueError: it is a bad value, and
      generic callers catching ValueError still see it
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    CONTRACT = "contract"
    RESOURCE = "resource"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collaborator: str | None = None
    condition_key: str | None = None


class ItemListError(Exception):
    """Base exception for all item list errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a JSON-safe error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "collaborator": self.context.collaborator,
                    "condition_key": self.context.condition_key,
                },
            }
        }


# ─── Construction Errors ─────────────────────────────────────────

class MissingCollaboratorError(ItemListError):
    """A mandatory upstream collaborator was not supplied."""
    def __init__(self, collaborator: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.collaborator = collaborator
        super().__init__(
            f"Missing mandatory collaborator: {collaborator}",
            "MISSING_COLLABORATOR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.collaborator = collaborator


# ─── Contract Errors ─────────────────────────────────────────────

class MalformedConditionKeyError(ItemListError, ValueError):
    """Condition key does not contain the property/value delimiter."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.condition_key = key
        super().__init__(
            f"Malformed condition key {key!r}: missing delimiter",
            "MALFORMED_CONDITION_KEY", ErrorCategory.CONTRACT,
            ErrorSeverity.ERROR, ctx,
        )
        self.key = key


# ─── Resource Errors ─────────────────────────────────────────────

class HolderClosedError(ItemListError):
    """Emit or subscribe attempted on a closed state holder."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"State holder '{name}' is closed",
            "HOLDER_CLOSED", ErrorCategory.RESOURCE,
            ErrorSeverity.ERROR, context,
        )
        self.name = name


class SubscriptionReleaseError(ItemListError):
    """One or more upstream subscriptions failed to cancel during teardown."""
    def __init__(
        self, failures: dict[str, BaseException], context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Failed to release subscriptions: {', '.join(failures)}",
            "SUBSCRIPTION_RELEASE_FAILED", ErrorCategory.RESOURCE,
            ErrorSeverity.WARNING, context,
        )
        self.failures = failures
