"""
Error Types for the Scaling Engine
Caller-visible exceptions with severity and category tagging.
Lenient parsing never raises; only invalid scale inputs, invalid
container payloads and unreadable configuration surface here.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    VALIDATION = "validation"
    PROCESSING = "processing"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ScalingEngineError(Exception):
    """Base exception for scaling engine errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None,
                 severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                 category: ErrorCategory = ErrorCategory.PROCESSING):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.severity = severity
        self.category = category
        self.timestamp = datetime.now(timezone.utc)
        self.trace_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for the calling layer."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "trace_id": self.trace_id,
        }


class ScalingValidationError(ScalingEngineError, ValueError):
    """Invalid input supplied by the caller."""

    def __init__(self, message: str, validation_errors: Optional[List[str]] = None, **kwargs):
        kwargs.setdefault("category", ErrorCategory.VALIDATION)
        kwargs.setdefault("severity", ErrorSeverity.LOW)
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors or []


class InvalidScaleFactorError(ScalingValidationError):
    """Scale factor is not a finite positive number."""

    def __init__(self, factor: Any, **kwargs):
        super().__init__(
            f"Scale factor must be a positive number, got {factor!r}",
            details={"factor": factor},
            **kwargs
        )
        self.factor = factor


class InvalidIngredientAmountError(ScalingValidationError):
    """Ingredient amounts cannot produce a scale factor."""

    def __init__(self, message: str, original_quantity: Any = None,
                 available_quantity: Any = None, **kwargs):
        kwargs.setdefault("details", {
            "original_quantity": original_quantity,
            "available_quantity": available_quantity,
        })
        super().__init__(message, **kwargs)
        self.original_quantity = original_quantity
        self.available_quantity = available_quantity


class ZeroIngredientAmountError(InvalidIngredientAmountError, ZeroDivisionError):
    """Original ingredient amount is zero."""


class IngredientValidationError(ScalingValidationError):
    """Ingredient value violates its invariants."""


class ContainerSpecError(ScalingValidationError):
    """Container payload could not be turned into a container spec."""


class ConfigurationError(ScalingEngineError):
    """Engine configuration could not be loaded."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        kwargs.setdefault("category", ErrorCategory.CONFIGURATION)
        kwargs.setdefault("details", {"path": path})
        super().__init__(message, **kwargs)
        self.path = path
