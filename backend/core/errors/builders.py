"""Domain-Specific Error Builders

Ergonomic constructors for typed errors. Each builder creates an AppError
with the appropriate code and context, wrapped in Err.
"""
from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def out_of_range(
    field: str,
    value,
    allowed: list,
    origin: str = "",
) -> Err[AppError]:
    return validation_error(
        f"'{field}' must be one of {', '.join(str(a) for a in allowed)}",
        code=ErrorCode.E2003_OUT_OF_RANGE,
        field=field,
        value=str(value),
        origin=origin,
        allowed=[str(a) for a in allowed],
    )


def guess_mismatch(category: str, origin: str = "") -> Err[AppError]:
    """First grammatical category of a guess that disagrees with the entry."""
    return validation_error(
        f"{category.capitalize()} doesn't match",
        code=ErrorCode.E2006_GUESS_MISMATCH,
        origin=origin,
        category=category,
    )


# =============================================================================
# Lookup Errors (E4xxx)
# =============================================================================

def not_found(resource: str, identifier: str, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E4010_NOT_FOUND,
        message=f"{resource} '{identifier}' not found",
        context=ErrorContext(origin=origin),
        metadata={"resource": resource, "identifier": identifier},
    ))


# =============================================================================
# Business Errors (E5xxx)
# =============================================================================

def state_conflict(message: str, *, current_state: str, origin: str = "") -> Err[AppError]:
    return Err(AppError(
        code=ErrorCode.E5002_STATE_CONFLICT,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={"current_state": current_state},
    ))
