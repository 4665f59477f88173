"""Monadic Error Handling System

Result[T, E] containers, the AppError type with its ErrorCode taxonomy,
and builder functions for ergonomic error construction.

Usage:
    from core.errors import Ok, Err, Result, AppError, not_found

    def find_paradigm(key: str) -> Result[VerbParadigm, AppError]:
        paradigm = paradigms.get(key)
        if paradigm is None:
            return not_found("Verb", key, origin="drill_session")
        return Ok(paradigm)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    ensure,
    require,
)

from .builders import (
    validation_error,
    out_of_range,
    guess_mismatch,
    not_found,
    state_conflict,
)

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "ensure",
    "require",
    "validation_error",
    "out_of_range",
    "guess_mismatch",
    "not_found",
    "state_conflict",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
    "raise_result",
]
