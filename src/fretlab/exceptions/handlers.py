"""
Error handling helpers shared by the service layer and the CLI.

fretlab fails in two ways:

1. **Hard failures** raise a `FretlabError` subclass (`InvalidNoteName`,
   configuration errors). Callers decide whether to abort.
2. **Soft failures** (unknown scale or chord, out-of-range labels, clamped
   inversions) never raise; the engine returns an empty or clamped result and
   reports a `Diagnostic` (see `fretlab.core.diagnostics`).

## Handling Patterns

| Where | Use |
|-------|-----|
| Service method that must log, then propagate | `@handle_errors(operation_name="play selection")` |
| Best-effort call with a fallback | `@handle_errors(operation_name="parse", re_raise=False, fallback_value=None)` |
| A block of statements | `with ErrorContext("load config"): ...` |
| Config file loading | `wrap_pydantic_error(e, path)` |
| Printing to a terminal | `format_error_for_display(e)` |

## Layers

```
  CLI                    prints user_message + recovery_hint
   ^ FretlabError
  services / persistence converts pydantic and IO errors, forwards diagnostics
   ^ ValidationError, OSError
  core (pure functions)  raises InvalidNoteName only
```
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .base import FretlabError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

R = TypeVar('R')


def _describe(error: BaseException) -> str:
    """Log text for an error: the technical message for app errors."""
    if isinstance(error, FretlabError):
        return error.technical_message
    return f"{type(error).__name__}: {error}"


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Any = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable[[Callable[..., R]], Callable[..., R]]:
    """
    Wrap a function so failures are logged (and optionally reported) uniformly.

    App errors are logged with their technical message; anything else is
    logged with a traceback because it indicates a bug or an external
    collaborator failing.

    Args:
        operation_name: What the function does, used in log lines ("play selection")
        user_notification: Called with a printable message when the call fails
        fallback_value: Returned instead of raising when re_raise is False
        re_raise: Propagate the original exception after logging
        log_level: Level of the failure log line

    Example:
        ```python
        @handle_errors(operation_name="parse note", re_raise=False)
        def try_parse(text: str) -> Note | None:
            return parse_note(text)
        ```
    """
    def decorator(func: Callable[..., R]) -> Callable[..., R]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                expected = isinstance(e, FretlabError)
                prefix = "Failed to" if expected else "Unexpected error during"
                logger.log(log_level, f"{prefix} {operation_name}: {_describe(e)}", exc_info=not expected)

                if user_notification is not None:
                    user_notification(e.get_full_message() if expected else f"Error: {e}")
                if re_raise:
                    raise
                return fallback_value

        return wrapper

    return decorator


class ErrorContext:
    """
    Log the start, end or failure of a block.

    The exception (if any) is kept on ``error`` so callers that chose not to
    re-raise can still inspect it.

    Example:
        ```python
        with ErrorContext("load config", re_raise=False) as ctx:
            config = AppConfig.load_or_default(path)
        if ctx.error:
            click.echo(f"Using defaults: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self) -> "ErrorContext":
        self.logger.debug(f"Begin {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            self.logger.debug(f"Done {self.operation}")
            return False

        self.error = exc_val
        self.logger.error(
            f"{self.operation} failed: {_describe(exc_val)}",
            exc_info=not isinstance(exc_val, FretlabError),
        )
        return not self.re_raise


def _location(err: dict) -> str:
    return ".".join(str(part) for part in err.get('loc', ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> FretlabError:
    """
    Turn a pydantic ValidationError raised while loading a file into a
    configuration error with a recovery hint.

    JSON syntax problems become `ConfigFileInvalidError`; value problems
    become `ConfigValidationError`, one field or a summary of several.
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError(field="unknown", value=None, error_msg=str(error), file_path=file_path)

    errors = error.errors()
    syntax = [err for err in errors if err.get('type') == 'json_invalid']
    if syntax:
        detail = syntax[0].get('ctx', {}).get('error') or syntax[0].get('msg', 'invalid JSON')
        return ConfigFileInvalidError(file_path, str(detail))

    if len(errors) == 1:
        only = errors[0]
        return ConfigValidationError(
            field=_location(only),
            value=only.get('input'),
            error_msg=only.get('msg', 'validation failed'),
            file_path=file_path,
        )

    summary = "\n".join(f"  - {_location(err)}: {err.get('msg', 'validation failed')}" for err in errors)
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(errors)} validation errors:\n{summary}",
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Split an error into (message, recovery hint or None) for printing."""
    if isinstance(error, FretlabError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
