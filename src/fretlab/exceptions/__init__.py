"""
Exceptions raised by fretlab and helpers for reporting them.

```
FretlabError
├── MusicTheoryError
│   └── InvalidNoteName          (also a ValueError)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Only malformed input raises. Unknown scale or chord names and out-of-range
interval labels degrade to empty results and are reported as diagnostics
(`fretlab.core.diagnostics`).

```python
try:
    parse_note("H3")
except InvalidNoteName as e:
    click.echo(e.get_full_message())
```
"""

from .base import FretlabError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)
from .music import InvalidNoteName, MusicTheoryError

__all__ = [
    "FretlabError",
    "MusicTheoryError",
    "InvalidNoteName",
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ErrorContext",
    "handle_errors",
    "wrap_pydantic_error",
    "format_error_for_display",
]
