"""Reading and writing pydantic models as JSON files.

The only file fretlab persists is the application configuration, so every
failure surfaces as a `ConfigurationError` with a hint, except a missing
file (``FileNotFoundError``) and OS-level write errors, which callers
handle themselves.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from fretlab.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _sibling(path: Path, extra_suffix: str) -> Path:
    return path.with_suffix(path.suffix + extra_suffix)


class PydanticPersistence:
    """Namespace for JSON load/save of pydantic models."""

    @staticmethod
    def load_json(path: Path, model_type: type[M]) -> M:
        """
        Parse ``path`` into ``model_type``.

        Raises:
            FileNotFoundError: ``path`` does not exist
            ConfigFileInvalidError: the file is empty or not JSON
            ConfigValidationError: the JSON does not fit the model
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        name = model_type.__name__
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

        if not text.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            loaded = model_type.model_validate_json(text)
        except ValidationError as e:
            logger.error(f"{path} does not validate as {name}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Read {name} from {path}")
        return loaded

    @staticmethod
    def save_json(data: BaseModel, path: Path, indent: int = 2, backup: bool = True) -> None:
        """
        Write ``data`` to ``path``.

        The previous file, if any, is kept as ``<name>.bak`` when ``backup``
        is set. The new content is written to ``<name>.tmp`` and renamed over
        the target so a crash never leaves a half-written file.

        Raises:
            OSError: the directory or file could not be written
            ConfigurationError: the model could not be serialized
        """
        name = type(data).__name__
        try:
            payload = data.model_dump_json(indent=indent)
        except Exception as e:
            logger.error(f"Cannot serialize {name}: {e}")
            raise ConfigurationError(
                user_message=f"Failed to save configuration to {path}",
                technical_message=f"Serializing {name} failed: {e}",
                recovery_hint="Check the values you changed; the file on disk was not touched",
            ) from e

        path.parent.mkdir(parents=True, exist_ok=True)
        if backup and path.exists():
            shutil.copy2(path, _sibling(path, ".bak"))
            logger.debug(f"Backed up {path}")

        staging = _sibling(path, ".tmp")
        try:
            staging.write_text(payload, encoding="utf-8")
            staging.replace(path)
        except OSError as e:
            logger.error(f"Cannot write {path}: {e}")
            raise
        finally:
            staging.unlink(missing_ok=True)

        logger.debug(f"Wrote {name} to {path}")

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[M], default_factory: Callable[[], M] | None = None
    ) -> M:
        """Like `load_json`, but a missing file yields a default (not saved)."""
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"No file at {path}, using default {model_type.__name__}")
            return default_factory() if default_factory is not None else model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[M]) -> tuple[bool, str | None]:
        """Return ``(True, None)`` if ``path`` loads, else ``(False, reason)``."""
        try:
            PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.user_message
        return True, None
