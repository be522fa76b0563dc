"""Export settings loaded from the environment.

Values may come from the process environment or a ``.env`` file in the
working directory:

- ``RESUME_EXPORT_PROMPT_FILENAME``: ask for a filename before saving (default true)
- ``RESUME_EXPORT_OUTPUT_DIR``: directory the CLI saves into (default ``exports``)
- ``RESUME_EXPORT_SETTLE_DELAY``: seconds to wait before rasterizing (default 0.5)
- ``RESUME_EXPORT_TITLE_RESTORE_DELAY``: seconds the print title stays set (default 1.0)
- ``RESUME_EXPORT_LOG_LEVEL``: logging level name (default ``INFO``)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from resume_export.errors import ConfigError

__all__ = ["ExportSettings", "load_settings"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class ExportSettings:
    """Settings read by the export engine.

    Attributes:
        prompt_export_filename: Block for interactive filename input.
        output_dir: Directory used by :class:`DirectorySaveSink`.
        settle_delay: Seconds to let fonts/images load before rasterizing.
        title_restore_delay: Seconds the print path keeps the title overridden.
        log_level: Logging level name for the CLI.
    """

    prompt_export_filename: bool = True
    output_dir: Path = Path("exports")
    settle_delay: float = 0.5
    title_restore_delay: float = 1.0
    log_level: str = "INFO"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _env_seconds(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {raw!r}")
    return value


def load_settings(*, dotenv: bool = True) -> ExportSettings:
    """Build :class:`ExportSettings` from environment variables.

    Args:
        dotenv: Load a ``.env`` file first (existing variables win).

    Raises:
        ConfigError: If a variable holds an unparsable value.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    defaults = ExportSettings()
    output_dir = os.environ.get("RESUME_EXPORT_OUTPUT_DIR") or str(defaults.output_dir)
    return ExportSettings(
        prompt_export_filename=_env_bool(
            "RESUME_EXPORT_PROMPT_FILENAME", defaults.prompt_export_filename
        ),
        output_dir=Path(output_dir),
        settle_delay=_env_seconds("RESUME_EXPORT_SETTLE_DELAY", defaults.settle_delay),
        title_restore_delay=_env_seconds(
            "RESUME_EXPORT_TITLE_RESTORE_DELAY", defaults.title_restore_delay
        ),
        log_level=(os.environ.get("RESUME_EXPORT_LOG_LEVEL") or defaults.log_level).upper(),
    )
