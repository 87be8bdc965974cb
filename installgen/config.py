"""installgen - Configuration loading"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values, load_dotenv

from installgen.constants import (
    DEFAULT_CONFIG_DIR,
    DIRECTOR_TIMEOUT_SECONDS,
    ENV_PREFIX,
)


@dataclass(frozen=True)
class Settings:
    """Process-level settings that are not per-run CLI options."""

    log_dir: Optional[Path]
    timeout: float = DIRECTOR_TIMEOUT_SECONDS
    env_file: Optional[Path] = None

    @property
    def logs_enabled(self) -> bool:
        return self.log_dir is not None


def find_env_file() -> Optional[Path]:
    """Smart .env file detection"""
    search_paths = [
        Path.cwd() / ".env",
        Path(DEFAULT_CONFIG_DIR).expanduser() / ".env",
    ]

    for path in search_paths:
        if path.is_file():
            return path

    return None


def load_env_file() -> Optional[Path]:
    """
    Load the first .env file found into the process environment.

    Variables already set in the environment win over the file, so the CLI's
    envvar options see file values only as defaults.
    """
    env_file = find_env_file()
    if env_file:
        load_dotenv(env_file, override=False)
    return env_file


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the .env file overlaid by the environment.

    INSTALLGEN_LOG_DIR selects where run logs go (default
    ~/.installgen/logs); setting it to "off" disables log files.
    INSTALLGEN_TIMEOUT overrides the director request timeout in seconds.

    Raises:
        ValueError: If INSTALLGEN_TIMEOUT is not a positive number
    """
    env_file = find_env_file()
    values: Dict[str, Optional[str]] = {}
    if env_file:
        values.update(dotenv_values(env_file))
    values.update(os.environ if environ is None else environ)

    raw_log_dir = values.get(f"{ENV_PREFIX}LOG_DIR")
    if not raw_log_dir:
        log_dir: Optional[Path] = Path(DEFAULT_CONFIG_DIR).expanduser() / "logs"
    elif raw_log_dir.strip().lower() == "off":
        log_dir = None
    else:
        log_dir = Path(raw_log_dir).expanduser()

    raw_timeout = values.get(f"{ENV_PREFIX}TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else DIRECTOR_TIMEOUT_SECONDS
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {raw_timeout!r}")
    if timeout <= 0:
        raise ValueError(f"{ENV_PREFIX}TIMEOUT must be positive, got {raw_timeout!r}")

    return Settings(log_dir=log_dir, timeout=timeout, env_file=env_file)
