"""Settings from the environment (.env supported) and logging setup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from organizer.domain.clock import SystemClock
from organizer.domain.errors import InvalidArgument

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.
    timezone: IANA name used to decide what "today" is; None means local time.
    Only applies to appointments built with clock=settings.clock(); an Appointment
    created without a clock uses SystemClock() in local time.
    """

    timezone: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.timezone is not None:
            tz = self.timezone.strip()
            if tz:
                try:
                    ZoneInfo(tz)
                except (ZoneInfoNotFoundError, ValueError):
                    raise InvalidArgument(f"Unknown timezone: {tz!r}") from None
            object.__setattr__(self, "timezone", tz or None)
        level = (self.log_level or DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidArgument(f"Unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    def clock(self) -> SystemClock:
        """Clock for Appointment validation in the configured timezone."""
        return SystemClock(ZoneInfo(self.timezone) if self.timezone else None)


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Load .env (explicit path, repo root, then cwd; first found wins) and read settings.

    Variables already present in the environment take precedence over .env values.
    """
    candidates = [Path(env_file)] if env_file is not None else [
        Path(__file__).resolve().parent.parent.parent / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.exists():
            load_dotenv(path)
            break
    return Settings(
        timezone=os.environ.get("ORGANIZER_TIMEZONE", "").strip() or None,
        log_level=os.environ.get("ORGANIZER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip()
        or DEFAULT_LOG_LEVEL,
    )


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging with the project format at the configured level."""
    level = (settings or Settings()).log_level
    logging.basicConfig(format=LOG_FORMAT, level=level)
