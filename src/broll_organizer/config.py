"""
Configuration loaded from .env / environment.
Credentials are carried in an explicit AppConfig value and passed to adapters,
never read from module globals at call time.
"""

import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from broll_organizer.domain.errors import ConfigError

PROVIDERS = ("pexels", "envato")
ORIENTATIONS = ("landscape", "portrait", "square")

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_PACING_SECONDS = 0.2  # before every footage query
DEFAULT_TIMEOUT_SECONDS = 15.0


def _env(key: str, default: str = "") -> str:
    return (os.getenv(key) or default).strip()


def _float_env(key: str, default: float) -> float:
    raw = _env(key)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be a finite number, got {raw!r}")
    if value < 0:
        raise ConfigError(f"{key} must not be negative")
    return value


@dataclass(frozen=True)
class AppConfig:
    pexels_api_key: str = ""
    envato_api_key: str = ""
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    provider: str = "pexels"
    pacing_seconds: float = DEFAULT_PACING_SECONDS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    pexels_orientation: Optional[str] = None

    def __post_init__(self):
        if self.provider not in PROVIDERS:
            raise ConfigError(
                f"Unknown footage provider {self.provider!r} (choose from {', '.join(PROVIDERS)})"
            )
        if self.pexels_orientation and self.pexels_orientation not in ORIENTATIONS:
            raise ConfigError(f"Unknown Pexels orientation {self.pexels_orientation!r}")
        if not math.isfinite(self.pacing_seconds) or self.pacing_seconds < 0:
            raise ConfigError("pacing_seconds must be a finite number >= 0")
        if not math.isfinite(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ConfigError("timeout_seconds must be a finite number > 0")

    @classmethod
    def from_env(cls, **overrides) -> "AppConfig":
        """Read .env + environment; keyword overrides win (e.g. CLI flags)."""
        load_dotenv()
        values = {
            "pexels_api_key": _env("PEXELS_API_KEY"),
            "envato_api_key": _env("ENVATO_API_KEY"),
            "gemini_api_key": _env("GEMINI_API_KEY"),
            "gemini_model": _env("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            "provider": _env("FOOTAGE_PROVIDER", "pexels").lower(),
            "pacing_seconds": _float_env("SEARCH_PACING_SECONDS", DEFAULT_PACING_SECONDS),
            "timeout_seconds": _float_env("SEARCH_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            "pexels_orientation": _env("PEXELS_ORIENTATION").lower() or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def provider_key(self) -> str:
        """API key for the selected footage provider."""
        key = self.pexels_api_key if self.provider == "pexels" else self.envato_api_key
        if not key:
            raise ConfigError(
                f"Missing API key for {self.provider}. Set {self.provider.upper()}_API_KEY in .env"
            )
        return key

    def __repr__(self) -> str:
        # keys stay out of logs and tracebacks
        return (
            f"AppConfig(provider={self.provider!r}, gemini_model={self.gemini_model!r}, "
            f"pacing_seconds={self.pacing_seconds}, timeout_seconds={self.timeout_seconds})"
        )
