"""Config: environment-backed settings; the application registers them in DI."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Any

ENV_PREFIX = "ADCHECKOUT_"


class Config:
    """
    Helpers for building config objects. User creates their own class or instance
    and passes to Application(config=...); then available via container.resolve(type(config)).
    """

    @classmethod
    def load_from_env(cls, prefix: str = ENV_PREFIX, **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for Settings(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    default_customer: str = "default"

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> Settings:
        """Known ADCHECKOUT_* variables override the defaults; unknown ones are ignored."""
        known = {f.name for f in fields(cls)}
        values = Config.load_from_env(prefix)
        return cls(**{k: v for k, v in values.items() if k in known})


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Set the package logger level; attaches a stderr handler once."""
    logger = logging.getLogger("adcheckout")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
