from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

ENV_DEFAULT_ZONE = "CALJALALI_TZ"


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults, read once from the environment."""
    default_zone: Optional[str] = None  # IANA key; None -> host local zone

    @classmethod
    def from_env(cls, env: Mapping[str, str] = os.environ) -> "Settings":
        zone = env.get(ENV_DEFAULT_ZONE, "").strip()
        return cls(default_zone=zone or None)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings() -> None:
    """Forget cached settings (tests, or after changing the environment)."""
    get_settings.cache_clear()
