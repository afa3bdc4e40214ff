from __future__ import annotations

import os
from dataclasses import dataclass

from abilens.core.constants import ONE_DAY_MS

TTL_ENV_VAR = "ABILENS_CACHE_TTL_MS"


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for an `AbiRegistry`."""

    default_ttl_ms: int = ONE_DAY_MS

    def __post_init__(self) -> None:
        if self.default_ttl_ms <= 0:
            raise ValueError(f"default_ttl_ms must be > 0, got {self.default_ttl_ms}")

    @classmethod
    def from_env(cls) -> RegistryConfig:
        """Load configuration from environment variables (defaults when unset)."""
        raw = os.getenv(TTL_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        try:
            ttl = int(raw.strip())
        except ValueError as e:
            raise ValueError(f"{TTL_ENV_VAR} must be an integer, got {raw!r}") from e
        return cls(default_ttl_ms=ttl)
