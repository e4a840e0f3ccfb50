import os
from dataclasses import dataclass


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_level_env: str = "ARGGUARD_LOG_LEVEL"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings, letting the environment override the log level."""
        defaults = cls()
        return cls(log_level=os.getenv(defaults.log_level_env, defaults.log_level))
