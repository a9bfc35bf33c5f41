"""Configuration for sizednum's command-line tools.

The core (readers, numbers, formatters) takes everything it needs as
arguments; these settings only supply defaults for the CLI.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .exceptions import ConfigurationError
from .formatters.generic import PRESETS
from .models.reader import GenericReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReadConfig:
    """Defaults for decoding.

    Attributes:
        default_type: Number type used when none is given (default: "u8")
        max_values: Upper bound on values decoded by one dump/plot (default: 65536)
    """

    default_type: str = "u8"
    max_values: int = 65536

    def __post_init__(self) -> None:
        """Validate read configuration."""
        try:
            GenericReader.parse(self.default_type)
        except ValueError as e:
            raise ConfigurationError(f"default_type: {e}") from e
        if self.max_values <= 0:
            raise ConfigurationError("max_values must be positive")


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """Defaults for rendering.

    Attributes:
        default_style: Formatter preset used when none is given (default: "default")
    """

    default_style: str = "default"

    def __post_init__(self) -> None:
        if self.default_style not in PRESETS:
            raise ConfigurationError(
                f"default_style must be one of {', '.join(PRESETS)}, got {self.default_style!r}"
            )


@dataclass
class SizedNumConfig:
    """Main configuration container.

    Examples:
        >>> config = SizedNumConfig(read=ReadConfig(default_type="u32le"))
        >>> config.read.default_type
        'u32le'
    """

    read: ReadConfig = field(default_factory=ReadConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def from_env(cls) -> "SizedNumConfig":
        """Create configuration from environment variables.

        Supported environment variables:
        - SIZEDNUM_TYPE: Default number type (e.g. "u32le")
        - SIZEDNUM_MAX_VALUES: Maximum number of values per dump/plot
        - SIZEDNUM_STYLE: Default formatter preset
        """
        raw_max = os.getenv("SIZEDNUM_MAX_VALUES", "65536")
        try:
            max_values = int(raw_max)
        except ValueError:
            raise ConfigurationError(f"SIZEDNUM_MAX_VALUES must be an integer, got {raw_max!r}") from None

        config = cls(
            read=ReadConfig(
                default_type=os.getenv("SIZEDNUM_TYPE", "u8"),
                max_values=max_values,
            ),
            display=DisplayConfig(default_style=os.getenv("SIZEDNUM_STYLE", "default")),
        )
        logger.debug(f"Loaded configuration from environment: {config}")
        return config


# Global default configuration
DEFAULT_CONFIG = SizedNumConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "DisplayConfig",
    "ReadConfig",
    "SizedNumConfig",
]
