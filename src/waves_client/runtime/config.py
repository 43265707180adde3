"""
Chain configuration for the codec.

Only the values that end up inside signed bytes live here; transport settings
belong to whichever client submits the JSON.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import EncodingError, ErrorCode

PACKAGE_LOGGER = "waves_client"

_TRUE_VALUES = ("1", "true", "yes", "on")


def check_chain_id(chain_id: Any) -> str:
    """
    Ensure ``chain_id`` is one ASCII character.

    Raises:
        EncodingError: For anything else
    """
    if not isinstance(chain_id, str) or len(chain_id) != 1 or ord(chain_id) > 0x7F:
        raise EncodingError(
            f"Chain id must be a single ASCII character, got {chain_id!r}",
            ErrorCode.INVALID_FIELD,
            details={"field": "chainId"},
        )
    return chain_id


@dataclass(frozen=True)
class ChainConfig:
    """Network parameters used when building transactions."""

    chain_id: str = "W"
    debug: bool = False

    def __post_init__(self):
        check_chain_id(self.chain_id)

    @property
    def chain_byte(self) -> int:
        """The chain id as written into alias and script bodies."""
        return ord(self.chain_id)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ChainConfig:
        """
        Build a config from ``WAVES_CHAIN_ID`` and ``WAVES_DEBUG``.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ChainConfig with defaults for unset variables
        """
        env = os.environ if environ is None else environ
        return cls(
            chain_id=env.get("WAVES_CHAIN_ID", "W"),
            debug=env.get("WAVES_DEBUG", "").strip().lower() in _TRUE_VALUES,
        )


MAINNET = ChainConfig(chain_id="W")
TESTNET = ChainConfig(chain_id="T")

_default_config = MAINNET


def get_default_config() -> ChainConfig:
    """Config used by builders when the caller passes none."""
    return _default_config


def set_default_config(config: ChainConfig) -> None:
    """Replace the process default config and apply its logging level."""
    global _default_config
    _default_config = config
    configure_logging(config)


def configure_logging(config: ChainConfig) -> logging.Logger:
    """Switch the package logger to DEBUG when ``config.debug`` is set."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if config.debug:
        logger.setLevel(logging.DEBUG)
    return logger
