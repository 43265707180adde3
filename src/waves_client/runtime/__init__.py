"""Runtime helpers for the waves_client package"""

from .errors import (
    ErrorCode, WavesError, EncodingError, SigningError, ProofPolicyError, DecodingError
)
from .config import ChainConfig, MAINNET, TESTNET, check_chain_id, get_default_config, set_default_config, configure_logging

__all__ = [
    "ErrorCode",
    "WavesError",
    "EncodingError",
    "SigningError",
    "ProofPolicyError",
    "DecodingError",
    "ChainConfig",
    "MAINNET",
    "TESTNET",
    "check_chain_id",
    "get_default_config",
    "set_default_config",
    "configure_logging",
]
