"""
Quai network support: chain parameters, per-network lookup tables and
address helpers.
"""

from .address import Location, checksum_address, must_checksum
from .networks import (
    BLOCKCHAIN,
    MAINNET_NETWORK,
    ORCHARD_NETWORK,
    DEV_NETWORK,
    NETWORK_PARAMETERS,
    NetworkParameters,
    network_parameters,
)
from .params import ChainConfig

__all__ = [
    "Location",
    "checksum_address",
    "must_checksum",
    "BLOCKCHAIN",
    "MAINNET_NETWORK",
    "ORCHARD_NETWORK",
    "DEV_NETWORK",
    "NETWORK_PARAMETERS",
    "NetworkParameters",
    "network_parameters",
    "ChainConfig",
]
