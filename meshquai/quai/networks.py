"""
Quai Network Parameters

Static lookup of everything that varies per named network: the Rosetta
network identifier, the chain parameter set, the genesis block and the
arguments used when the middleware launches its own go-quai node.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ..types import BlockIdentifier
from .params import (
    ChainConfig,
    PROGPOW_COLOSSEUM_CHAIN_CONFIG,
    PROGPOW_ORCHARD_CHAIN_CONFIG,
    PROGPOW_LOCAL_CHAIN_CONFIG,
)


# Rosetta blockchain name
BLOCKCHAIN = "Quai"

# Rosetta network names
MAINNET_NETWORK = "Mainnet"
ORCHARD_NETWORK = "Orchard"
DEV_NETWORK = "Dev"

MAINNET_GENESIS_BLOCK_IDENTIFIER = BlockIdentifier(
    index=0,
    hash="0x2b1a5f7c4e3d9e6b07a1c8f3d5e2b4a69087c6d5e4f3a2b1c0d9e8f7a6b5c4d3",
)

ORCHARD_GENESIS_BLOCK_IDENTIFIER = BlockIdentifier(
    index=0,
    hash="0x863406ab29dc4ab0bc8e4f1a36b2d5c7e09f18a3b4c5d6e7f8091a2b3c4d5e6f",
)

# Flags shared by every go-quai node launched by the middleware
_GO_QUAI_BASE_ARGUMENTS = "--config=/app/quai/go-quai.toml --gcmode=archive --graphql"

MAINNET_GO_QUAI_ARGUMENTS = _GO_QUAI_BASE_ARGUMENTS + " --colosseum"
ORCHARD_GO_QUAI_ARGUMENTS = _GO_QUAI_BASE_ARGUMENTS + " --orchard"
LOCAL_GO_QUAI_ARGUMENTS = _GO_QUAI_BASE_ARGUMENTS + " --local --nodiscover"


@dataclass(frozen=True)
class NetworkParameters:
    """One entry of the per-network table."""
    network_name: str
    chain_config: ChainConfig
    genesis_block_identifier: Optional[BlockIdentifier]
    go_quai_arguments: str


# Keyed by the literal accepted in the NETWORK environment variable.
NETWORK_PARAMETERS: Mapping[str, NetworkParameters] = MappingProxyType({
    "MAINNET": NetworkParameters(
        network_name=MAINNET_NETWORK,
        chain_config=PROGPOW_COLOSSEUM_CHAIN_CONFIG,
        genesis_block_identifier=MAINNET_GENESIS_BLOCK_IDENTIFIER,
        go_quai_arguments=MAINNET_GO_QUAI_ARGUMENTS,
    ),
    "ORCHARD": NetworkParameters(
        network_name=ORCHARD_NETWORK,
        chain_config=PROGPOW_ORCHARD_CHAIN_CONFIG,
        genesis_block_identifier=ORCHARD_GENESIS_BLOCK_IDENTIFIER,
        go_quai_arguments=ORCHARD_GO_QUAI_ARGUMENTS,
    ),
    # The local network has no fixed genesis.
    "LOCAL": NetworkParameters(
        network_name=DEV_NETWORK,
        chain_config=PROGPOW_LOCAL_CHAIN_CONFIG,
        genesis_block_identifier=None,
        go_quai_arguments=LOCAL_GO_QUAI_ARGUMENTS,
    ),
})


def network_parameters(name: str) -> NetworkParameters:
    """
    Look up the parameters of a named network.

    Args:
        name: Exact network literal ("MAINNET", "ORCHARD" or "LOCAL")

    Returns:
        NetworkParameters for that network

    Raises:
        KeyError: if the network is unknown
    """
    return NETWORK_PARAMETERS[name]
