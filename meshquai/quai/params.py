"""
Quai Chain Parameters

Static protocol parameter sets for each supported network. The values are
passed through the configuration to consumers unmodified.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ChainConfig:
    """Core protocol rules of a Quai network."""

    # Chain identifier used in transaction signing (EIP-155)
    chain_id: int

    # Human readable network name
    name: str

    # Consensus engine ("progpow" or "blake3pow")
    consensus_engine: str = "progpow"

    # Nonce committed to by the genesis block
    genesis_nonce: int = 0

    # Number of blocks between difficulty adjustments
    difficulty_adjustment_period: int = 360

    # Fork activation heights as (fork name, block number) pairs
    forks: Tuple[Tuple[str, int], ...] = field(default_factory=tuple)

    def fork_block(self, name: str) -> Optional[int]:
        """Return the activation height of *name*, or None if unscheduled."""
        for fork_name, number in self.forks:
            if fork_name == name:
                return number
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chain_id": self.chain_id,
            "name": self.name,
            "consensus_engine": self.consensus_engine,
            "genesis_nonce": self.genesis_nonce,
            "difficulty_adjustment_period": self.difficulty_adjustment_period,
            "forks": {fork_name: number for fork_name, number in self.forks},
        }


# Quai mainnet (Colosseum)
PROGPOW_COLOSSEUM_CHAIN_CONFIG = ChainConfig(
    chain_id=9000,
    name="colosseum",
    genesis_nonce=23_621_466_404_009_385_530,
    forks=(("qi_activation", 0), ("etx_rollup", 120_000)),
)

# Quai Orchard testnet
PROGPOW_ORCHARD_CHAIN_CONFIG = ChainConfig(
    chain_id=15000,
    name="orchard",
    genesis_nonce=18_446_744_073_709_551_557,
    forks=(("qi_activation", 0), ("etx_rollup", 0)),
)

# Local development network
PROGPOW_LOCAL_CHAIN_CONFIG = ChainConfig(
    chain_id=1337,
    name="local",
    genesis_nonce=0,
    difficulty_adjustment_period=10,
    forks=(("qi_activation", 0), ("etx_rollup", 0)),
)
