"""
Rosetta identifier types shared by the configuration and its consumers.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class NetworkIdentifier:
    """Identifies a blockchain and one of its networks."""
    blockchain: str
    network: str

    def to_dict(self) -> Dict[str, Any]:
        return {"blockchain": self.blockchain, "network": self.network}


@dataclass(frozen=True)
class BlockIdentifier:
    """Uniquely identifies a block by height and hash."""
    index: int
    hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {"index": self.index, "hash": self.hash}
