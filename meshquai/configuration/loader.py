"""
mesh-quai Configuration Loader

Builds the process configuration from environment variables in a single
pass. Fields are validated in a fixed order and the first failure raises,
so the error always names the earliest offending variable:

    MODE -> NETWORK -> GOQUAI -> SKIP_GO_QUAI_ADMIN -> PORT

Environment variable mapping:
    MODE                → Configuration.mode
    NETWORK             → network, genesis_block_identifier,
                          chain_config, go_quai_arguments
    GOQUAI              → go_quai_url, remote_go_quai
    SKIP_GO_QUAI_ADMIN  → skip_go_quai_admin
    PORT                → port
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..constants import (
    DEFAULT_GO_QUAI_URL,
    GO_QUAI_ENV,
    MODE_ENV,
    NETWORK_ENV,
    PORT_ENV,
    SKIP_GO_QUAI_ADMIN_ENV,
)
from ..exceptions import ConfigParseError, InvalidEnumValueError, MissingFieldError
from ..quai.networks import BLOCKCHAIN, network_parameters
from ..quai.params import ChainConfig
from ..types import BlockIdentifier, NetworkIdentifier

# Base-10 integer with an optional sign; no whitespace or digit separators.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Largest value a signed 64-bit integer can hold.
_MAX_INT64 = 2 ** 63 - 1

_TRUE_TOKENS = frozenset({"1", "t", "true"})
_FALSE_TOKENS = frozenset({"0", "f", "false"})


class Mode(str, Enum):
    """Whether the implementation may make outbound connections."""
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"

    @classmethod
    def parse(cls, raw: str) -> "Mode":
        if not raw:
            raise MissingFieldError(MODE_ENV)
        try:
            return cls(raw)
        except ValueError:
            raise InvalidEnumValueError(MODE_ENV, raw, "mode") from None


class Network(str, Enum):
    """Networks accepted in the NETWORK environment variable."""
    MAINNET = "MAINNET"
    ORCHARD = "ORCHARD"
    LOCAL = "LOCAL"

    @classmethod
    def parse(cls, raw: str) -> "Network":
        if not raw:
            raise MissingFieldError(NETWORK_ENV)
        try:
            return cls(raw)
        except ValueError:
            raise InvalidEnumValueError(NETWORK_ENV, raw, "network") from None


@dataclass(frozen=True)
class Configuration:
    """
    Validated middleware configuration.

    Built once at startup by load_configuration() and never mutated.
    """
    mode: Mode
    network: NetworkIdentifier
    genesis_block_identifier: Optional[BlockIdentifier]
    chain_config: ChainConfig
    go_quai_url: str
    remote_go_quai: bool
    port: int
    go_quai_arguments: str
    skip_go_quai_admin: bool = False

    @property
    def is_online(self) -> bool:
        return self.mode is Mode.ONLINE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (for diagnostics)."""
        genesis = self.genesis_block_identifier
        return {
            "mode": self.mode.value,
            "network": self.network.to_dict(),
            "genesis_block_identifier": genesis.to_dict() if genesis else None,
            "chain_config": self.chain_config.to_dict(),
            "go_quai_url": self.go_quai_url,
            "remote_go_quai": self.remote_go_quai,
            "port": self.port,
            "go_quai_arguments": self.go_quai_arguments,
            "skip_go_quai_admin": self.skip_go_quai_admin,
        }


def parse_bool(field: str, raw: str) -> bool:
    """
    Parse a boolean flag.

    Accepts 1/t/true and 0/f/false in any casing.

    Raises:
        ConfigParseError: on any other text
    """
    token = raw.casefold()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise ConfigParseError(field, raw, reason="invalid syntax")


def parse_port(raw: str) -> int:
    """
    Parse a strictly positive base-10 port number.

    Raises:
        MissingFieldError: if raw is empty
        ConfigParseError: if raw is not an integer, exceeds the signed
            64-bit range or is not positive
    """
    if not raw:
        raise MissingFieldError(PORT_ENV)
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise ConfigParseError(PORT_ENV, raw, label="port", reason="invalid syntax")
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigParseError(PORT_ENV, raw, label="port", reason="value out of range") from e
    if port > _MAX_INT64:
        raise ConfigParseError(PORT_ENV, raw, label="port", reason="value out of range")
    if port <= 0:
        raise ConfigParseError(PORT_ENV, raw, label="port")
    return port


def load_configuration(environ: Optional[Mapping[str, str]] = None) -> Configuration:
    """
    Load the configuration from environment variables.

    Args:
        environ: Variables to read. Defaults to os.environ. Absent keys
            are treated as empty.

    Returns:
        Configuration instance

    Raises:
        MissingFieldError: a required variable is empty
        InvalidEnumValueError: MODE or NETWORK has an unknown value
        ConfigParseError: SKIP_GO_QUAI_ADMIN or PORT cannot be parsed
    """
    if environ is None:
        environ = os.environ

    def read(name: str) -> str:
        return environ.get(name) or ""

    mode = Mode.parse(read(MODE_ENV))

    network = Network.parse(read(NETWORK_ENV))
    params = network_parameters(network.value)

    go_quai_url = DEFAULT_GO_QUAI_URL
    remote_go_quai = False
    if v := read(GO_QUAI_ENV):
        go_quai_url = v
        remote_go_quai = True

    skip_go_quai_admin = False
    if v := read(SKIP_GO_QUAI_ADMIN_ENV):
        skip_go_quai_admin = parse_bool(SKIP_GO_QUAI_ADMIN_ENV, v)

    port = parse_port(read(PORT_ENV))

    return Configuration(
        mode=mode,
        network=NetworkIdentifier(blockchain=BLOCKCHAIN, network=params.network_name),
        genesis_block_identifier=params.genesis_block_identifier,
        chain_config=params.chain_config,
        go_quai_url=go_quai_url,
        remote_go_quai=remote_go_quai,
        port=port,
        go_quai_arguments=params.go_quai_arguments,
        skip_go_quai_admin=skip_go_quai_admin,
    )
