"""
mesh-quai Network Table Tests
"""

from dataclasses import FrozenInstanceError

import pytest

from meshquai.quai import NETWORK_PARAMETERS, network_parameters
from meshquai.quai.networks import (
    MAINNET_GENESIS_BLOCK_IDENTIFIER,
    ORCHARD_GENESIS_BLOCK_IDENTIFIER,
)
from meshquai.quai.params import PROGPOW_COLOSSEUM_CHAIN_CONFIG, PROGPOW_LOCAL_CHAIN_CONFIG


class TestNetworkParameters:
    """Static per-network table."""

    def test_known_networks(self):
        assert set(NETWORK_PARAMETERS) == {"MAINNET", "ORCHARD", "LOCAL"}

    def test_local_has_no_genesis(self):
        assert network_parameters("LOCAL").genesis_block_identifier is None

    def test_genesis_identifiers_distinct(self):
        mainnet = network_parameters("MAINNET").genesis_block_identifier
        orchard = network_parameters("ORCHARD").genesis_block_identifier
        assert mainnet is not None and orchard is not None
        assert mainnet != orchard
        assert mainnet.index == orchard.index == 0

    def test_genesis_hashes_are_32_bytes(self):
        for identifier in (MAINNET_GENESIS_BLOCK_IDENTIFIER, ORCHARD_GENESIS_BLOCK_IDENTIFIER):
            assert identifier.hash.startswith("0x")
            assert len(bytes.fromhex(identifier.hash[2:])) == 32

    def test_chain_ids_distinct(self):
        chain_ids = {p.chain_config.chain_id for p in NETWORK_PARAMETERS.values()}
        assert len(chain_ids) == len(NETWORK_PARAMETERS)

    def test_launch_arguments_select_network(self):
        assert "--colosseum" in network_parameters("MAINNET").go_quai_arguments
        assert "--orchard" in network_parameters("ORCHARD").go_quai_arguments
        assert "--local" in network_parameters("LOCAL").go_quai_arguments

    def test_unknown_network(self):
        with pytest.raises(KeyError):
            network_parameters("mainnet")

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            NETWORK_PARAMETERS["DEVNET"] = NETWORK_PARAMETERS["LOCAL"]

    def test_entries_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            network_parameters("MAINNET").go_quai_arguments = ""


class TestChainConfig:
    """Chain parameter sets."""

    def test_fork_block(self):
        assert PROGPOW_COLOSSEUM_CHAIN_CONFIG.fork_block("qi_activation") == 0
        assert PROGPOW_COLOSSEUM_CHAIN_CONFIG.fork_block("unknown") is None

    def test_to_dict(self):
        data = PROGPOW_LOCAL_CHAIN_CONFIG.to_dict()
        assert data["chain_id"] == 1337
        assert data["consensus_engine"] == "progpow"
        assert data["forks"]["etx_rollup"] == 0
