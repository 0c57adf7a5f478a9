"""Canonical names and aliases."""
import pytest

from chainregistry.chain import Chain
from chainregistry.exceptions import ParseChainError, UnrecognizedChainName


@pytest.mark.parametrize("chain", list(Chain), ids=str)
def test_name_round_trip(chain: Chain):
    assert Chain.parse(str(chain)) == chain


@pytest.mark.parametrize("chain", list(Chain), ids=str)
def test_aliases_resolve(chain: Chain):
    for alias in chain.get_aliases():
        assert Chain.parse(alias) == chain


def test_canonical_names_unique():
    names = Chain.variants()
    assert len(set(names)) == len(names)


def test_canonical_name_format():
    for name in Chain.variants():
        assert name == name.lower()
        assert "_" not in name
        assert " " not in name


@pytest.mark.parametrize(
    "chain_id, canonical, aliases",
    [
        (56, "binance-smart-chain", ["bsc"]),
        (97, "binance-smart-chain-testnet", ["bsc-testnet"]),
        (100, "x-dai", ["gnosis", "xdai", "gnosis-chain"]),
        (80001, "polygon-mumbai", ["mumbai", "polygon-mumbai"]),
        (1337, "dev", ["dev"]),
        (31337, "anvil-hardhat", ["anvil-hardhat", "anvil", "hardhat"]),
        (43113, "avalanche-fuji", ["fuji", "avalanche-fuji"]),
    ]
)
def test_documented_aliases(chain_id: int, canonical: str, aliases: list):
    chain = Chain.from_u64(chain_id)
    assert str(chain) == canonical
    assert chain.get_aliases()[0] == canonical
    for alias in aliases:
        assert Chain.parse(alias) == chain
        assert alias in chain.get_aliases()


def test_display_never_uses_alias():
    assert str(Chain.x_dai) == "x-dai"
    assert f"{Chain.binance_smart_chain}" == "binance-smart-chain"
    assert f"{Chain.dev:>6}" == "   dev"
    assert Chain.anvil_hardhat.get_name() == "anvil-hardhat"


def test_aliases_no_duplicates():
    assert Chain.polygon_mumbai.get_aliases() == ("polygon-mumbai", "mumbai")
    assert Chain.mainnet.get_aliases() == ("mainnet",)


def test_parse_case_sensitive():
    with pytest.raises(UnrecognizedChainName) as exc_info:
        Chain.parse("Mainnet")
    assert exc_info.value.name == "Mainnet"


@pytest.mark.parametrize("bad", ["", "ethereum", "bsc ", "binance_smart_chain", "1"])
def test_parse_unknown(bad: str):
    with pytest.raises(ParseChainError):
        Chain.parse(bad)
    assert Chain.get_by_name(bad) is None


def test_get_by_name():
    assert Chain.get_by_name("gnosis") == Chain.x_dai
    assert Chain.get_by_name("hardhat") == Chain.anvil_hardhat
