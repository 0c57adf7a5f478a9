import pytest

from chainregistry.caip import (
    BadChainAddressTuple,
    ChainAddressTuple,
    ChainReference,
    InvalidChainId,
    InvalidChainReference,
    InvalidChecksum,
)
from chainregistry.chain import Chain


def test_caip_parse_naive():
    tuple = ChainAddressTuple.parse_naive("1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc")
    assert tuple.chain == Chain.mainnet
    assert tuple.chain_id == 1
    assert tuple.address == "0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc"
    assert str(tuple) == "1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc"


def test_caip_bad_checksum():
    # Notive lower b, as Ethereum encodes the checksum in the hex capitalisation
    with pytest.raises(InvalidChecksum):
        ChainAddressTuple.parse_naive("1:0xb4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc")


@pytest.mark.parametrize("bad", ["", "1", "1:2:3"])
def test_caip_bad_format(bad: str):
    with pytest.raises(BadChainAddressTuple):
        ChainAddressTuple.parse_naive(bad)


@pytest.mark.parametrize("chain_id", ["666", "-1", "bsc", "0x1"])
def test_caip_bad_chain_id(chain_id: str):
    with pytest.raises(InvalidChainId):
        ChainAddressTuple.parse_naive(f"{chain_id}:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc")


def test_chain_reference():
    ref = ChainReference.parse("eip155:56")
    assert ref.chain == Chain.binance_smart_chain
    assert str(ref) == "eip155:56"


@pytest.mark.parametrize("chain", list(Chain), ids=str)
def test_chain_reference_all_chains(chain: Chain):
    assert ChainReference.parse(str(ChainReference(chain))).chain == chain


@pytest.mark.parametrize("bad", ["eip155", "cosmos:cosmoshub-3", "eip155:bsc", "eip155:666", "eip155:18446744073709551672"])
def test_chain_reference_bad(bad: str):
    with pytest.raises(InvalidChainReference):
        ChainReference.parse(bad)


def test_caip_non_ascii_chain_id():
    with pytest.raises(InvalidChainId):
        ChainAddressTuple.parse_naive("٥٦:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc")

    with pytest.raises(InvalidChainReference):
        ChainReference.parse("eip155:٥٦")
