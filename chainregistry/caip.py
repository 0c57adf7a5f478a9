"""This module contains tooling for chain-agnostic identifiers.

When working with multiple blockchains, we need to be able to uniquely identify
a chain, and the same smart contract address on multiple chains, as a string.

- :py:class:`ChainReference` is a `CAIP-2 <https://github.com/ChainAgnostic/CAIPs/blob/main/CAIPs/caip-2.md>`_
  chain id like `eip155:56`

- :py:class:`ChainAddressTuple` is a naive `56:0x...` chain id - address pair

For more information see the `CAIP project <https://github.com/ChainAgnostic/CAIPs>`_.
"""

from dataclasses import dataclass

from eth_utils import is_checksum_address

from chainregistry.chain import Chain

#: The only CAIP-2 namespace EVM chains live in
EIP155_NAMESPACE = "eip155"


class BadChainAddressTuple(Exception):
    """Something was wrong with the constructed chain - address tuple."""
    pass


class InvalidChainId(BadChainAddressTuple):
    """Chain id was not an integer or is not a chain we know"""


class InvalidChecksum(BadChainAddressTuple):
    """Ethereum checksum of the address is invalid"""


class InvalidChainReference(Exception):
    """CAIP-2 chain id could not be parsed"""


def _parse_chain_id(v: str) -> Chain:
    # Chain ids are plain decimals in both formats, no hex, no sign
    if not (v.isascii() and v.isdecimal()):
        raise ValueError(f"Not a decimal chain id: {v}")
    return Chain.from_int(int(v))


@dataclass(frozen=True)
class ChainReference:
    """CAIP-2 blockchain id of an EVM chain.

    Example: `eip155:1` for Ethereum mainnet.
    """

    chain: Chain

    def __str__(self) -> str:
        return f"{EIP155_NAMESPACE}:{self.chain.to_u64()}"

    @staticmethod
    def parse(v: str) -> "ChainReference":
        """Parse `namespace:reference` string.

        :raise InvalidChainReference:
            Not in the `eip155` namespace, or the chain is unknown
        """
        assert type(v) == str

        namespace, sep, reference = v.partition(":")
        if not sep:
            raise InvalidChainReference(f"Not a CAIP-2 chain id: {v}")

        if namespace != EIP155_NAMESPACE:
            raise InvalidChainReference(f"Unsupported namespace {namespace} in {v}")

        try:
            chain = _parse_chain_id(reference)
        except ValueError as e:  # Includes ParseChainError
            raise InvalidChainReference(f"Invalid chain reference in {v}: {e}") from e

        return ChainReference(chain)


@dataclass
class ChainAddressTuple:
    """Present one chain-agnostic address."""

    #: The chain the address lives on
    chain: Chain

    #: Checksummed address
    address: str

    @property
    def chain_id(self) -> int:
        """The raw chain id"""
        return self.chain.to_u64()

    def __str__(self) -> str:
        return f"{self.chain_id}:{self.address}"

    @staticmethod
    def parse_naive(v: str) -> "ChainAddressTuple":
        """Parses chain_id and EVM address tuple.

        Example tuple: `1:0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc` - ETH-USDC on Uniswap v2
        """
        assert type(v) == str

        if not v:
            raise BadChainAddressTuple("Empty string passed")

        parts = v.split(":")

        if len(parts) != 2:
            raise BadChainAddressTuple(f"Cannot split chain id in address {v}")

        address = parts[1]
        if not is_checksum_address(address):
            raise InvalidChecksum("Address checksum or format invalid")

        try:
            chain = _parse_chain_id(parts[0])
        except ValueError:  # Includes ParseChainError
            raise InvalidChainId(f"Invalid chain_id on {v}")

        return ChainAddressTuple(chain, address)
