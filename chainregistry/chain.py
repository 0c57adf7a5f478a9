"""Blockchain ids.

Data structures and information about EVM based blockchains.
See :py:class:`Chain` enum class for passing the identity of a blockchain around.
This is based on the `EIP-155 <https://eips.ethereum.org/EIPS/eip-155>`_ chain id,
the same value as the `web3.eth.chain_id` attribute of a chain.

Besides the identity, the registry knows

- the canonical name and the aliases of each chain, see :py:meth:`Chain.parse`

- the average block time, see :py:meth:`Chain.get_average_block_time`

- the Etherscan compatible block explorer, see :py:meth:`Chain.get_explorer_urls`

- whether the chain takes EIP-1559 transactions, see :py:meth:`Chain.is_legacy`

When adding a new chain:

1. add a new member to :py:class:`Chain`

2. add an entry to :py:data:`_AVERAGE_BLOCK_TIMES`, :py:data:`_EXPLORER_URLS`
   and :py:data:`_LEGACY_CHAINS` - use `None` or `False` if nothing is known

3. (optional) add aliases to :py:data:`_ALIASES`

Forgetting step 2 fails at import time.
"""

import datetime
import enum
from typing import Dict, NamedTuple, Optional, Tuple, Union

from eth_utils import is_hex, to_int

from chainregistry.exceptions import ChainDataDoesNotExist, ParseChainError, UnknownChainId, UnrecognizedChainName
from chainregistry.types import Milliseconds, RawChainId, Slug, URL

#: Chain ids are unsigned 64-bit integers
U64_MAX = 2**64 - 1

#: Integer widths accepted by :py:meth:`Chain.from_narrow`.
#:
#: 64 stands for the platform word (`usize`).
NARROW_WIDTHS = (8, 16, 32, 64)

#: Integer widths accepted by :py:meth:`Chain.from_wide` and :py:meth:`Chain.to_uint`
WIDE_WIDTHS = (128, 256, 512)


class ExplorerUrls(NamedTuple):
    """Etherscan or Etherscan-like block explorer of a chain."""

    #: Etherscan compatible API endpoint, like `https://api.etherscan.io/api`
    api_url: URL

    #: Human facing landing page, like `https://etherscan.io`
    base_url: URL


class Chain(enum.IntEnum):
    """EIP-155 chain ids and chain metadata helper.

    Chain id is an integer that defines the identity of a blockchain,
    all running on same or different EVM implementations.
    The enum value is the chain id and fits in an unsigned 64-bit integer.

    The member set is closed: chains cannot be registered at runtime.
    Use :py:meth:`from_u64`, :py:meth:`from_int` or :py:meth:`parse` to pick one.

    `str(chain)` gives the canonical name, e.g. `binance-smart-chain`,
    derived from the member name. Note that because this is an `IntEnum`,
    `json.dumps(chain)` gives the number. Use :py:mod:`chainregistry.serialisation`
    for the name based interchange format.

    For the full chain id list see

    - `chainid.network <https://chainid.network/>`_

    - `chains repo <https://github.com/ethereum-lists/chains>`_
    """

    #: Ethereum mainnet chain id
    mainnet = 1

    #: Ethereum Classic era testnet, long gone
    morden = 2

    ropsten = 3

    rinkeby = 4

    goerli = 5

    kovan = 42

    sepolia = 11155111

    #: OP mainnet
    optimism = 10

    optimism_kovan = 69

    optimism_goerli = 420

    #: Arbitrum One
    arbitrum = 42161

    arbitrum_testnet = 421611

    arbitrum_goerli = 421613

    arbitrum_nova = 42170

    cronos = 25

    cronos_testnet = 338

    #: Rootstock
    rsk = 30

    #: Binance Smart Chain mainnet chain id
    binance_smart_chain = 56

    binance_smart_chain_testnet = 97

    #: POA Network core
    poa = 99

    #: POA Network testnet
    sokol = 77

    #: Gnosis chain, formerly xDai
    x_dai = 100

    #: Polygon PoS chain id
    polygon = 137

    polygon_mumbai = 80001

    #: Fantom Opera
    fantom = 250

    fantom_testnet = 4002

    moonbeam = 1284

    moonbeam_dev = 1281

    moonriver = 1285

    #: Moonbeam testnet
    moonbase = 1287

    #: Local development chain.
    #:
    #: Ganache and Geth `--dev` use this.
    dev = 1337

    #: Anvil and Hardhat test chain.
    #:
    #: `See Foundry commit <https://github.com/foundry-rs/foundry/commit/7d6fd0ebe4caf54f1b24d379d3df2205af04fe33>`__.
    anvil_hardhat = 31337

    evmos = 9001

    evmos_testnet = 9000

    #: Gnosis chain testnet
    chiado = 10200

    oasis = 26863

    #: Oasis Emerald paratime
    emerald = 42262

    emerald_testnet = 42261

    #: Avalanche C-chain id
    avalanche = 43114

    avalanche_fuji = 43113

    celo = 42220

    celo_alfajores = 44787

    celo_baklava = 62320

    aurora = 1313161554

    aurora_testnet = 1313161555

    def __str__(self) -> str:
        return self.get_name()

    def __format__(self, format_spec: str) -> str:
        # IntEnum would format the number
        return format(self.get_name(), format_spec)

    @classmethod
    def default(cls) -> "Chain":
        """The chain used when nothing else is given.

        Always Ethereum mainnet. Does not depend on member order or values.
        """
        return cls.mainnet

    @classmethod
    def count(cls) -> int:
        """How many chains the registry knows."""
        return len(cls.__members__)

    @classmethod
    def variants(cls) -> Tuple[Slug, ...]:
        """Canonical names of all chains, in declaration order."""
        return tuple(chain.get_name() for chain in cls)

    #
    # Numeric conversions
    #

    def to_u64(self) -> RawChainId:
        """Get the raw chain id."""
        return int(self.value)

    def to_uint(self, bits: int = 256) -> int:
        """Get the chain id as a wider unsigned integer, like `uint256` in Solidity.

        Python integers do not have a width, so this only validates
        the requested width and returns the same number as :py:meth:`to_u64`.
        """
        assert bits == 64 or bits in WIDE_WIDTHS, f"Unsupported integer width {bits}"
        return self.to_u64()

    @classmethod
    def from_u64(cls, value: int) -> "Chain":
        """Map a raw chain id back to the chain.

        :raise UnknownChainId:
            No chain has this id
        """
        assert isinstance(value, int) and not isinstance(value, bool), f"Got {type(value)}"
        assert 0 <= value <= U64_MAX, f"Not an unsigned 64-bit integer: {value}"
        try:
            return cls(value)
        except ValueError:
            raise UnknownChainId(value) from None

    @classmethod
    def from_narrow(cls, value: int, bits: int = 32) -> "Chain":
        """Map a chain id stored in a narrow unsigned integer (8, 16, 32 bits or `usize`).

        :param bits:
            The width the value was stored in.
            Passing a value that does not fit is a programming error.

        :raise UnknownChainId:
            No chain has this id
        """
        assert bits in NARROW_WIDTHS, f"Unsupported integer width {bits}"
        assert 0 <= value < 2**bits, f"Value {value} does not fit in {bits} bits"
        return cls.from_u64(value)

    @classmethod
    def from_wide(cls, value: int, bits: int = 256) -> "Chain":
        """Map a chain id stored in a wide unsigned integer (128, 256 or 512 bits).

        Anything that needs more than 64 bits cannot be a chain id.
        The error then reports the low 64 bits of the value,
        as :py:attr:`UnknownChainId.number` is a 64-bit number.

        :raise UnknownChainId:
            No chain has this id, or the value is over 64 bits
        """
        assert bits in WIDE_WIDTHS, f"Unsupported integer width {bits}"
        assert 0 <= value < 2**bits, f"Value {value} does not fit in {bits} bits"
        return cls.from_int(value)

    @classmethod
    def from_int(cls, value: int) -> "Chain":
        """Map any Python integer to the chain.

        Same rules as :py:meth:`from_wide`. Negative numbers are reported
        with the low 64 bits of their two's complement.

        :raise UnknownChainId:
            No chain has this id
        """
        assert isinstance(value, int) and not isinstance(value, bool), f"Got {type(value)}"
        if value < 0 or value.bit_length() > 64:
            raise UnknownChainId(value & U64_MAX)
        return cls.from_u64(value)

    @classmethod
    def from_hex(cls, text: str) -> "Chain":
        """Map a hex quantity, as returned by JSON-RPC `eth_chainId`, to the chain.

        Example: `Chain.from_hex("0x38")` is :py:attr:`binance_smart_chain`.

        :raise UnrecognizedChainName:
            Not a hex string

        :raise UnknownChainId:
            No chain has this id
        """
        assert type(text) == str, f"Got {type(text)}"
        if not is_hex(text):
            raise UnrecognizedChainName(text)
        try:
            value = to_int(hexstr=text)
        except ValueError:
            # "0x" alone passes is_hex()
            raise UnrecognizedChainName(text) from None
        return cls.from_int(value)

    #
    # Names
    #

    def get_name(self) -> Slug:
        """Get the canonical name.

        Lowercased and hyphen separated, e.g. `binance-smart-chain-testnet` for
        :py:attr:`binance_smart_chain_testnet`. Used for display and serialisation.
        """
        return self.name.replace("_", "-")

    def get_aliases(self) -> Tuple[Slug, ...]:
        """Get all strings :py:meth:`parse` accepts for this chain.

        The canonical name comes first.
        """
        names = (self.get_name(),) + _ALIASES.get(self, ())
        return tuple(dict.fromkeys(names))

    @staticmethod
    def get_by_name(name: str) -> Optional["Chain"]:
        """Map a canonical name or an alias back to the chain.

        Matching is exact and case-sensitive.

        :return:
            `None` if nothing matches
        """
        return _NAME_MAP.get(name)

    @classmethod
    def parse(cls, text: str) -> "Chain":
        """Map a canonical name or an alias back to the chain.

        :raise UnrecognizedChainName:
            Nothing matches
        """
        assert type(text) == str, f"Got {type(text)}"
        chain = cls.get_by_name(text)
        if chain is None:
            raise UnrecognizedChainName(text)
        return chain

    @classmethod
    def resolve(cls, value: Union["Chain", int, str]) -> "Chain":
        """Resolve user input to a chain.

        Accepts a chain, a chain id, a decimal or hex string of a chain id,
        a canonical name or an alias.

        Most useful for configuration files and command line arguments.
        """
        if isinstance(value, Chain):
            return value

        if isinstance(value, bool):
            raise ParseChainError(f"Cannot resolve chain from a boolean: {value}")

        if isinstance(value, int):
            return cls.from_int(value)

        assert isinstance(value, str), f"Cannot resolve chain from {type(value)}"

        if value.isascii() and value.isdecimal():
            return cls.from_int(int(value))

        if value.startswith(("0x", "0X")):
            return cls.from_hex(value)

        return cls.parse(value)

    #
    # Metadata
    #

    def get_average_block_time(self) -> Optional[datetime.timedelta]:
        """Get the chain's average block time, if known.

        It can be beneficial to know the average block time to adjust the polling of an HTTP provider
        for example.

        **Note**: this is not an accurate average, but is rather a sensible default derived from
        block time charts such as `Etherscan's <https://etherscan.com/chart/blocktime>`__
        or `Polygonscan's <https://polygonscan.com/chart/blocktime>`__.
        """
        ms = _AVERAGE_BLOCK_TIMES[self]
        if ms is None:
            return None
        return datetime.timedelta(milliseconds=ms)

    def get_explorer_urls(self) -> Optional[ExplorerUrls]:
        """Get the block explorer API and landing page, if the chain has an Etherscan compatible one."""
        return _EXPLORER_URLS[self]

    def is_legacy(self) -> bool:
        """Does this chain lack EIP-1559 (type 2 EIP-2718) transactions.

        Chains we do not know about are not legacy, for backwards compatibility.
        """
        return _LEGACY_CHAINS[self]

    def get_explorer(self) -> Optional[URL]:
        """Get explorer landing page for this blockchain, without a trailing slash."""
        urls = self.get_explorer_urls()
        if urls is None:
            return None
        return urls.base_url.rstrip("/")

    def get_address_link(self, address: str) -> URL:
        """Get one address link.

        Use EIP3091 format.

        https://eips.ethereum.org/EIPS/eip-3091
        """
        return f"{self._get_explorer_or_fail()}/address/{address}"

    def get_tx_link(self, tx_hash: str) -> URL:
        """Get one tx link"""
        return f"{self._get_explorer_or_fail()}/tx/{tx_hash}"

    def _get_explorer_or_fail(self) -> URL:
        explorer = self.get_explorer()
        if explorer is None:
            raise ChainDataDoesNotExist(f"No block explorer known for chain {self}")
        return explorer


#: Parse-only names.
#:
#: The canonical name is always accepted and need not be listed.
#: Aliases are a public contract: do not remove or repoint them.
_ALIASES: Dict[Chain, Tuple[Slug, ...]] = {
    Chain.binance_smart_chain: ("bsc",),
    Chain.binance_smart_chain_testnet: ("bsc-testnet",),
    Chain.x_dai: ("gnosis", "xdai", "gnosis-chain"),
    Chain.polygon_mumbai: ("mumbai", "polygon-mumbai"),
    Chain.dev: ("dev",),
    Chain.anvil_hardhat: ("anvil-hardhat", "anvil", "hardhat"),
    Chain.avalanche_fuji: ("fuji", "avalanche-fuji"),
}


#: Average block time per chain in milliseconds.
#:
#: Every chain is listed. `None` means there is no sensible default.
_AVERAGE_BLOCK_TIMES: Dict[Chain, Optional[Milliseconds]] = {
    Chain.arbitrum: 1_300,
    Chain.arbitrum_testnet: 1_300,
    Chain.arbitrum_goerli: 1_300,
    Chain.arbitrum_nova: 1_300,
    Chain.mainnet: 13_000,
    Chain.optimism: 13_000,
    Chain.polygon: 2_100,
    Chain.polygon_mumbai: 2_100,
    Chain.moonbeam: 12_500,
    Chain.moonriver: 12_500,
    Chain.binance_smart_chain: 3_000,
    Chain.binance_smart_chain_testnet: 3_000,
    Chain.avalanche: 2_000,
    Chain.avalanche_fuji: 2_000,
    Chain.fantom: 1_200,
    Chain.fantom_testnet: 1_200,
    Chain.cronos: 5_700,
    Chain.cronos_testnet: 5_700,
    Chain.evmos: 1_900,
    Chain.evmos_testnet: 1_900,
    Chain.aurora: 1_100,
    Chain.aurora_testnet: 1_100,
    Chain.oasis: 5_500,
    Chain.emerald: 6_000,
    Chain.dev: 200,
    Chain.anvil_hardhat: 200,
    Chain.celo: 5_000,
    Chain.celo_alfajores: 5_000,
    Chain.celo_baklava: 5_000,

    # No data
    Chain.morden: None,
    Chain.ropsten: None,
    Chain.rinkeby: None,
    Chain.goerli: None,
    Chain.kovan: None,
    Chain.x_dai: None,
    Chain.chiado: None,
    Chain.sepolia: None,
    Chain.moonbase: None,
    Chain.moonbeam_dev: None,
    Chain.optimism_goerli: None,
    Chain.optimism_kovan: None,
    Chain.poa: None,
    Chain.sokol: None,
    Chain.rsk: None,
    Chain.emerald_testnet: None,
}


#: Etherscan and Etherscan-like explorers.
#:
#: Every chain is listed. `None` means no known explorer.
_EXPLORER_URLS: Dict[Chain, Optional[ExplorerUrls]] = {
    Chain.mainnet: ExplorerUrls("https://api.etherscan.io/api", "https://etherscan.io"),
    Chain.ropsten: ExplorerUrls("https://api-ropsten.etherscan.io/api", "https://ropsten.etherscan.io"),
    Chain.kovan: ExplorerUrls("https://api-kovan.etherscan.io/api", "https://kovan.etherscan.io"),
    Chain.rinkeby: ExplorerUrls("https://api-rinkeby.etherscan.io/api", "https://rinkeby.etherscan.io"),
    Chain.goerli: ExplorerUrls("https://api-goerli.etherscan.io/api", "https://goerli.etherscan.io"),
    Chain.sepolia: ExplorerUrls("https://api-sepolia.etherscan.io/api", "https://sepolia.etherscan.io"),
    Chain.polygon: ExplorerUrls("https://api.polygonscan.com/api", "https://polygonscan.com"),
    Chain.polygon_mumbai: ExplorerUrls("https://api-testnet.polygonscan.com/api", "https://mumbai.polygonscan.com"),
    Chain.avalanche: ExplorerUrls("https://api.snowtrace.io/api", "https://snowtrace.io"),
    Chain.avalanche_fuji: ExplorerUrls("https://api-testnet.snowtrace.io/api", "https://testnet.snowtrace.io"),
    Chain.optimism: ExplorerUrls("https://api-optimistic.etherscan.io/api", "https://optimistic.etherscan.io"),
    Chain.optimism_goerli: ExplorerUrls(
        "https://api-goerli-optimistic.etherscan.io/api",
        "https://goerli-optimism.etherscan.io",
    ),
    Chain.optimism_kovan: ExplorerUrls(
        "https://api-kovan-optimistic.etherscan.io/api",
        "https://kovan-optimistic.etherscan.io",
    ),
    Chain.fantom: ExplorerUrls("https://api.ftmscan.com/api", "https://ftmscan.com"),
    Chain.fantom_testnet: ExplorerUrls("https://api-testnet.ftmscan.com/api", "https://testnet.ftmscan.com"),
    Chain.binance_smart_chain: ExplorerUrls("https://api.bscscan.com/api", "https://bscscan.com"),
    Chain.binance_smart_chain_testnet: ExplorerUrls("https://api-testnet.bscscan.com/api", "https://testnet.bscscan.com"),
    Chain.arbitrum: ExplorerUrls("https://api.arbiscan.io/api", "https://arbiscan.io"),
    Chain.arbitrum_testnet: ExplorerUrls("https://api-testnet.arbiscan.io/api", "https://testnet.arbiscan.io"),
    Chain.arbitrum_goerli: ExplorerUrls(
        "https://goerli-rollup-explorer.arbitrum.io/api",
        "https://goerli-rollup-explorer.arbitrum.io",
    ),
    Chain.arbitrum_nova: ExplorerUrls("https://api-nova.arbiscan.io/api", "https://nova.arbiscan.io/"),
    Chain.cronos: ExplorerUrls("https://api.cronoscan.com/api", "https://cronoscan.com"),
    Chain.cronos_testnet: ExplorerUrls("https://api-testnet.cronoscan.com/api", "https://testnet.cronoscan.com"),
    Chain.moonbeam: ExplorerUrls("https://api-moonbeam.moonscan.io/api", "https://moonbeam.moonscan.io/"),
    Chain.moonbase: ExplorerUrls("https://api-moonbase.moonscan.io/api", "https://moonbase.moonscan.io/"),
    Chain.moonriver: ExplorerUrls("https://api-moonriver.moonscan.io/api", "https://moonriver.moonscan.io"),

    # Blockscout API is Etherscan compatible
    Chain.x_dai: ExplorerUrls("https://blockscout.com/xdai/mainnet/api", "https://blockscout.com/xdai/mainnet"),
    Chain.chiado: ExplorerUrls("https://blockscout.chiadochain.net/api", "https://blockscout.chiadochain.net"),
    Chain.sokol: ExplorerUrls("https://blockscout.com/poa/sokol/api", "https://blockscout.com/poa/sokol"),
    Chain.poa: ExplorerUrls("https://blockscout.com/poa/core/api", "https://blockscout.com/poa/core"),
    Chain.rsk: ExplorerUrls("https://blockscout.com/rsk/mainnet/api", "https://blockscout.com/rsk/mainnet"),
    Chain.celo: ExplorerUrls("https://explorer.celo.org/mainnet/api", "https://explorer.celo.org/mainnet"),
    Chain.celo_alfajores: ExplorerUrls("https://explorer.celo.org/alfajores/api", "https://explorer.celo.org/alfajores"),
    Chain.celo_baklava: ExplorerUrls("https://explorer.celo.org/baklava/api", "https://explorer.celo.org/baklava"),

    Chain.oasis: ExplorerUrls("https://scan.oasischain.io/api", "https://scan.oasischain.io/"),
    Chain.emerald: ExplorerUrls("https://explorer.emerald.oasis.dev/api", "https://explorer.emerald.oasis.dev/"),
    Chain.emerald_testnet: ExplorerUrls(
        "https://testnet.explorer.emerald.oasis.dev/api",
        "https://testnet.explorer.emerald.oasis.dev/",
    ),
    Chain.aurora: ExplorerUrls("https://api.aurorascan.dev/api", "https://aurorascan.dev"),
    Chain.aurora_testnet: ExplorerUrls("https://testnet.aurorascan.dev/api", "https://testnet.aurorascan.dev"),
    Chain.evmos: ExplorerUrls("https://evm.evmos.org/api", "https://evm.evmos.org/"),
    Chain.evmos_testnet: ExplorerUrls("https://evm.evmos.dev/api", "https://evm.evmos.dev/"),

    # No explorer
    Chain.anvil_hardhat: None,
    Chain.dev: None,
    Chain.morden: None,
    Chain.moonbeam_dev: None,
}


#: EIP-1559 support per chain.
#:
#: Every chain is listed. Do not turn unknown into `None`,
#: callers rely on unknown meaning "not legacy".
_LEGACY_CHAINS: Dict[Chain, bool] = {
    # Known legacy chains / non EIP-1559 compliant
    Chain.optimism: True,
    Chain.optimism_goerli: True,
    Chain.optimism_kovan: True,
    Chain.fantom: True,
    Chain.fantom_testnet: True,
    Chain.binance_smart_chain: True,
    Chain.binance_smart_chain_testnet: True,
    Chain.arbitrum: True,
    Chain.arbitrum_testnet: True,
    Chain.arbitrum_goerli: True,
    Chain.arbitrum_nova: True,
    Chain.rsk: True,
    Chain.oasis: True,
    Chain.emerald: True,
    Chain.emerald_testnet: True,
    Chain.celo: True,
    Chain.celo_alfajores: True,
    Chain.celo_baklava: True,

    # Known EIP-1559 chains
    Chain.mainnet: False,
    Chain.goerli: False,
    Chain.sepolia: False,
    Chain.polygon: False,
    Chain.polygon_mumbai: False,
    Chain.avalanche: False,
    Chain.avalanche_fuji: False,

    # Unknown / not applicable, default to False for backwards compatibility
    Chain.dev: False,
    Chain.anvil_hardhat: False,
    Chain.morden: False,
    Chain.ropsten: False,
    Chain.rinkeby: False,
    Chain.cronos: False,
    Chain.cronos_testnet: False,
    Chain.kovan: False,
    Chain.sokol: False,
    Chain.poa: False,
    Chain.x_dai: False,
    Chain.moonbeam: False,
    Chain.moonbeam_dev: False,
    Chain.moonriver: False,
    Chain.moonbase: False,
    Chain.evmos: False,
    Chain.evmos_testnet: False,
    Chain.chiado: False,
    Chain.aurora: False,
    Chain.aurora_testnet: False,
}


#: All metadata tables that must list every chain
METADATA_TABLES: Dict[str, dict] = {
    "average block time": _AVERAGE_BLOCK_TIMES,
    "explorer urls": _EXPLORER_URLS,
    "legacy": _LEGACY_CHAINS,
}


def check_metadata_complete():
    """Make sure every chain is classified in every metadata table.

    :raise RuntimeError:
        A chain is missing from a table
    """
    for table_name, table in METADATA_TABLES.items():
        missing = [chain for chain in Chain if chain not in table]
        if missing:
            raise RuntimeError(f"Chains missing from the {table_name} table: {', '.join(c.name for c in missing)}")


def _build_name_map() -> Dict[Slug, Chain]:
    """Build canonical name and alias -> chain reverse mapping.

    :raise RuntimeError:
        The same string would resolve to two chains
    """
    name_map: Dict[Slug, Chain] = {}
    for chain in Chain:
        for name in chain.get_aliases():
            existing = name_map.get(name)
            if existing is not None and existing != chain:
                raise RuntimeError(f"Name {name} is claimed by both {existing.name} and {chain.name}")
            name_map[name] = chain
    return name_map


check_metadata_complete()

#: Canonical name and alias -> chain mapping, built once
_NAME_MAP: Dict[Slug, Chain] = _build_name_map()
