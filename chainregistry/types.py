"""Type aliases used across the registry.

Types aliases are used to give human-readable meaning for various arguments and return values.
"""
from typing import TypeAlias

#: Chain id that is not a wrapped enum.
#:
#: See :py:class:`chainregistry.chain.Chain` for details
RawChainId: TypeAlias = int

#: Slug is a machine friendly and URL friendly id generated from a name.
#:
#: E.g. `BinanceSmartChain` -> `binance-smart-chain`
#:
Slug: TypeAlias = str

#: URL as a string type
#:
URL: TypeAlias = str

#: Block time in milliseconds, as stored in the block time table
Milliseconds: TypeAlias = int
