"""Module for custom exceptions.

This should contain base classes. Children of these base classes that are only
raised by one module are defined in that module, like :py:mod:`chainregistry.caip`.
"""


class ParseChainError(ValueError):
    """Cannot map a number or a string to a :py:class:`chainregistry.chain.Chain`.

    Subclass of `ValueError` so that it behaves like a failed `Chain(value)`
    for callers that do not care about the exact cause.
    """


class UnknownChainId(ParseChainError):
    """No chain has the given numeric chain id."""

    def __init__(self, number: int):
        #: The rejected chain id, always in the unsigned 64-bit range
        self.number = number
        super().__init__(f"Unknown chain id: {number}")


class UnrecognizedChainName(ParseChainError):
    """The string is not a canonical name or an alias of any chain."""

    def __init__(self, name: str):
        #: The rejected input string
        self.name = name
        super().__init__(f"Unrecognized chain name: {name!r}")


class ChainDataDoesNotExist(Exception):
    """Cannot find data for a specific chain"""
