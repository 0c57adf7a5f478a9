"""Chain serialisation for JSON and other text based interchange formats.

The interchange format of a chain is its canonical name, e.g. `"binance-smart-chain"`.
Decoding accepts the canonical name, any alias and, for data written
by older code, a raw integer chain id.

Use :py:func:`chain_field` to declare chain fields on `dataclass_json` classes:

.. code-block:: python

    @dataclass_json
    @dataclass
    class Deployment:
        chain: Chain = chain_field(default=Chain.default())

    assert Deployment().to_json() == '{"chain": "mainnet"}'

A plain `chain: Chain` field without :py:func:`chain_field` is serialised
as the chain id, because :py:class:`Chain` is an `IntEnum`:

.. code-block:: python

    @dataclass_json
    @dataclass
    class PlainDeployment:
        chain: Chain = Chain.default()

    assert PlainDeployment().to_json() == '{"chain": 1}'
"""

import dataclasses
from typing import Optional, Union

from dataclasses_json import config
from marshmallow import fields

from chainregistry.chain import Chain
from chainregistry.exceptions import ParseChainError
from chainregistry.types import Slug


def encode_chain(chain: Optional[Chain]) -> Optional[Slug]:
    """Convert chain to its canonical name, passing `None` through."""
    if chain is None:
        return None
    assert isinstance(chain, Chain), f"Got {type(chain)}"
    return chain.get_name()


def decode_chain(value: Union[Chain, Slug, int, None]) -> Optional[Chain]:
    """Convert serialised chain back to :py:class:`Chain`, passing `None` through.

    :raise ParseChainError:
        Unknown name or chain id, or a value of a wrong type
    """
    if value is None:
        return None

    if isinstance(value, Chain):
        return value

    if isinstance(value, str):
        return Chain.parse(value)

    if isinstance(value, int) and not isinstance(value, bool):
        return Chain.from_int(value)

    raise ParseChainError(f"Cannot decode chain from {type(value)}: {value!r}")


class ChainField(fields.Field):
    """Marshmallow field for :py:class:`Chain`.

    Used by `dataclass_json` schemas, see :py:func:`chain_field`.
    """

    default_error_messages = {
        "invalid": "Not a known chain: {input}",
    }

    def _serialize(self, value, attr, obj, **kwargs):
        return encode_chain(value)

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return decode_chain(value)
        except ParseChainError as e:
            raise self.make_error("invalid", input=value) from e


def chain_field(default: Optional[Chain] = dataclasses.MISSING, **kwargs) -> dataclasses.Field:
    """Declare a :py:class:`Chain` field on a `dataclass_json` dataclass.

    :param default:
        Default chain. Leave out to make the field required.

    :param kwargs:
        Passed to `dataclasses.field`
    """
    return dataclasses.field(
        default=default,
        metadata=config(
            encoder=encode_chain,
            decoder=decode_chain,
            mm_field=ChainField(allow_none=default is None),
        ),
        **kwargs,
    )
