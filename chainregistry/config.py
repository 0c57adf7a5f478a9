"""Chain selection configuration.

Consumers that talk to one chain usually need the same three settings:
which chain, how often to poll it and the block explorer API key.
:py:class:`ChainConfiguration` carries them and can be stored as JSON
or read from environment variables.
"""

import datetime
import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dataclasses_json import dataclass_json

from chainregistry.chain import Chain
from chainregistry.serialisation import chain_field

logger = logging.getLogger(__name__)


#: Polling interval for chains without a known block time
DEFAULT_POLLING_INTERVAL = datetime.timedelta(seconds=7)


@dataclass_json
@dataclass
class ChainConfiguration:
    """Configuration for a client of a single chain."""

    #: Serialised as the canonical chain name, e.g. `"mainnet"`.
    #: Any alias is accepted when reading.
    chain: Chain = chain_field(default=Chain.default())

    #: Override the polling interval, in seconds
    polling_interval: Optional[float] = None

    #: Etherscan or Etherscan-like API key.
    #:
    #: Not used by the registry itself, carried for clients that call
    #: the API at :py:meth:`Chain.get_explorer_urls`.
    explorer_api_key: Optional[str] = None

    def __post_init__(self):
        # Also runs for from_json() and from_dict()
        if self.polling_interval is not None:
            if not math.isfinite(self.polling_interval) or self.polling_interval <= 0:
                raise ValueError(f"Polling interval must be a positive number of seconds, got {self.polling_interval}")

    def get_polling_interval(self) -> datetime.timedelta:
        """How often a provider should check for new blocks.

        - Explicitly configured :py:attr:`polling_interval`

        - The average block time of the chain

        - :py:data:`DEFAULT_POLLING_INTERVAL`
        """
        if self.polling_interval is not None:
            logger.debug("Using configured polling interval %f s for %s", self.polling_interval, self.chain)
            return datetime.timedelta(seconds=self.polling_interval)

        block_time = self.chain.get_average_block_time()
        if block_time is not None:
            logger.debug("Using average block time %s for %s", block_time, self.chain)
            return block_time

        logger.warning("No block time known for %s, polling every %s", self.chain, DEFAULT_POLLING_INTERVAL)
        return DEFAULT_POLLING_INTERVAL

    @staticmethod
    def from_env(environ: Mapping[str, str] = os.environ) -> "ChainConfiguration":
        """Read configuration from environment variables.

        - `CHAIN`: chain name, alias, or chain id as decimal or hex

        - `POLLING_INTERVAL`: seconds

        - `EXPLORER_API_KEY`

        Unset and empty variables use the defaults.

        :raise ParseChainError:
            `CHAIN` is not a chain we know

        :raise ValueError:
            `POLLING_INTERVAL` is not a positive number
        """
        chain_str = environ.get("CHAIN")
        chain = Chain.resolve(chain_str) if chain_str else Chain.default()

        polling_interval_str = environ.get("POLLING_INTERVAL")
        polling_interval = float(polling_interval_str) if polling_interval_str else None

        return ChainConfiguration(
            chain=chain,
            polling_interval=polling_interval,
            explorer_api_key=environ.get("EXPLORER_API_KEY") or None,
        )
