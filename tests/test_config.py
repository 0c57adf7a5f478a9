"""Chain configuration."""
import datetime
import logging

import pytest

from chainregistry.chain import Chain
from chainregistry.config import ChainConfiguration, DEFAULT_POLLING_INTERVAL
from chainregistry.exceptions import ParseChainError


def test_default_configuration():
    config = ChainConfiguration()
    assert config.chain == Chain.mainnet
    assert config.to_dict()["chain"] == "mainnet"
    assert config.get_polling_interval() == datetime.timedelta(seconds=13)


def test_configuration_json_round_trip():
    config = ChainConfiguration(chain=Chain.polygon, polling_interval=0.5, explorer_api_key="xyz")
    loaded = ChainConfiguration.from_json(config.to_json())
    assert loaded == config


def test_polling_interval_override():
    config = ChainConfiguration(chain=Chain.polygon, polling_interval=0.5)
    assert config.get_polling_interval() == datetime.timedelta(milliseconds=500)


def test_polling_interval_fallback(logger: logging.Logger, caplog):
    config = ChainConfiguration(chain=Chain.goerli)
    with caplog.at_level(logging.WARNING):
        assert config.get_polling_interval() == DEFAULT_POLLING_INTERVAL
    assert "goerli" in caplog.text


def test_from_env():
    config = ChainConfiguration.from_env({
        "CHAIN": "bsc",
        "POLLING_INTERVAL": "2",
        "EXPLORER_API_KEY": "abc",
    })
    assert config.chain == Chain.binance_smart_chain
    assert config.polling_interval == 2.0
    assert config.explorer_api_key == "abc"


def test_from_env_chain_id():
    assert ChainConfiguration.from_env({"CHAIN": "42161"}).chain == Chain.arbitrum
    assert ChainConfiguration.from_env({"CHAIN": "0xa4b1"}).chain == Chain.arbitrum


def test_from_env_defaults():
    config = ChainConfiguration.from_env({"CHAIN": "", "EXPLORER_API_KEY": ""})
    assert config.chain == Chain.default()
    assert config.polling_interval is None
    assert config.explorer_api_key is None


def test_from_env_bad_chain():
    with pytest.raises(ParseChainError):
        ChainConfiguration.from_env({"CHAIN": "ethereum"})


@pytest.mark.parametrize("bad", ["-5", "0", "nan", "inf"])
def test_from_env_bad_polling_interval(bad: str):
    with pytest.raises(ValueError):
        ChainConfiguration.from_env({"POLLING_INTERVAL": bad})


@pytest.mark.parametrize("bad", [-5.0, 0.0, float("nan"), float("inf")])
def test_bad_polling_interval(bad: float):
    with pytest.raises(ValueError):
        ChainConfiguration(polling_interval=bad)


def test_from_json_bad_polling_interval():
    with pytest.raises(ValueError):
        ChainConfiguration.from_json('{"chain": "mainnet", "polling_interval": -5}')
