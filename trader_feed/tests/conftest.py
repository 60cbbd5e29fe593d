from unittest.mock import MagicMock

import pytest
import requests
from eth_abi import abi
from web3 import Web3

from trader_feed.config.settings import POOL_ADDRESS
from trader_feed.tests.helpers import EVM_RECIPIENT, LONG_ZERO_SENDER, SWAP_TOPIC_HEX, TIMESTAMP, make_response


@pytest.fixture
def swap_log():
    """Factory for mirror node log entries carrying an encoded Swap event."""
    def _build(
        amounts=(0, 500, 100, 0),
        sender=LONG_ZERO_SENDER,
        to=EVM_RECIPIENT,
        address=POOL_ADDRESS,
        timestamp=TIMESTAMP,
        topic0=SWAP_TOPIC_HEX,
    ):
        return {
            "address": address,
            "topics": [
                topic0,
                Web3.to_hex(abi.encode(["address"], [sender])),
                Web3.to_hex(abi.encode(["address"], [to])),
            ],
            "data": Web3.to_hex(abi.encode(["uint256"] * 4, list(amounts))),
            "timestamp": timestamp,
        }
    return _build


@pytest.fixture
def routed_session():
    """
    Factory for a fake requests.Session.

    `routes` maps a URL suffix to a Response or an exception to raise.
    Unrouted URLs answer 404.
    """
    def _build(routes):
        session = MagicMock(spec=requests.Session)

        def fake_get(url, params=None, timeout=None):
            for suffix, result in routes.items():
                if url.lower().endswith(suffix.lower()):
                    if isinstance(result, Exception):
                        raise result
                    return result
            return make_response(404, {"_status": {"messages": [{"message": "Not found"}]}})

        session.get.side_effect = fake_get
        return session
    return _build
