import json

import requests
from web3 import Web3

from trader_feed.config.settings import SWAP_TOPIC

SWAP_TOPIC_HEX = Web3.to_hex(SWAP_TOPIC)
LONG_ZERO_SENDER = "0x00000000000000000000000000000000002e7a5d"   # 0.0.3045981
EVM_RECIPIENT = "0x1234567890abcdef1234567890abcdef12345678"
TIMESTAMP = "1700000000.123456789"                                  # 2023-11-14 22:13:20 UTC


def make_response(status: int = 200, body=None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.url = "http://test.invalid"
    resp._content = json.dumps(body if body is not None else {}).encode()
    return resp
