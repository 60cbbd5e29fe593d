# swap_decoder.py
# --------------------------------------------------------------
# Decode Uni V2-style Swap events served by the mirror node
# --------------------------------------------------------------
from typing import Optional, Sequence

from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes
from web3 import Web3
from web3._utils.events import get_event_data
from web3.exceptions import Web3Exception

from trader_feed.config.settings import SWAP_ABI, SWAP_TOPIC
from trader_feed.utils.errors import DecodeError
from trader_feed.utils.types import LogRecord, SwapEvent

codec = Web3().codec

_TOPIC_COUNT = 1 + sum(1 for i in SWAP_ABI["inputs"] if i["indexed"])


def is_swap_topics(topics: Optional[Sequence]) -> bool:
    """True when the primary topic is the Swap signature hash (any hex case)."""
    if not topics:
        return False
    try:
        return HexBytes(topics[0]) == SWAP_TOPIC
    except (IndexError, KeyError, TypeError, ValueError):
        return False


def is_swap_log(record: LogRecord) -> bool:
    return is_swap_topics(record.topics)


def decode_swap_log(record: LogRecord) -> Optional[SwapEvent]:
    """
    Decode one log into a SwapEvent.

    Returns None when the log is not a Swap. Raises DecodeError when it is a
    Swap but topics or data cannot be decoded.
    """
    if not is_swap_log(record):
        return None

    if len(record.topics) != _TOPIC_COUNT:
        raise DecodeError(f"Swap log has {len(record.topics)} topics, expected {_TOPIC_COUNT}")

    try:
        # mirror node logs carry no block/tx context, get_event_data only copies it through
        evt = get_event_data(codec, SWAP_ABI, {
            "address": record.address,
            "topics": [HexBytes(t) for t in record.topics],
            "data": HexBytes(record.data),
            "logIndex": None,
            "transactionIndex": None,
            "transactionHash": None,
            "blockHash": None,
            "blockNumber": None,
        })
    except (Web3Exception, DecodingError, TypeError, ValueError) as e:
        raise DecodeError(f"Error parsing log: {e}") from e

    args = evt["args"]
    return SwapEvent(
        sender=args["sender"],
        recipient=args["to"],
        amount0_in=args["amount0In"],
        amount1_in=args["amount1In"],
        amount0_out=args["amount0Out"],
        amount1_out=args["amount1Out"],
    )
