from typing import List, NamedTuple, Optional

from trader_feed.utils.errors import DecodeError


class LogRecord(NamedTuple):
    address: str
    topics: List[str]
    data: str
    timestamp: str

    @classmethod
    def from_json(cls, entry: dict) -> "LogRecord":
        """Build a record from one entry of the mirror node `logs` array."""
        try:
            return cls(
                address=entry["address"],
                topics=list(entry["topics"]),
                data=entry["data"],
                timestamp=entry["timestamp"],
            )
        except (KeyError, TypeError) as e:
            raise DecodeError(f"Malformed log entry: {e!r}") from e


class SwapEvent(NamedTuple):
    sender: str
    recipient: str
    amount0_in: int
    amount1_in: int
    amount0_out: int
    amount1_out: int


class TokenMeta(NamedTuple):
    symbol: str
    decimals: int


class Trade(NamedTuple):
    label: str
    amount_in: float
    token_in: TokenMeta
    amount_out: float
    token_out: TokenMeta
    event: SwapEvent


class Identity(NamedTuple):
    account: str
    handle: Optional[str] = None


class FeedSummary(NamedTuple):
    fetched: int
    matched: int
    printed: int
    skipped: int
