"""
Turn a decoded Swap into a labelled trade and render it as one feed line.

Direction comes from `amount0In` alone: zero means token1 -> token0, anything
else token0 -> token1. The label comes from the inbound token symbol.
"""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Dict, Mapping

from trader_feed.config.settings import BASE_SYMBOL, PAIR_TOKEN_MAPPING, QUOTE_SYMBOL, TOKEN_METADATA
from trader_feed.utils.errors import DecodeError, MissingTokenMetadataError, UnknownPairError
from trader_feed.utils.types import Identity, SwapEvent, TokenMeta, Trade

BUY = "BUY"
SELL = "SELL"
UNKNOWN = "UNKNOWN"


def classify_swap(
    event: SwapEvent,
    pool_address: str,
    pairs: Mapping[str, Dict[str, str]] = PAIR_TOKEN_MAPPING,
    tokens: Mapping[str, Dict] = TOKEN_METADATA,
    base_symbol: str = BASE_SYMBOL,
    quote_symbol: str = QUOTE_SYMBOL,
) -> Trade:
    """Raises UnknownPairError / MissingTokenMetadataError when config is missing."""
    if event.amount0_in == 0:
        amount_in, amount_out = event.amount1_in, event.amount0_out
        side_in, side_out = "token1", "token0"
    else:
        amount_in, amount_out = event.amount0_in, event.amount1_out
        side_in, side_out = "token0", "token1"

    pool = pool_address.lower()
    pair = pairs.get(pool)
    if not pair:
        raise UnknownPairError(pool)

    meta_in = _token_meta(tokens, pool, pair[side_in])
    meta_out = _token_meta(tokens, pool, pair[side_out])

    if meta_in.symbol == base_symbol:
        label = BUY
    elif meta_in.symbol == quote_symbol:
        label = SELL
    else:
        label = UNKNOWN

    return Trade(
        label=label,
        amount_in=amount_in / 10 ** meta_in.decimals,
        token_in=meta_in,
        amount_out=amount_out / 10 ** meta_out.decimals,
        token_out=meta_out,
        event=event,
    )


def _token_meta(tokens: Mapping[str, Dict], pool: str, token: str) -> TokenMeta:
    meta = tokens.get(token)
    if not meta:
        raise MissingTokenMetadataError(pool, token)
    return TokenMeta(symbol=meta["symbol"], decimals=meta["decimals"])


def format_timestamp(timestamp: str) -> str:
    """'1700000000.123456789' -> '2023-11-14 22:13:20' (UTC, truncated to seconds)."""
    try:
        seconds = int(Decimal(timestamp))
        when = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (InvalidOperation, TypeError, ValueError, OverflowError, OSError) as e:
        raise DecodeError(f"Unreadable log timestamp {timestamp!r}") from e
    return when.strftime("%Y-%m-%d %H:%M:%S")


def format_amount(amount: float, meta: TokenMeta) -> str:
    return f"{amount:.{meta.decimals}f}"


def _party(identity: Identity) -> str:
    if identity.handle:
        return f"{identity.account} (@{identity.handle})"
    return identity.account


def format_trade_line(trade: Trade, when: str, sender: Identity, recipient: Identity) -> str:
    """`when` is a timestamp already passed through format_timestamp."""
    return " | ".join([
        trade.label,
        f"timestamp: {when}",
        f"sender: {_party(sender)}",
        f"to: {_party(recipient)}",
        f"amountIn: {format_amount(trade.amount_in, trade.token_in)} {trade.token_in.symbol}",
        f"amountOut: {format_amount(trade.amount_out, trade.token_out)} {trade.token_out.symbol}",
    ])
