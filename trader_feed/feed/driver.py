import logging
from enum import Enum
from typing import Callable, Dict, Mapping

from trader_feed.config.settings import (
    BASE_SYMBOL,
    LOGS_PAGE_LIMIT,
    PAIR_TOKEN_MAPPING,
    POOL_ADDRESS,
    QUOTE_SYMBOL,
    TOKEN_METADATA,
)
from trader_feed.evm.swap_decoder import decode_swap_log, is_swap_topics
from trader_feed.feed.classifier import classify_swap, format_timestamp, format_trade_line
from trader_feed.resolvers.account_resolver import AccountResolver
from trader_feed.resolvers.handle_resolver import HandleResolver
from trader_feed.sources.mirror_node.client import MirrorNodeClient
from trader_feed.utils.errors import DecodeError, TransientFetchError
from trader_feed.utils.types import FeedSummary, Identity, LogRecord

log = logging.getLogger(__name__)

NO_LOGS_MESSAGE = "No logs to process."
NO_SWAPS_MESSAGE = "No swap events found."


class FeedState(Enum):
    FETCHING = "fetching"
    DONE = "done"


class FeedDriver:
    """
    Fetch one page of pool logs and print a line per swap.

    Records are handled strictly in the order served and one at a time: a
    record's sender and recipient lookups finish before the next record
    starts. Nothing here raises; failures are logged and the record skipped.
    """

    def __init__(
        self,
        client: MirrorNodeClient,
        accounts: AccountResolver,
        handles: HandleResolver,
        pool_address: str = POOL_ADDRESS,
        limit: int = LOGS_PAGE_LIMIT,
        pairs: Mapping[str, Dict[str, str]] = PAIR_TOKEN_MAPPING,
        tokens: Mapping[str, Dict] = TOKEN_METADATA,
        base_symbol: str = BASE_SYMBOL,
        quote_symbol: str = QUOTE_SYMBOL,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.client = client
        self.accounts = accounts
        self.handles = handles
        self.pool_address = pool_address
        self.limit = limit
        self.pairs = pairs
        self.tokens = tokens
        self.base_symbol = base_symbol
        self.quote_symbol = quote_symbol
        self.echo = echo
        self.state = FeedState.FETCHING

    def run(self) -> FeedSummary:
        try:
            entries = self.client.fetch_logs(self.pool_address, self.limit)
        except TransientFetchError as e:
            log.error("Error fetching logs from Mirror Node API: %s", e)
            entries = []

        if not entries:
            self.echo(NO_LOGS_MESSAGE)
            self.state = FeedState.DONE
            return FeedSummary(fetched=0, matched=0, printed=0, skipped=0)

        matched = printed = skipped = 0
        for entry in entries:
            topics = entry.get("topics") if isinstance(entry, dict) else None
            if not is_swap_topics(topics):
                continue
            matched += 1
            try:
                record = LogRecord.from_json(entry)
                line = self._process(record)
            except DecodeError as e:
                log.error("Skipping log: %s", e)
                skipped += 1
                continue
            printed += 1
            self.echo(line)

        if matched == 0:
            self.echo(NO_SWAPS_MESSAGE)

        self.state = FeedState.DONE
        log.debug("Processed %d logs: %d swaps printed, %d skipped", len(entries), printed, skipped)
        return FeedSummary(fetched=len(entries), matched=matched, printed=printed, skipped=skipped)

    def _process(self, record: LogRecord) -> str:
        event = decode_swap_log(record)

        trade = classify_swap(
            event,
            record.address,
            pairs=self.pairs,
            tokens=self.tokens,
            base_symbol=self.base_symbol,
            quote_symbol=self.quote_symbol,
        )
        when = format_timestamp(record.timestamp)

        sender_account = self.accounts.resolve(event.sender)
        recipient_account = self.accounts.resolve(event.recipient)
        sender = Identity(sender_account, self.handles.resolve(sender_account))
        recipient = Identity(recipient_account, self.handles.resolve(recipient_account))
        return format_trade_line(trade, when, sender, recipient)
