import logging
import re
from typing import Optional

from trader_feed.resolvers.lookup_cache import Found, Lookup, LookupCache
from trader_feed.sources.mirror_node.client import MirrorNodeClient
from trader_feed.utils.errors import NotFound, TransientFetchError

log = logging.getLogger(__name__)

LONG_ZERO_PREFIX = "0x" + "0" * 24
_HEX_RE = re.compile(r"[0-9a-f]+")


def long_zero_to_account_id(address: str) -> Optional[str]:
    """
    Convert a "long zero" EVM address to its account id.

    '0x00000000000000000000000000000000002e7a5d' -> '0.0.3045981'
    Returns None for anything that is not a well-formed long-zero address.
    """
    lowered = address.lower()
    if not lowered.startswith(LONG_ZERO_PREFIX):
        return None
    tail = lowered[len(LONG_ZERO_PREFIX):]
    if not _HEX_RE.fullmatch(tail):
        return None
    return f"0.0.{int(tail, 16)}"


class AccountResolver:
    """Maps EVM addresses to account ids, falling back to the address itself."""

    def __init__(self, client: MirrorNodeClient, cache: LookupCache) -> None:
        self.client = client
        self.cache = cache

    def resolve(self, address: str) -> str:
        key = address.lower()
        cached = self.cache.get(key)
        if isinstance(cached, Found):
            return cached.value
        if cached is Lookup.ABSENT:
            return address

        account_id = long_zero_to_account_id(address)
        if account_id:
            self.cache.put(key, account_id)
            return account_id

        try:
            account_id = self.client.fetch_account(address)
        except NotFound:
            log.warning("No account found for EVM address %s.", address)
            self.cache.put_absent(key)
            return address
        except TransientFetchError as e:
            log.error("Error fetching account ID for address %s: %s", address, e)
            return address

        self.cache.put(key, account_id)
        return account_id
