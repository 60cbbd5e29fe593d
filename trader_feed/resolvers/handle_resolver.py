import logging
import re
from typing import Optional

from trader_feed.resolvers.lookup_cache import Found, Lookup, LookupCache
from trader_feed.sources.handles.client import HandleApiClient
from trader_feed.utils.errors import NotFound, TransientFetchError

log = logging.getLogger(__name__)

ACCOUNT_ID_RE = re.compile(r"\d+\.\d+\.\d+")


class HandleResolver:
    def __init__(self, client: HandleApiClient, cache: LookupCache) -> None:
        self.client = client
        self.cache = cache

    def resolve(self, account_id: str) -> Optional[str]:
        """Social handle for a `shard.realm.num` id; None for anything else."""
        if not ACCOUNT_ID_RE.fullmatch(account_id):
            return None

        cached = self.cache.get(account_id)
        if isinstance(cached, Found):
            return cached.value
        if cached is Lookup.ABSENT:
            return None

        try:
            handle = self.client.fetch_handle(account_id)
        except NotFound:
            self.cache.put_absent(account_id)
            return None
        except TransientFetchError as e:
            # left uncached so a later lookup can retry
            log.error("Error fetching Twitter handle for account %s: %s", account_id, e)
            return None

        if handle:
            self.cache.put(account_id, handle)
        return handle
