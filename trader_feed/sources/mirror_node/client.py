import logging
from typing import List, Optional

import requests

from trader_feed.config.settings import HTTP_TIMEOUT_SECONDS, LOGS_PAGE_LIMIT, MIRROR_NODE_API_URL
from trader_feed.utils.errors import TransientFetchError
from trader_feed.utils.http import get_json

log = logging.getLogger(__name__)


class MirrorNodeClient:
    """Blocking client for the two mirror node endpoints the feed reads."""

    def __init__(
        self,
        base_url: str = MIRROR_NODE_API_URL,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_logs(self, pool_address: str, limit: int = LOGS_PAGE_LIMIT) -> List[dict]:
        """One page of contract logs for `pool_address`, in the order served."""
        url = f"{self.base_url}/contracts/{pool_address}/results/logs"
        data = get_json(self.session, url, self.timeout, params={"limit": limit})
        logs = data.get("logs") if isinstance(data, dict) else None
        if not isinstance(logs, list):
            raise TransientFetchError("Invalid response structure: no `logs` array")
        log.debug("fetched %d logs for %s", len(logs), pool_address)
        return logs

    def fetch_account(self, address: str) -> str:
        """Account id (`shard.realm.num`) behind an EVM address.

        Raises NotFound when the mirror node has no account for it.
        """
        data = get_json(self.session, f"{self.base_url}/accounts/{address}", self.timeout)
        account = data.get("account") if isinstance(data, dict) else None
        if not account:
            raise TransientFetchError(f"Account response for {address} has no `account` field")
        return account
