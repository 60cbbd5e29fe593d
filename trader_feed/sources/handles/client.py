from typing import Optional

import requests

from trader_feed.config.settings import HANDLE_API_BASE_URL, HTTP_TIMEOUT_SECONDS
from trader_feed.utils.http import get_json


class HandleApiClient:
    def __init__(
        self,
        base_url: str = HANDLE_API_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_handle(self, account_id: str) -> Optional[str]:
        """Twitter handle linked to `account_id`, or None if the body has none.

        Raises NotFound when the service does not know the account.
        """
        data = get_json(self.session, f"{self.base_url}/users/{account_id}", self.timeout)
        handle = data.get("twitterHandle") if isinstance(data, dict) else None
        return handle or None
