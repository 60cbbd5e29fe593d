from typing import Any, Optional

import requests

from trader_feed.utils.errors import NotFound, TransientFetchError


def get_json(session: requests.Session, url: str, timeout: float, params: Optional[dict] = None) -> Any:
    """GET `url` and return the decoded JSON body.

    Raises NotFound on a 404 and TransientFetchError on anything else that is
    not a 2xx response carrying JSON.
    """
    try:
        resp = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise TransientFetchError(f"GET {url} failed: {e}") from e

    if resp.status_code == 404:
        raise NotFound(url)
    try:
        resp.raise_for_status()
    except requests.HTTPError as e:
        raise TransientFetchError(f"GET {url} returned {resp.status_code}") from e

    try:
        return resp.json()
    except ValueError as e:
        raise TransientFetchError(f"GET {url} returned a non-JSON body") from e
