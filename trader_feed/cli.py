import logging

import typer

from trader_feed.config.settings import (
    HANDLE_API_BASE_URL,
    HTTP_TIMEOUT_SECONDS,
    LOG_LEVEL,
    LOGS_PAGE_LIMIT,
    MIRROR_NODE_API_URL,
    POOL_ADDRESS,
)
from trader_feed.feed.driver import FeedDriver
from trader_feed.resolvers.account_resolver import AccountResolver
from trader_feed.resolvers.handle_resolver import HandleResolver
from trader_feed.resolvers.lookup_cache import LookupCache
from trader_feed.sources.handles.client import HandleApiClient
from trader_feed.sources.mirror_node.client import MirrorNodeClient
from trader_feed.utils.shortname import configure_logging

log = logging.getLogger(__name__)

app = typer.Typer(help="Print recent BUY/SELL swaps for a mirror node pool")


@app.command("run")
def runner(
    pool_address: str = typer.Option(POOL_ADDRESS, help="Pool contract address, 0x..."),
    limit: int = typer.Option(LOGS_PAGE_LIMIT, help="Logs fetched in the single page"),
    log_level: str = typer.Option(LOG_LEVEL, help="e.g. INFO, DEBUG"),
):
    """
    Fetch one page of pool logs and print the trade feed. Always exits 0.
    """
    configure_logging(log_level)

    mirror_node = MirrorNodeClient(MIRROR_NODE_API_URL, timeout=HTTP_TIMEOUT_SECONDS)
    handle_api = HandleApiClient(HANDLE_API_BASE_URL, timeout=HTTP_TIMEOUT_SECONDS)

    # process-scoped caches, live for this run only
    driver = FeedDriver(
        client=mirror_node,
        accounts=AccountResolver(mirror_node, LookupCache()),
        handles=HandleResolver(handle_api, LookupCache()),
        pool_address=pool_address.lower(),
        limit=limit,
        echo=typer.echo,
    )
    summary = driver.run()
    log.debug("[cli] feed finished: %s", summary)


def main():
    app()


if __name__ == "__main__":
    main()
