"""Error taxonomy for the trader feed.

Nothing here is fatal to a run: fetch errors degrade to empty results or the
original address, and decode errors skip the single affected record.
"""


class TraderFeedError(Exception):
    """Base class for every error raised by the feed."""


class TransientFetchError(TraderFeedError):
    """Network failure, non-2xx status or unusable body from a remote service."""


class NotFound(TraderFeedError):
    """The remote service answered 404. A normal, cacheable outcome."""


class DecodeError(TraderFeedError):
    """A single log record could not be turned into a trade."""


class UnknownPairError(DecodeError):
    def __init__(self, pool_address: str):
        super().__init__(f"Pair address {pool_address} not found in pair mapping.")
        self.pool_address = pool_address


class MissingTokenMetadataError(DecodeError):
    def __init__(self, pool_address: str, token: str):
        super().__init__(f"Token metadata not found for token {token} in pair {pool_address}.")
        self.pool_address = pool_address
        self.token = token
