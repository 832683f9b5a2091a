"""Bidirectional index between bucket names and symbols."""

import logging
from collections.abc import Iterable
from threading import Lock

from portfolio_service.core.exceptions import BucketAlreadyExistsError, BucketNotFoundError

logger = logging.getLogger(__name__)


class BucketIndex:
    """
    Bucket membership kept as two mirror maps.

    bucket -> symbols and symbol -> buckets are updated together under one
    lock, so after every call: symbol in symbols_in(b) <=> b in buckets_for(symbol).
    Buckets may exist with no symbols.
    """

    def __init__(self):
        self._bucket_to_symbols: dict[str, set[str]] = {}
        self._symbol_to_buckets: dict[str, set[str]] = {}
        self._lock = Lock()

    def create_bucket(self, name: str) -> None:
        with self._lock:
            if name in self._bucket_to_symbols:
                raise BucketAlreadyExistsError(name)
            self._bucket_to_symbols[name] = set()
        logger.info("Created bucket %s", name)

    def delete_bucket(self, name: str) -> None:
        with self._lock:
            if name not in self._bucket_to_symbols:
                raise BucketNotFoundError(name)
            del self._bucket_to_symbols[name]
            for buckets in self._symbol_to_buckets.values():
                buckets.discard(name)
        logger.info("Deleted bucket %s", name)

    def list_buckets(self) -> dict[str, list[str]]:
        """Return every bucket with its sorted symbols, ordered by bucket name."""
        with self._lock:
            return {
                name: sorted(symbols)
                for name, symbols in sorted(self._bucket_to_symbols.items())
            }

    def add_membership(self, symbol: str, buckets: Iterable[str]) -> None:
        """Add symbol to each bucket, creating buckets that don't exist yet."""
        with self._lock:
            for bucket in buckets:
                self._bucket_to_symbols.setdefault(bucket, set()).add(symbol)
                self._symbol_to_buckets.setdefault(symbol, set()).add(bucket)

    def remove_membership(self, bucket: str, symbol: str) -> None:
        """Remove one bucket/symbol pairing; no-op if either side is absent."""
        with self._lock:
            self._unlink(bucket, symbol)

    def remove_all_memberships(self, symbol: str) -> None:
        """Remove symbol from every bucket referencing it."""
        with self._lock:
            for bucket in list(self._symbol_to_buckets.get(symbol, ())):
                self._unlink(bucket, symbol)
            self._symbol_to_buckets.pop(symbol, None)

    def symbols_in(self, bucket: str) -> set[str]:
        """Return a copy of the bucket's symbols; BucketNotFoundError if absent."""
        with self._lock:
            if bucket not in self._bucket_to_symbols:
                raise BucketNotFoundError(bucket)
            return set(self._bucket_to_symbols[bucket])

    def buckets_for(self, symbol: str) -> list[str]:
        with self._lock:
            return sorted(self._symbol_to_buckets.get(symbol, ()))

    def _unlink(self, bucket: str, symbol: str) -> None:
        if bucket in self._bucket_to_symbols:
            self._bucket_to_symbols[bucket].discard(symbol)
        if symbol in self._symbol_to_buckets:
            self._symbol_to_buckets[symbol].discard(bucket)
