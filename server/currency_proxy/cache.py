import time
from django.core.cache import cache as default_cache
from typing import Any, Callable, Dict, Optional

CACHE_PREFIX = 'currency_layer_api'
QUOTES_TTL_SECONDS = 86400


def cache_key(source: str, currencies: str) -> str:
    """
    Build the cache key for a lookup.

    Target currencies are sorted so their order in the query does not matter.
    Duplicates are kept: `EUR,EUR,GBP` and `EUR,GBP` are different keys.
    """
    targets = sorted(currencies.split(','))
    return f"{CACHE_PREFIX}:source_{source}_currencies_{'_'.join(targets)}"


class QuotesCache:
    """Stores quote maps in Django's cache until an absolute expiry time."""

    def __init__(self, backend=None, clock: Callable[[], float] = time.time):
        self._backend = backend if backend is not None else default_cache
        self._clock = clock

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        return self._backend.get(key)

    def set(self, key: str, value: Dict[str, Any], expires_at: float) -> None:
        timeout = max(int(round(expires_at - self._clock())), 1)
        self._backend.set(key, value, timeout)
