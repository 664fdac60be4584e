import logging
import time
import requests
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import urlencode
from .cache import QuotesCache, QUOTES_TTL_SECONDS, cache_key
from .config import UpstreamConfig
from .errors import (
    ConfigurationError,
    ConversionError,
    EmptyResponseError,
    MalformedPayloadError,
    UpstreamTransportError,
)

logger = logging.getLogger(__name__)


def build_url(base_url: str, params: Dict[str, str]) -> str:
    # The provider expects literal commas in `currencies`
    query = urlencode(params, safe=',')
    separator = '&' if '?' in base_url else '?'
    return f"{base_url}{separator}{query}"


def fetch_quotes(
    session: requests.Session,
    config: UpstreamConfig,
    source: str,
    currencies: str,
) -> Dict[str, Any]:
    """
    Call the provider once and return its `quotes` mapping.
    Raises a ConversionError subclass on any failure. No retries.
    """
    params = {
        "source": source,
        "currencies": currencies,
        "apikey": config.api_token,
    }
    headers = {
        "Content-Type": "text/plain",
    }
    try:
        resp = session.get(
            build_url(config.api_url, params),
            headers=headers,
            timeout=config.timeout,
            verify=True,
        )
        resp.raise_for_status()
    except requests.HTTPError as e:
        if e.response is None:
            raise UpstreamTransportError("Bad Gateway", 502) from e
        raise UpstreamTransportError(e.response.reason, e.response.status_code) from e
    except requests.Timeout as e:
        raise UpstreamTransportError("Gateway Timeout", 504) from e
    except requests.RequestException as e:
        raise UpstreamTransportError("Bad Gateway", 502) from e

    body = resp.text
    if not body:
        raise EmptyResponseError()

    try:
        payload = resp.json()
    except ValueError as e:
        raise MalformedPayloadError() from e

    quotes = payload.get("quotes") if isinstance(payload, dict) else None
    if not quotes or not isinstance(quotes, dict):
        raise MalformedPayloadError()
    return quotes


class ConversionProxy:
    """
    Cache-first lookup of exchange-rate quotes.

    handle() always returns a JSON-serialisable envelope: the quotes mapping on
    success, or {"error": {"message": ..., "code": ...}} on failure. Only
    successful lookups are cached.
    """

    def __init__(
        self,
        config: UpstreamConfig,
        cache: Optional[QuotesCache] = None,
        session_factory: Optional[Callable[[], requests.Session]] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self.cache = cache if cache is not None else QuotesCache(clock=clock)
        self.session_factory = session_factory or requests.Session
        self.clock = clock

    @classmethod
    def from_settings(cls) -> 'ConversionProxy':
        return cls(UpstreamConfig.from_settings())

    def handle(self, source: str = '', currencies: str = '') -> Dict[str, Any]:
        envelope, _ = self.lookup(source, currencies)
        return envelope

    def lookup(self, source: str = '', currencies: str = '') -> Tuple[Dict[str, Any], bool]:
        """Like handle(), but also reports whether the cache served the result."""
        key = cache_key(source, currencies)

        cached = self.cache.get(key)
        if cached:
            logger.debug("Cache hit for %s", key)
            return cached, True

        logger.debug("Cache miss for %s", key)
        try:
            quotes = self._fetch(source, currencies)
        except ConfigurationError as e:
            logger.error("Currency layer API URL or token is not configured")
            return e.to_envelope(), False
        except EmptyResponseError as e:
            logger.warning("Upstream returned an empty body for %s", key)
            return e.to_envelope(), False
        except ConversionError as e:
            logger.warning(
                "Currency lookup failed for %s: %s (%s)", key, e.message, e.code
            )
            return e.to_envelope(), False

        self.cache.set(key, quotes, self.clock() + QUOTES_TTL_SECONDS)
        return quotes, False

    def _fetch(self, source: str, currencies: str) -> Dict[str, Any]:
        if not self.config.is_complete:
            raise ConfigurationError()

        session = self.session_factory()
        try:
            return fetch_quotes(session, self.config, source, currencies)
        finally:
            session.close()
