from dataclasses import dataclass
from django.conf import settings


@dataclass(frozen=True)
class UpstreamConfig:
    """Where and how to reach the exchange-rate provider."""
    api_url: str = ''
    api_token: str = ''
    connect_timeout: float = 300
    read_timeout: float = 30

    @property
    def is_complete(self) -> bool:
        return bool(self.api_url) and bool(self.api_token)

    @property
    def timeout(self):
        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_settings(cls) -> 'UpstreamConfig':
        return cls(
            api_url=getattr(settings, 'CURRENCY_LAYER_API_URL', '') or '',
            api_token=getattr(settings, 'CURRENCY_LAYER_API_TOKEN', '') or '',
            connect_timeout=getattr(settings, 'CURRENCY_LAYER_CONNECT_TIMEOUT', 300),
            read_timeout=getattr(settings, 'CURRENCY_LAYER_READ_TIMEOUT', 30),
        )
