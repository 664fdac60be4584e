from currency_proxy.config import UpstreamConfig


def test_from_settings(settings):
    settings.CURRENCY_LAYER_API_URL = 'https://example.test/live'
    settings.CURRENCY_LAYER_API_TOKEN = 'secret'
    settings.CURRENCY_LAYER_CONNECT_TIMEOUT = 300
    settings.CURRENCY_LAYER_READ_TIMEOUT = 15

    config = UpstreamConfig.from_settings()

    assert config.api_url == 'https://example.test/live'
    assert config.api_token == 'secret'
    assert config.timeout == (300, 15)
    assert config.is_complete


def test_missing_values_are_incomplete(settings):
    settings.CURRENCY_LAYER_API_URL = 'https://example.test/live'
    settings.CURRENCY_LAYER_API_TOKEN = None

    config = UpstreamConfig.from_settings()

    assert config.api_token == ''
    assert not config.is_complete
    assert not UpstreamConfig(api_url='', api_token='secret').is_complete
