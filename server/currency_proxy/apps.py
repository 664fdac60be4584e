from django.apps import AppConfig


class CurrencyProxyConfig(AppConfig):
    name = 'currency_proxy'
    verbose_name = 'Currency Layer proxy'
