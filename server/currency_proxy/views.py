from django.utils.cache import patch_cache_control
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from .cache import QUOTES_TTL_SECONDS
from .services import ConversionProxy


class CurrencyView(APIView):
    """
    GET /api/currency?source=USD&currencies=EUR,GBP
    Returns the provider's quotes, or {"error": {"message": ..., "code": ...}}.
    Error envelopes are still served with HTTP 200.
    """

    def get_proxy(self) -> ConversionProxy:
        return ConversionProxy.from_settings()

    def get(self, request):
        source = request.query_params.get('source', '')
        currencies = request.query_params.get('currencies', '')

        envelope, from_cache = self.get_proxy().lookup(source, currencies)

        response = Response(envelope, status=status.HTTP_200_OK)
        # Shared caches key on the full URL, so the query string already varies the entry
        if 'error' in envelope:
            patch_cache_control(response, no_store=True)
        else:
            patch_cache_control(response, public=True, max_age=QUOTES_TTL_SECONDS)
        response['X-Cache'] = 'HIT' if from_cache else 'MISS'
        return response
