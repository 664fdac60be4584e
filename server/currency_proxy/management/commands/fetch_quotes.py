import json
from django.core.management.base import BaseCommand
from currency_proxy.services import ConversionProxy


class Command(BaseCommand):
    help = "Looks up quotes for one source currency through the proxy and caches them for 24 hours."

    def add_arguments(self, parser):
        parser.add_argument(
            '--source',
            default='',
            help='Base currency code, e.g. USD'
        )
        parser.add_argument(
            '--currencies',
            default='',
            help='Comma-separated target currency codes, e.g. EUR,GBP'
        )

    def handle(self, *args, **options):
        source = options['source']
        currencies = options['currencies']

        envelope, from_cache = ConversionProxy.from_settings().lookup(source, currencies)
        output = json.dumps(envelope, sort_keys=True)

        if 'error' in envelope:
            self.stdout.write(self.style.ERROR(f"✗ {source}->{currencies}: {output}"))
            return

        origin = 'cache' if from_cache else 'upstream'
        self.stdout.write(self.style.SUCCESS(f"✓ {source}->{currencies} ({origin}): {output}"))
