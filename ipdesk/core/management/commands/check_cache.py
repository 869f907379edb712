"""
Verify the cache backend and the list invalidation used by customer/vendor lists.

Usage:
    python manage.py check_cache
"""
from django.core.cache import cache
from django.core.management.base import BaseCommand, CommandError
from django.conf import settings
from ipdesk.core.model_cache import (
    CUSTOMER_LIST_KEY_PREFIX, bump_list_version, get_customer_list_cache_key, get_list_version,
)


class Command(BaseCommand):
    help = 'Check cache configuration and versioned list invalidation'

    def handle(self, *args, **options):
        self.stdout.write("=" * 60)
        self.stdout.write(self.style.SUCCESS("Cache Configuration Check"))
        self.stdout.write("=" * 60)
        self.stdout.write(f"\nBackend:  {settings.CACHES['default']['BACKEND']}")
        self.stdout.write(f"Location: {settings.CACHES['default'].get('LOCATION', 'N/A')}")

        probe_key = 'ipdesk:check_cache'
        cache.set(probe_key, 'ok', 60)
        if cache.get(probe_key) != 'ok':
            raise CommandError("Cache GET did not return the value just SET; check REDIS_URL")
        cache.delete(probe_key)
        if cache.get(probe_key) is not None:
            raise CommandError("Cache DELETE did not remove the key")
        self.stdout.write(self.style.SUCCESS("SET/GET/DELETE: ok"))

        before = get_list_version(CUSTOMER_LIST_KEY_PREFIX)
        old_key = get_customer_list_cache_key('probe', '')
        bump_list_version(CUSTOMER_LIST_KEY_PREFIX)
        after = get_list_version(CUSTOMER_LIST_KEY_PREFIX)
        if after <= before or get_customer_list_cache_key('probe', '') == old_key:
            raise CommandError(f"List version did not advance ({before} -> {after})")
        self.stdout.write(self.style.SUCCESS(f"Customer list version: {before} -> {after}"))

        self.stdout.write("\n" + "=" * 60)
        self.stdout.write(self.style.SUCCESS("Cache is working"))
        self.stdout.write("=" * 60)
