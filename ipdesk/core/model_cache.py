"""
Cached list and dashboard responses.

Customer/vendor lists and dashboard figures are cached under versioned keys.
Saving or deleting a customer, vendor or order bumps the versions it feeds,
so every cached entry for that prefix is dropped at once. This works on both
the Redis and local-memory backends.
"""
from django.core.cache import cache
from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver
import hashlib
import logging

logger = logging.getLogger(__name__)

CUSTOMER_LIST_KEY_PREFIX = 'customer_list'
VENDOR_LIST_KEY_PREFIX = 'vendor_list'
DASHBOARD_KEY_PREFIX = 'dashboard_kpis'

# Cache TTL (Time To Live) in seconds
CUSTOMER_LIST_CACHE_TTL = 300  # 5 minutes
VENDOR_LIST_CACHE_TTL = 300  # 5 minutes
DASHBOARD_CACHE_TTL = 120  # 2 minutes


def _version_key(prefix: str) -> str:
    return f"{prefix}:version"


def get_list_version(prefix: str) -> int:
    version = cache.get(_version_key(prefix))
    if version is None:
        version = 1
        cache.set(_version_key(prefix), version, None)
    return version


def bump_list_version(prefix: str):
    """Invalidate every cached entry stored under ``prefix``"""
    try:
        cache.incr(_version_key(prefix))
    except ValueError:
        # Key missing or evicted
        cache.set(_version_key(prefix), 2, None)
    logger.debug(f"Bumped cache version for {prefix}")


def make_list_cache_key(prefix: str, **filters) -> str:
    """Versioned cache key for a filtered list"""
    key_data = ':'.join(f"{k}={v}" for k, v in sorted(filters.items()))
    key_hash = hashlib.md5(key_data.encode()).hexdigest()
    return f"{prefix}:v{get_list_version(prefix)}:{key_hash}"


def get_customer_list_cache_key(search: str = '', country: str = '') -> str:
    return make_list_cache_key(CUSTOMER_LIST_KEY_PREFIX, search=search, country=country)


def get_vendor_list_cache_key(search: str = '', country: str = '') -> str:
    return make_list_cache_key(VENDOR_LIST_KEY_PREFIX, search=search, country=country)


def get_dashboard_cache_key(scope: str, timeframe: str) -> str:
    return make_list_cache_key(DASHBOARD_KEY_PREFIX, scope=scope, timeframe=timeframe)


# ==================== DJANGO SIGNALS ====================

@receiver([post_save, post_delete])
def invalidate_model_lists(sender, instance, **kwargs):
    """Drop cached lists (and dashboard figures) when their source rows change"""
    model_name = sender.__name__

    if model_name == 'Customer':
        bump_list_version(CUSTOMER_LIST_KEY_PREFIX)
        bump_list_version(DASHBOARD_KEY_PREFIX)
    elif model_name == 'Vendor':
        bump_list_version(VENDOR_LIST_KEY_PREFIX)
        bump_list_version(DASHBOARD_KEY_PREFIX)
    elif model_name == 'Order':
        # Lists carry per-party order counts
        bump_list_version(CUSTOMER_LIST_KEY_PREFIX)
        bump_list_version(VENDOR_LIST_KEY_PREFIX)
        bump_list_version(DASHBOARD_KEY_PREFIX)
    elif model_name == 'TypeOfWork':
        # Analytics lists every active type
        bump_list_version(DASHBOARD_KEY_PREFIX)
