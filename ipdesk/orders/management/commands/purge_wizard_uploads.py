"""
Delete order uploads that no order references once they are older than any
wizard session could be. Covers wizards abandoned until their session expired.

Usage:
    python manage.py purge_wizard_uploads [--hours N] [--dry-run]
"""
from datetime import timedelta
from django.conf import settings
from django.core.files.storage import default_storage
from django.core.management.base import BaseCommand
from django.utils import timezone
from ipdesk.orders.models import Order
from ipdesk.orders.sections import UPLOAD_FIELDS


class Command(BaseCommand):
    help = 'Delete unreferenced order wizard uploads older than the session lifetime'

    def add_arguments(self, parser):
        parser.add_argument('--hours', type=float, default=settings.SESSION_COOKIE_AGE / 3600,
                            help='Minimum age of a file before it is deleted (default: session lifetime)')
        parser.add_argument('--dry-run', action='store_true', help='List the files without deleting them')

    def handle(self, *args, **options):
        cutoff = timezone.now() - timedelta(hours=options['hours'])
        referenced = set()
        for field in UPLOAD_FIELDS:
            referenced.update(Order.objects.exclude(**{field: ''}).values_list(field, flat=True))

        deleted = 0
        for field in sorted(UPLOAD_FIELDS):
            directory = Order._meta.get_field(field).upload_to
            if not default_storage.exists(directory.rstrip('/')):
                continue
            _, files = default_storage.listdir(directory)
            for filename in files:
                name = f"{directory}{filename}"
                if name in referenced or default_storage.get_modified_time(name) > cutoff:
                    continue
                if not options['dry_run']:
                    default_storage.delete(name)
                deleted += 1
                self.stdout.write(f'  - {name}')

        verb = 'Would delete' if options['dry_run'] else 'Deleted'
        self.stdout.write(self.style.SUCCESS(f'{verb} {deleted} orphaned upload(s)'))
