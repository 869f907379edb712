from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from ipdesk.core.models import UserPermission

User = get_user_model()


class Command(BaseCommand):
    help = 'Create the demo admin and sub-admin accounts with their default permissions'

    def add_arguments(self, parser):
        parser.add_argument(
            '--password',
            type=str,
            default='password123',
            help='Password for the demo accounts (default: password123)',
        )
        parser.add_argument(
            '--reset-permissions',
            action='store_true',
            help='Replace existing permissions with the role defaults',
        )

    def handle(self, *args, **options):
        users_config = [
            {
                'username': 'admin',
                'email': 'admin@ipdesk.local',
                'first_name': 'John',
                'last_name': 'Admin',
                'role': User.ROLE_ADMIN,
                'is_staff': True,
            },
            {
                'username': 'subadmin',
                'email': 'subadmin@ipdesk.local',
                'first_name': 'Jane',
                'last_name': 'SubAdmin',
                'role': User.ROLE_SUB_ADMIN,
                'is_staff': False,
            },
        ]

        created_count = 0
        existing_count = 0

        for config in users_config:
            user, created = User.objects.get_or_create(username=config['username'], defaults=config)

            if created:
                user.set_password(options['password'])
                user.save()
                self.stdout.write(self.style.SUCCESS(f'✓ Created user: {user.username} ({user.role})'))
                created_count += 1
            else:
                self.stdout.write(f'  User already exists: {user.username}')
                existing_count += 1

            if options['reset_permissions']:
                UserPermission.objects.filter(user=user).delete()
            user.grant_default_permissions()
            self.stdout.write(f'  Permissions: {", ".join(user.get_app_permissions())}')

        self.stdout.write(self.style.SUCCESS(
            f'\nCompleted: {created_count} users created, {existing_count} users already existed'
        ))
