"""
Test suite for core
Tests: login/refresh, current user flags, user management, audit logs, health, management commands
"""
from io import StringIO
from django.core.management import call_command
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from .models import AuditLog, User, UserPermission
from .session import SessionContext
from .test_utils import BaseAPITestCase, TestDataFactory, AuthenticatedAPIClient


class SessionContextTests(SimpleTestCase):

    def test_anonymous_context(self):
        context = SessionContext.for_user(None)
        self.assertIsNone(context.user_id)
        self.assertFalse(context.is_admin)
        self.assertFalse(context.has_permission(UserPermission.MANAGE_ORDERS))

    def test_admin_flag_follows_role(self):
        self.assertTrue(SessionContext(user_id=1, role=User.ROLE_ADMIN).is_admin)
        self.assertFalse(SessionContext(user_id=2, role=User.ROLE_SUB_ADMIN).is_admin)


class AuthenticationTests(BaseAPITestCase):
    """Login, refresh and the current user"""

    def setUp(self):
        super().setUp()
        self.client = APIClient()
        self.user = TestDataFactory.create_user(username='asha', password='testpass123')

    def login(self, username='asha', password='testpass123'):
        return self.client.post('/api/v1/auth/login/', {'username': username, 'password': password}, format='json')

    def test_login_returns_tokens_and_user(self):
        response = self.login()
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertEqual(response.data['user']['username'], 'asha')
        self.assertEqual(response.data['user']['role'], User.ROLE_SUB_ADMIN)

        token = AccessToken(response.data['access'])
        self.assertEqual(token['role'], User.ROLE_SUB_ADMIN)
        self.assertIn(UserPermission.MANAGE_ORDERS, token['permissions'])
        self.assertTrue(AuditLog.objects.filter(action='login', user=self.user).exists())

    def test_login_wrong_password(self):
        response = self.login(password='nope')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_inactive_user_cannot_login(self):
        self.user.is_active = False
        self.user.save()
        response = self.login()
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_refresh(self):
        refresh = self.login().data['refresh']
        response = self.client.post('/api/v1/auth/refresh/', {'refresh': refresh}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)

    def test_refresh_with_garbage_token(self):
        response = self.client.post('/api/v1/auth/refresh/', {'refresh': 'not-a-token'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_flags_for_sub_admin(self):
        client = AuthenticatedAPIClient().authenticate_user(self.user)
        response = client.get('/api/v1/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['is_admin'])
        self.assertTrue(response.data['can_access_dashboard'])
        self.assertTrue(response.data['can_access_orders'])
        self.assertFalse(response.data['can_access_vendors'])
        self.assertFalse(response.data['can_access_reports'])

    def test_me_flags_for_admin(self):
        admin = TestDataFactory.create_admin()
        client = AuthenticatedAPIClient().authenticate_user(admin)
        response = client.get('/api/v1/auth/me/')
        self.assertTrue(response.data['is_admin'])
        self.assertTrue(response.data['can_access_vendors'])
        self.assertTrue(response.data['can_access_reports'])

    def test_me_requires_token(self):
        response = self.client.get('/api/v1/auth/me/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class UserManagementTests(BaseAPITestCase):
    """User endpoints need MANAGE_USERS"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)

    def user_payload(self, **overrides):
        payload = {
            'username': 'ravi',
            'email': 'ravi@test.com',
            'password': 'Ledger-Kite-2026',
            'password_confirm': 'Ledger-Kite-2026',
            'role': User.ROLE_SUB_ADMIN,
        }
        payload.update(overrides)
        return payload

    def test_create_user_with_role_defaults(self):
        response = self.client.post('/api/v1/users/', self.user_payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(
            response.data['permissions'],
            sorted(UserPermission.DEFAULTS_BY_ROLE[User.ROLE_SUB_ADMIN]),
        )

    def test_create_user_with_explicit_permissions(self):
        response = self.client.post('/api/v1/users/', self.user_payload(
            permissions=[UserPermission.VIEW_REPORTS, UserPermission.VIEW_REPORTS],
        ), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['permissions'], [UserPermission.VIEW_REPORTS])

    def test_password_mismatch(self):
        response = self.client.post('/api/v1/users/', self.user_payload(password_confirm='Other-Kite-2026'),
                                    format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.data)

    def test_sub_admin_cannot_manage_users(self):
        sub_admin = TestDataFactory.create_user()
        self.client.authenticate_user(sub_admin)
        response = self.client.get('/api/v1/users/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_list_filtered_by_role(self):
        TestDataFactory.create_user()
        response = self.client.get('/api/v1/users/', {'role': User.ROLE_ADMIN})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['id'] for row in response.data], [self.admin.pk])

    def test_cannot_delete_self(self):
        response = self.client.delete(f'/api/v1/users/{self.admin.pk}/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())

    def test_delete_user(self):
        other = TestDataFactory.create_user()
        response = self.client.delete(f'/api/v1/users/{other.pk}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(pk=other.pk).exists())


class AuditLogTests(BaseAPITestCase):

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.sub_admin = TestDataFactory.create_user()
        AuditLog.objects.create(user=self.admin, action='create', model_name='Customer', object_id='1')
        AuditLog.objects.create(user=self.sub_admin, action='update', model_name='Order', object_id='2')
        self.client = AuthenticatedAPIClient()

    def test_admin_sees_everything(self):
        self.client.authenticate_user(self.admin)
        response = self.client.get('/api/v1/audit-logs/')
        self.assertEqual(len(response.data), 2)

    def test_sub_admin_sees_own_entries(self):
        self.client.authenticate_user(self.sub_admin)
        response = self.client.get('/api/v1/audit-logs/')
        self.assertEqual([row['model_name'] for row in response.data], ['Order'])

    def test_filter_by_model(self):
        self.client.authenticate_user(self.admin)
        response = self.client.get('/api/v1/audit-logs/', {'model': 'Customer'})
        self.assertEqual([row['object_id'] for row in response.data], ['1'])


class HealthAndCommandTests(BaseAPITestCase):

    def test_health(self):
        response = APIClient().get('/api/v1/health/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['database'], 'connected')

    def test_create_demo_users(self):
        out = StringIO()
        call_command('create_demo_users', stdout=out)
        admin = User.objects.get(username='admin')
        subadmin = User.objects.get(username='subadmin')
        self.assertEqual(admin.role, User.ROLE_ADMIN)
        self.assertEqual(admin.get_app_permissions(), sorted(UserPermission.DEFAULTS_BY_ROLE[User.ROLE_ADMIN]))
        self.assertIn(UserPermission.MANAGE_ORDERS, subadmin.get_app_permissions())
        self.assertIn('2 users created', out.getvalue())

        # Running again does not duplicate anything
        call_command('create_demo_users', stdout=StringIO())
        self.assertEqual(User.objects.filter(username__in=['admin', 'subadmin']).count(), 2)

    def test_check_cache(self):
        out = StringIO()
        call_command('check_cache', stdout=out)
        self.assertIn('Cache is working', out.getvalue())
