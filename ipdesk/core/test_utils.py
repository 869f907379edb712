"""
Test utilities and factories for creating test data
"""
import io
import json
import random
import string
from decimal import Decimal
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from PIL import Image
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from ipdesk.core.models import UserPermission
from ipdesk.orders.models import Order
from ipdesk.parties.models import Customer, Vendor

User = get_user_model()

# Uploads in tests never touch the disk
IN_MEMORY_STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.InMemoryStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}


class TestDataFactory:
    """Factory class for creating test data"""

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_lowercase + string.digits, k=length))

    @staticmethod
    def create_user(username=None, email=None, password='testpass123', role=None, permissions=None,
                    is_staff=False):
        """
        Create a test user.

        ``permissions`` None grants the role defaults; pass a list to grant
        exactly those codes.
        """
        if not username:
            username = f'testuser_{TestDataFactory.random_string(6)}'
        if not email:
            email = f'{username}@test.com'
        user = User.objects.create_user(
            username=username,
            email=email,
            password=password,
            role=role or User.ROLE_SUB_ADMIN,
            is_staff=is_staff,
        )
        if permissions is None:
            user.grant_default_permissions()
        else:
            for code in permissions:
                UserPermission.objects.create(user=user, permission=code)
        return user

    @staticmethod
    def create_admin(**kwargs):
        return TestDataFactory.create_user(role=User.ROLE_ADMIN, is_staff=True, **kwargs)

    @staticmethod
    def create_customer(company_name=None, email=None, country='Canada', state='Ontario', city='Toronto', **kwargs):
        """Create a test customer (a company unless company_type says otherwise)"""
        suffix = TestDataFactory.random_string(6)
        kwargs.setdefault('company_type', 'Pvt. Limited')
        return Customer.objects.create(
            company_name=company_name or f'Customer Co {suffix}',
            email=email or f'customer_{suffix}@test.com',
            country=country,
            state=state,
            city=city,
            **kwargs
        )

    @staticmethod
    def create_vendor(company_name=None, email=None, country='Australia', state='Victoria', city='Melbourne', **kwargs):
        """Create a test vendor"""
        suffix = TestDataFactory.random_string(6)
        kwargs.setdefault('company_type', 'LLP')
        kwargs.setdefault('specialization', 'Patents')
        return Vendor.objects.create(
            company_name=company_name or f'Vendor Firm {suffix}',
            email=email or f'vendor_{suffix}@test.com',
            country=country,
            state=state,
            city=city,
            **kwargs
        )

    @staticmethod
    def create_order(customer=None, vendor=None, title=None, amount=Decimal('1000.00'), **kwargs):
        """Create a test order"""
        customer = customer or TestDataFactory.create_customer()
        vendor = vendor or TestDataFactory.create_vendor()
        kwargs.setdefault('type', 'PATENTS')
        kwargs.setdefault('country', customer.country)
        return Order.objects.create(
            customer=customer,
            vendor=vendor,
            title=title or f'Order {TestDataFactory.random_string(6)}',
            amount=amount,
            **kwargs
        )

    @staticmethod
    def image_upload(name='friendly.png', size=(8, 8)):
        """A small valid PNG as an upload"""
        buffer = io.BytesIO()
        Image.new('RGB', size, color=(40, 90, 160)).save(buffer, format='PNG')
        return SimpleUploadedFile(name, buffer.getvalue(), content_type='image/png')

    @staticmethod
    def file_upload(name='document.pdf', content=b'%PDF-1.4 test document'):
        return SimpleUploadedFile(name, content, content_type='application/pdf')

    @staticmethod
    def contact_json(name='Asha Rao', email='asha@test.com', phone='+91 98765 43210'):
        return json.dumps({'name': name, 'email': email, 'phone': phone})


class AuthenticatedAPIClient(APIClient):
    """APIClient with authentication helper"""

    def authenticate_user(self, user):
        """Authenticate the client with a user"""
        refresh = RefreshToken.for_user(user)
        self.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        return self

    def logout(self):
        """Remove authentication"""
        self.credentials()


@override_settings(STORAGES=IN_MEMORY_STORAGES)
class BaseAPITestCase(TestCase):
    """TestCase with an empty cache and in-memory file storage"""

    def setUp(self):
        cache.clear()
        self.addCleanup(cache.clear)
