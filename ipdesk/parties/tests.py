"""
Test suite for customers and vendors
Tests: contact parsing, validation rules, CRUD, list caching, vendor rating
"""
import json
from django.test import SimpleTestCase
from rest_framework import status
from ipdesk.core.models import UserPermission
from ipdesk.core.test_utils import BaseAPITestCase, TestDataFactory, AuthenticatedAPIClient
from ipdesk.orders.models import Order
from .contacts import (
    StructuredContact, UnparsedContact, parse_contact_info, parse_contact_list,
    serialize_contact, serialize_contact_list,
)
from .models import Customer, Vendor


class ContactParsingTests(SimpleTestCase):
    """Point-of-contact decoding never raises"""

    def test_structured_contact(self):
        contact = parse_contact_info('{"name": "Asha", "email": "asha@test.com", "phone": "123"}')
        self.assertIsInstance(contact, StructuredContact)
        self.assertEqual(contact.kind, 'structured')
        self.assertTrue(contact.is_complete())

    def test_camel_case_keys(self):
        contact = parse_contact_info('{"name": "Asha", "countryCode": "+91", "areaOfExpertise": "Patents"}')
        self.assertEqual(contact.country_code, '+91')
        self.assertEqual(contact.area_of_expertise, 'Patents')
        self.assertFalse(contact.is_complete())

    def test_plain_text_is_unparsed(self):
        contact = parse_contact_info('Call Asha on weekdays')
        self.assertIsInstance(contact, UnparsedContact)
        self.assertEqual(contact.raw_text, 'Call Asha on weekdays')
        self.assertEqual(contact.to_representation(), {'kind': 'unparsed', 'raw_text': 'Call Asha on weekdays'})

    def test_json_that_is_not_an_object_is_unparsed(self):
        self.assertIsInstance(parse_contact_info('[1, 2]'), UnparsedContact)
        self.assertIsInstance(parse_contact_info('42'), UnparsedContact)

    def test_empty_is_none(self):
        self.assertIsNone(parse_contact_info(''))
        self.assertIsNone(parse_contact_info(None))
        self.assertEqual(parse_contact_list('  '), [])

    def test_contact_list(self):
        contacts = parse_contact_list('[{"name": "A"}, "free text", {"name": "B"}]')
        self.assertEqual([c.kind for c in contacts], ['structured', 'unparsed', 'structured'])
        self.assertEqual(parse_contact_list('{"name": "Solo"}')[0].name, 'Solo')
        self.assertIsInstance(parse_contact_list('not json')[0], UnparsedContact)

    def test_serialize(self):
        contact = StructuredContact(name='Asha', email='asha@test.com', phone='123')
        self.assertEqual(parse_contact_info(serialize_contact(contact)), contact)
        self.assertEqual(serialize_contact(None), '')
        self.assertEqual(serialize_contact(UnparsedContact('raw')), 'raw')
        self.assertEqual(serialize_contact_list([]), '')


class CustomerModelTests(SimpleTestCase):

    def test_display_name_for_individual(self):
        customer = Customer(company_type='Individual', individual_name='Ravi Kumar', company_name='Ravi Co',
                            email='ravi@test.com', country='Canada')
        self.assertEqual(customer.company, 'Ravi Co')
        customer.company_name = ''
        self.assertEqual(customer.company, 'Ravi Kumar')


class CustomerAPITests(BaseAPITestCase):
    """Test customer endpoints"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)

    def customer_payload(self, **overrides):
        payload = {
            'company_type': 'Pvt. Limited',
            'company_name': 'Acme Patents Pvt Ltd',
            'email': 'legal@acme.test',
            'phone': '9876543210',
            'country': 'Canada',
            'state': 'Ontario',
            'city': 'Toronto',
        }
        payload.update(overrides)
        return payload

    def test_create_customer(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['name'], 'Acme Patents Pvt Ltd')
        self.assertEqual(response.data['order_count'], 0)
        self.assertIsNone(response.data['contact_info'])

    def test_create_individual_requires_contact(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(
            company_type='Individual', company_name='', individual_name='Ravi Kumar',
        ), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('point_of_contact_name', response.data)
        self.assertIn('point_of_contact_email', response.data)
        self.assertIn('point_of_contact_phone', response.data)

    def test_create_individual_with_contact(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(
            company_type='Individual', company_name='', individual_name='Ravi Kumar',
            point_of_contact={'name': 'Ravi Kumar', 'email': 'ravi@test.com', 'phone': '12345'},
        ), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['name'], 'Ravi Kumar')
        self.assertEqual(response.data['contact_info']['kind'], 'structured')
        self.assertEqual(response.data['contact_info']['email'], 'ravi@test.com')

    def test_company_name_required_for_companies(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(company_name=''), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('company_name', response.data)

    def test_email_and_country_required(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(email='', country=''), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data)

        response = self.client.post('/api/v1/customers/', self.customer_payload(country='', state='', city=''),
                                    format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['country'], ['Country is required'])

    def test_invalid_email(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(email='not-an-email'), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data)

    def test_stale_address_rejected(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(country='Australia'), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('state', response.data)

    def test_unknown_country_without_state_allowed(self):
        response = self.client.post('/api/v1/customers/', self.customer_payload(
            country='Atlantis', state='', city='',
        ), format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_duplicate_email(self):
        TestDataFactory.create_customer(email='legal@acme.test')
        response = self.client.post('/api/v1/customers/', self.customer_payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data)

    def test_list_filters_and_hides_inactive(self):
        TestDataFactory.create_customer(company_name='Maple IP', country='Canada')
        TestDataFactory.create_customer(company_name='Kangaroo IP', country='Australia', state='Victoria',
                                        city='Melbourne')
        TestDataFactory.create_customer(company_name='Dormant IP', is_active=False)

        response = self.client.get('/api/v1/customers/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = {row['name'] for row in response.data}
        self.assertEqual(names, {'Maple IP', 'Kangaroo IP'})

        response = self.client.get('/api/v1/customers/', {'country': 'Australia'})
        self.assertEqual([row['name'] for row in response.data], ['Kangaroo IP'])

        response = self.client.get('/api/v1/customers/', {'search': 'maple'})
        self.assertEqual([row['name'] for row in response.data], ['Maple IP'])

    def test_list_cache_invalidated_on_save(self):
        TestDataFactory.create_customer(company_name='First IP')
        response = self.client.get('/api/v1/customers/')
        self.assertEqual(len(response.data), 1)

        TestDataFactory.create_customer(company_name='Second IP')
        response = self.client.get('/api/v1/customers/')
        self.assertEqual(len(response.data), 2)

    def test_partial_update_keeps_address_rules(self):
        customer = TestDataFactory.create_customer()
        response = self.client.patch(f'/api/v1/customers/{customer.pk}/', {'city': 'Ottawa'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['city'], 'Ottawa')

        response = self.client.patch(f'/api/v1/customers/{customer.pk}/', {'city': 'Melbourne'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('city', response.data)

    def test_unparsed_contact_is_returned_raw(self):
        customer = TestDataFactory.create_customer(point_of_contact='Call the front desk')
        response = self.client.get(f'/api/v1/customers/{customer.pk}/')
        self.assertEqual(response.data['contact_info'], {'kind': 'unparsed', 'raw_text': 'Call the front desk'})

    def test_delete_removes_orders(self):
        customer = TestDataFactory.create_customer()
        customer_id = customer.pk
        TestDataFactory.create_order(customer=customer)
        response = self.client.delete(f'/api/v1/customers/{customer.pk}/')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Customer.objects.filter(pk=customer.pk).exists())
        self.assertFalse(Order.objects.filter(customer_id=customer_id).exists())

    def test_write_requires_permission(self):
        reader = TestDataFactory.create_user(permissions=[UserPermission.VIEW_ANALYTICS])
        self.client.authenticate_user(reader)
        response = self.client.get('/api/v1/customers/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response = self.client.post('/api/v1/customers/', self.customer_payload(), format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class VendorAPITests(BaseAPITestCase):
    """Test vendor endpoints"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)

    def test_create_vendor_with_contacts(self):
        response = self.client.post('/api/v1/vendors/', {
            'company_type': 'LLP',
            'company_name': 'Kangaroo Attorneys LLP',
            'email': 'desk@kangaroo.test',
            'country': 'Australia',
            'state': 'Victoria',
            'city': 'Melbourne',
            'specialization': 'Trademarks',
            'points_of_contact': [
                {'name': 'Mia', 'email': 'mia@kangaroo.test', 'phone': '111'},
                {'name': 'Leo', 'area_of_expertise': 'Designs'},
            ],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual([c['name'] for c in response.data['contacts']], ['Mia', 'Leo'])
        vendor = Vendor.objects.get(pk=response.data['id'])
        self.assertEqual(len(json.loads(vendor.points_of_contact)), 2)

    def test_sub_admin_cannot_create_vendor(self):
        sub_admin = TestDataFactory.create_user()
        self.client.authenticate_user(sub_admin)
        response = self.client.post('/api/v1/vendors/', {
            'company_type': 'LLP', 'company_name': 'X', 'email': 'x@test.com', 'country': 'Canada',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_rating(self):
        vendor = TestDataFactory.create_vendor()
        response = self.client.patch(f'/api/v1/vendors/{vendor.pk}/rating/', {'rating': '4.5'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['rating'], '4.5')

        response = self.client.patch(f'/api/v1/vendors/{vendor.pk}/rating/', {'rating': None}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsNone(response.data['rating'])

    def test_rating_out_of_range(self):
        vendor = TestDataFactory.create_vendor()
        response = self.client.patch(f'/api/v1/vendors/{vendor.pk}/rating/', {'rating': '5.5'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        response = self.client.patch(f'/api/v1/vendors/{vendor.pk}/rating/', {'rating': '-1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_rating_not_writable_through_update(self):
        vendor = TestDataFactory.create_vendor()
        response = self.client.patch(f'/api/v1/vendors/{vendor.pk}/', {'rating': '5.0'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        vendor.refresh_from_db()
        self.assertIsNone(vendor.rating)

    def test_vendor_not_found(self):
        response = self.client.get('/api/v1/vendors/999999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
