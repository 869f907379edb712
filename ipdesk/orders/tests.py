"""
Test suite for orders
Tests: wizard gate, section validation, wizard API, order list/create/edit, types of work
"""
from datetime import date
from io import StringIO
from django.core.management import call_command
from django.core.files.storage import default_storage
from django.test import SimpleTestCase
from django.utils import timezone
from rest_framework import status
from ipdesk.core.models import AuditLog, UserPermission
from ipdesk.core.test_utils import BaseAPITestCase, TestDataFactory, AuthenticatedAPIClient
from .models import Order, TypeOfWork
from .sections import generate_customer_reference, store_upload, validate_section
from .wizard import CUSTOMER, VENDOR, ORDER, SECTIONS, OrderWizard, UnknownSection


def requires(*fields):
    """Validator stub: every listed field must be truthy"""
    def validate(raw):
        errors = {field: f'{field} is required' for field in fields if not raw.get(field)}
        if errors:
            return {}, errors
        return dict(raw), {}
    return validate


def stub_validators():
    return {
        CUSTOMER: requires('customer_id', 'type_of_work'),
        VENDOR: requires('vendor_id'),
        ORDER: requires(),
    }


class OrderWizardTests(SimpleTestCase):
    """The section gate on its own, with stub validators"""

    def setUp(self):
        self.wizard = OrderWizard(stub_validators())

    def complete_all(self):
        self.wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        self.wizard.complete_section(VENDOR, {'vendor_id': 2})
        self.wizard.complete_section(ORDER, {})

    def test_initial_state(self):
        self.assertEqual(self.wizard.active, CUSTOMER)
        self.assertEqual(self.wizard.completed, frozenset())
        self.assertFalse(self.wizard.can_submit())

    def test_valid_section_completes_and_advances(self):
        errors = self.wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        self.assertEqual(errors, {})
        self.assertEqual(self.wizard.completed, {CUSTOMER})
        self.assertEqual(self.wizard.active, VENDOR)

        self.wizard.complete_section(VENDOR, {'vendor_id': 2})
        self.assertEqual(self.wizard.active, ORDER)
        self.wizard.complete_section(ORDER, {})
        self.assertEqual(self.wizard.active, ORDER)

    def test_invalid_section_reports_errors(self):
        errors = self.wizard.complete_section(CUSTOMER, {'customer_id': 1})
        self.assertIn('type_of_work', errors)
        self.assertEqual(self.wizard.completed, frozenset())
        self.assertEqual(self.wizard.active, CUSTOMER)
        self.assertEqual(self.wizard.errors(CUSTOMER), errors)

    def test_completed_set_never_shrinks_on_failure(self):
        self.wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        self.wizard.complete_section(VENDOR, {'vendor_id': 2})
        before = self.wizard.completed

        self.wizard.complete_section(CUSTOMER, {})
        self.wizard.complete_section(VENDOR, {})
        self.wizard.select_section(CUSTOMER)
        self.assertTrue(before <= self.wizard.completed)
        # The last good values are kept
        self.assertEqual(self.wizard.values(CUSTOMER)['type_of_work'], 'PATENTS')

    def test_select_section_is_free_navigation(self):
        self.wizard.select_section(ORDER)
        self.assertEqual(self.wizard.active, ORDER)
        self.assertEqual(self.wizard.completed, frozenset())
        with self.assertRaises(UnknownSection):
            self.wizard.select_section('payment')

    def test_can_submit_only_when_all_complete(self):
        self.wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        self.assertFalse(self.wizard.can_submit())
        self.wizard.complete_section(ORDER, {})
        self.assertFalse(self.wizard.can_submit())
        self.assertEqual(self.wizard.missing_sections(), [VENDOR])
        self.wizard.complete_section(VENDOR, {'vendor_id': 2})
        self.assertTrue(self.wizard.can_submit())

    def test_submit_while_closed_emits_nothing(self):
        calls = []
        self.wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        result = self.wizard.submit(calls.append)
        self.assertIsNone(result)
        self.assertEqual(calls, [])

    def test_submit_passes_merged_payload(self):
        self.complete_all()
        payloads = []
        result = self.wizard.submit(lambda payload: payloads.append(payload) or 'created')
        self.assertEqual(result, 'created')
        self.assertEqual(payloads, [{'customer_id': 1, 'type_of_work': 'PATENTS', 'vendor_id': 2}])

    def test_reset_empties_everything(self):
        self.complete_all()
        self.wizard.reset()
        self.assertEqual(self.wizard.completed, frozenset())
        self.assertEqual(self.wizard.active, CUSTOMER)
        self.assertEqual(self.wizard.payload(), {})

    def test_discard_hook_gets_replaced_values(self):
        dropped = []
        wizard = OrderWizard(stub_validators(), discard=dropped.append)
        wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        self.assertEqual(dropped, [])

        # A failed attempt keeps the old values, so nothing is dropped
        wizard.complete_section(CUSTOMER, {'customer_id': 1})
        self.assertEqual(dropped, [])

        wizard.complete_section(CUSTOMER, {'customer_id': 3, 'type_of_work': 'DESIGNS'})
        self.assertEqual(dropped, [{'customer_id': 1, 'type_of_work': 'PATENTS'}])

    def test_reset_discards_every_filled_section(self):
        dropped = []
        wizard = OrderWizard(stub_validators(), discard=dropped.append)
        wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        wizard.complete_section(VENDOR, {'vendor_id': 2})
        wizard.reset()
        self.assertEqual(dropped, [{'customer_id': 1, 'type_of_work': 'PATENTS'}, {'vendor_id': 2}])

    def test_reset_without_discard_keeps_values_alive(self):
        dropped = []
        wizard = OrderWizard(stub_validators(), discard=dropped.append)
        wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        wizard.reset(discard=False)
        self.assertEqual(dropped, [])
        self.assertEqual(wizard.payload(), {})

    def test_round_trip_through_dict(self):
        self.wizard.complete_section(CUSTOMER, {'customer_id': 1, 'type_of_work': 'PATENTS'})
        self.wizard.complete_section(VENDOR, {})
        restored = OrderWizard.from_dict(self.wizard.to_dict(), stub_validators())
        self.assertEqual(restored.active, VENDOR)
        self.assertEqual(restored.completed, {CUSTOMER})
        self.assertIn('vendor_id', restored.errors(VENDOR))

    def test_missing_validator_rejected(self):
        with self.assertRaises(ValueError):
            OrderWizard({CUSTOMER: requires()})

    def test_sections_order(self):
        self.assertEqual(SECTIONS, (CUSTOMER, VENDOR, ORDER))


class SectionValidationTests(BaseAPITestCase):
    """DRF-backed section validators"""

    def setUp(self):
        super().setUp()
        self.customer = TestDataFactory.create_customer(company_name='Maple IP')
        self.vendor = TestDataFactory.create_vendor(company_name='Kangaroo LLP')

    def customer_section(self, **overrides):
        data = {
            'customer_id': str(self.customer.pk),
            'order_onboarding_date': '2026-01-10',
            'order_friendly_image': TestDataFactory.image_upload(),
            'type_of_work': 'PATENTS',
            'work_completion_date': '2026-03-01',
            'documents_provided': TestDataFactory.file_upload('brief.pdf'),
            'invoice_for_customer': TestDataFactory.file_upload('invoice.pdf'),
            'total_invoice_value': '1500.00',
            'payment_expected_date': '2026-02-01',
        }
        data.update(overrides)
        return data

    def test_missing_type_of_work(self):
        cleaned, errors = validate_section(CUSTOMER, self.customer_section(type_of_work=''))
        self.assertEqual(cleaned, {})
        self.assertEqual(errors['type_of_work'], 'Type of work is required')

    def test_wizard_rejects_customer_without_type_of_work(self):
        wizard = OrderWizard({section: (lambda raw, s=section: validate_section(s, raw)) for section in SECTIONS})
        errors = wizard.complete_section(CUSTOMER, self.customer_section(type_of_work=''))
        self.assertIn('type_of_work', errors)
        self.assertEqual(wizard.completed, frozenset())

        errors = wizard.complete_section(CUSTOMER, self.customer_section())
        self.assertEqual(errors, {})
        self.assertEqual(wizard.completed, {CUSTOMER})
        self.assertEqual(wizard.active, VENDOR)

    def test_customer_section_cleaned_values(self):
        cleaned, errors = validate_section(CUSTOMER, self.customer_section())
        self.assertEqual(errors, {})
        self.assertEqual(cleaned['customer_id'], self.customer.pk)
        self.assertEqual(cleaned['type'], 'PATENTS')
        self.assertEqual(cleaned['total_invoice_value'], '1500.00')
        self.assertEqual(cleaned['order_onboarding_date'], '2026-01-10')
        self.assertTrue(cleaned['order_friendly_image'].startswith('orders/images/'))
        self.assertTrue(cleaned['customer_documents'].startswith('orders/customer_documents/'))
        self.assertRegex(cleaned['customer_reference'], r'^IS-\d{9}$')
        self.assertEqual(cleaned['customer_name'], 'Maple IP')
        self.assertEqual(cleaned['customer_email'], self.customer.email)

    def test_non_numeric_invoice_value(self):
        _, errors = validate_section(CUSTOMER, self.customer_section(total_invoice_value='lots'))
        self.assertEqual(errors['total_invoice_value'], 'Total invoice value must be a number')

    def test_inactive_customer_rejected(self):
        self.customer.is_active = False
        self.customer.save()
        _, errors = validate_section(CUSTOMER, self.customer_section())
        self.assertIn('customer_id', errors)

    def test_vendor_section(self):
        cleaned, errors = validate_section(VENDOR, {
            'vendor_id': self.vendor.pk, 'onboarding_date': '2026-01-12', 'current_status': 'PENDING_WITH_VENDOR',
        })
        self.assertEqual(errors, {})
        self.assertEqual(cleaned['vendor_status'], 'PENDING_WITH_VENDOR')
        self.assertEqual(cleaned['vendor_status_change_date'], timezone.localdate().isoformat())
        self.assertNotIn('vendor_status_comment', cleaned)
        self.assertEqual(cleaned['vendor_name'], 'Kangaroo LLP')

    def test_vendor_section_requires_status(self):
        _, errors = validate_section(VENDOR, {'vendor_id': self.vendor.pk, 'onboarding_date': '2026-01-12'})
        self.assertEqual(errors, {'current_status': 'Current status is required'})

    def test_order_section_all_optional(self):
        cleaned, errors = validate_section(ORDER, {})
        self.assertEqual((cleaned, errors), ({}, {}))

    def test_order_section_values_must_be_well_formed(self):
        _, errors = validate_section(ORDER, {'due_date': 'tomorrow', 'amount': 'abc', 'priority': 'SOON'})
        self.assertEqual(set(errors), {'due_date', 'amount', 'priority'})

    def test_customer_reference_format(self):
        self.assertRegex(generate_customer_reference(), r'^IS-\d{9}$')


class OrderWizardAPITests(BaseAPITestCase):
    """Wizard endpoints keep their state in the session"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)
        self.customer = TestDataFactory.create_customer(company_name='Maple IP')
        self.vendor = TestDataFactory.create_vendor(company_name='Kangaroo LLP')

    def complete_customer(self):
        return self.client.post('/api/v1/orders/wizard/customer/complete/', {
            'customer_id': self.customer.pk,
            'order_onboarding_date': '2026-01-10',
            'order_friendly_image': TestDataFactory.image_upload(),
            'type_of_work': 'TRADEMARKS',
            'work_completion_date': '2026-03-01',
            'documents_provided': TestDataFactory.file_upload('brief.pdf'),
            'invoice_for_customer': TestDataFactory.file_upload('invoice.pdf'),
            'total_invoice_value': '1500.00',
            'payment_expected_date': '2026-02-01',
        }, format='multipart')

    def complete_vendor(self):
        return self.client.post('/api/v1/orders/wizard/vendor/complete/', {
            'vendor_id': self.vendor.pk,
            'onboarding_date': '2026-01-12',
            'current_status': 'YET_TO_START',
        }, format='json')

    def test_initial_state(self):
        response = self.client.get('/api/v1/orders/wizard/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['active'], 'customer')
        self.assertEqual(response.data['completed'], [])
        self.assertFalse(response.data['can_submit'])

    def test_submit_while_incomplete_is_conflict(self):
        self.complete_customer()
        response = self.client.post('/api/v1/orders/wizard/submit/')
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data['missing_sections'], ['vendor', 'order'])
        self.assertEqual(Order.objects.count(), 0)

    def test_invalid_section_returns_error_map(self):
        response = self.client.post('/api/v1/orders/wizard/customer/complete/',
                                    {'customer_id': self.customer.pk}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['errors']['type_of_work'], 'Type of work is required')
        self.assertEqual(response.data['wizard']['completed'], [])

    def test_full_flow_creates_order(self):
        response = self.complete_customer()
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['wizard']['active'], 'vendor')

        response = self.complete_vendor()
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data['wizard']['active'], 'order')

        response = self.client.post('/api/v1/orders/wizard/order/complete/', {
            'priority': 'HIGH', 'lawyer_reference_number': 'LAW-77',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data['wizard']['can_submit'])

        response = self.client.post('/api/v1/orders/wizard/submit/')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        order = Order.objects.get(pk=response.data['id'])
        self.assertEqual(order.customer, self.customer)
        self.assertEqual(order.vendor, self.vendor)
        self.assertEqual(order.type, 'TRADEMARKS')
        self.assertEqual(order.priority, 'HIGH')
        self.assertEqual(order.title, 'Trademarks for Maple IP')
        self.assertEqual(order.country, self.customer.country)
        self.assertEqual(str(order.amount), '1500.00')
        self.assertEqual(order.payment_expected_date, date(2026, 2, 1))
        self.assertEqual(order.lawyer_reference_number, 'LAW-77')
        self.assertEqual(order.assigned_to, self.user)
        self.assertTrue(order.order_friendly_image.name.startswith('orders/images/'))
        self.assertTrue(order.reference_number.startswith(f'IP-{timezone.now().year}-'))
        self.assertTrue(AuditLog.objects.filter(action='order_create', object_id=str(order.pk)).exists())

        # The form is closed after submitting
        response = self.client.get('/api/v1/orders/wizard/')
        self.assertEqual(response.data['completed'], [])

    def test_reset(self):
        self.complete_customer()
        response = self.client.delete('/api/v1/orders/wizard/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['completed'], [])
        self.assertEqual(response.data['active'], 'customer')

    def stored_uploads(self, response):
        values = response.data['wizard']['values']['customer']
        return [values[field] for field in ('order_friendly_image', 'customer_documents', 'customer_invoice')]

    def test_recompleting_section_deletes_replaced_uploads(self):
        first = self.stored_uploads(self.complete_customer())
        for name in first:
            self.assertTrue(default_storage.exists(name))

        second = self.stored_uploads(self.complete_customer())
        self.assertTrue(set(first).isdisjoint(second))
        for name in first:
            self.assertFalse(default_storage.exists(name))
        for name in second:
            self.assertTrue(default_storage.exists(name))

    def test_reset_deletes_uploads(self):
        stored = self.stored_uploads(self.complete_customer())
        self.client.delete('/api/v1/orders/wizard/')
        for name in stored:
            self.assertFalse(default_storage.exists(name))

    def test_submitted_uploads_are_kept(self):
        stored = self.stored_uploads(self.complete_customer())
        self.complete_vendor()
        self.client.post('/api/v1/orders/wizard/order/complete/', {}, format='json')
        response = self.client.post('/api/v1/orders/wizard/submit/')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        for name in stored:
            self.assertTrue(default_storage.exists(name))

    def test_select_section(self):
        response = self.client.post('/api/v1/orders/wizard/order/select/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['active'], 'order')

        response = self.client.post('/api/v1/orders/wizard/payment/select/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_wizard_requires_manage_orders(self):
        viewer = TestDataFactory.create_user(permissions=[UserPermission.VIEW_ANALYTICS])
        self.client.authenticate_user(viewer)
        response = self.client.get('/api/v1/orders/wizard/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class OrderAPITests(BaseAPITestCase):
    """Test order list, direct creation and edits"""

    def setUp(self):
        super().setUp()
        self.user = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.user)
        self.customer = TestDataFactory.create_customer()
        self.vendor = TestDataFactory.create_vendor()

    def test_reference_numbers_are_sequential(self):
        first = TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        second = TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        year = timezone.now().year
        self.assertEqual(first.reference_number, f'IP-{year}-001')
        self.assertEqual(second.reference_number, f'IP-{year}-002')

    def test_create_order(self):
        response = self.client.post('/api/v1/orders/', {
            'title': 'Logo trademark filing',
            'type': 'TRADEMARKS',
            'customer': self.customer.pk,
            'vendor': self.vendor.pk,
            'country': 'Canada',
            'priority': 'HIGH',
            'amount': '2500.00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['status'], 'YET_TO_START')
        self.assertEqual(response.data['assigned_to'], self.user.pk)
        self.assertTrue(response.data['reference_number'].startswith('IP-'))

    def test_create_order_missing_fields(self):
        response = self.client.post('/api/v1/orders/', {'title': 'Incomplete'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ('type', 'customer', 'vendor', 'country', 'priority', 'amount'):
            self.assertIn(field, response.data)

    def test_list_filters(self):
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, title='Solar patent',
                                     type='PATENTS')
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, title='Brand mark',
                                     type='TRADEMARKS', status=Order.STATUS_IN_PROGRESS)

        response = self.client.get('/api/v1/orders/')
        self.assertEqual(len(response.data), 2)

        response = self.client.get('/api/v1/orders/', {'search': 'solar'})
        self.assertEqual([row['title'] for row in response.data], ['Solar patent'])

        response = self.client.get('/api/v1/orders/', {'status': 'IN_PROGRESS'})
        self.assertEqual([row['title'] for row in response.data], ['Brand mark'])

        response = self.client.get('/api/v1/orders/', {'type': 'PATENTS'})
        self.assertEqual([row['title'] for row in response.data], ['Solar patent'])

    def test_list_invalid_status_filter(self):
        response = self.client.get('/api/v1/orders/', {'status': 'SOMEDAY'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_completing_stamps_completed_date(self):
        order = TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        response = self.client.patch(f'/api/v1/orders/{order.pk}/edit/', {'status': 'COMPLETED'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIsNotNone(response.data['completed_date'])
        self.assertTrue(AuditLog.objects.filter(action='order_status_change', object_id=str(order.pk)).exists())

    def test_paid_amount_cannot_exceed_amount(self):
        order = TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        response = self.client.patch(f'/api/v1/orders/{order.pk}/edit/', {'paid_amount': '5000.00'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('paid_amount', response.data)

    def test_edit_requires_manage_orders(self):
        order = TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        viewer = TestDataFactory.create_user(permissions=[UserPermission.VIEW_ANALYTICS])
        self.client.authenticate_user(viewer)
        response = self.client.get(f'/api/v1/orders/{order.pk}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response = self.client.patch(f'/api/v1/orders/{order.pk}/edit/', {'status': 'CLOSED'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class TypeOfWorkAPITests(BaseAPITestCase):
    """Managed catalogue of types of work"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)

    def test_defaults_are_seeded(self):
        response = self.client.get('/api/v1/type-of-work/', {'active': 'true'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        codes = {row['code'] for row in response.data}
        self.assertTrue({'PATENTS', 'TRADEMARKS', 'OTHERS'} <= codes)

    def test_create_derives_code_from_name(self):
        response = self.client.post('/api/v1/type-of-work/', {'name': 'Audit Retainer'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data['code'], 'AUDIT_RETAINER')
        self.assertTrue(response.data['is_active'])
        self.assertEqual(response.data['created_by'], self.admin.pk)
        self.assertTrue(AuditLog.objects.filter(action='create', model_name='TypeOfWork').exists())

    def test_duplicate_name_rejected(self):
        response = self.client.post('/api/v1/type-of-work/', {'name': 'patents'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data)

    def test_update_keeps_code(self):
        type_of_work = TypeOfWork.objects.create(name='Domain Disputes')
        response = self.client.patch(f'/api/v1/type-of-work/{type_of_work.pk}/',
                                     {'name': 'Domain Name Disputes', 'code': 'DOMAINS'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        type_of_work.refresh_from_db()
        self.assertEqual(type_of_work.name, 'Domain Name Disputes')
        self.assertEqual(type_of_work.code, 'DOMAIN_DISPUTES')

    def test_toggle_status(self):
        type_of_work = TypeOfWork.objects.get(code='DESIGNS')
        url = f'/api/v1/type-of-work/{type_of_work.pk}/toggle-status/'
        response = self.client.patch(url, {'is_active': 'maybe'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.patch(url, {'is_active': False}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], 'Type of work deactivated successfully')
        self.assertFalse(TypeOfWork.objects.get(pk=type_of_work.pk).is_active)

    def test_inactive_type_cannot_be_chosen(self):
        TypeOfWork.objects.filter(code='DESIGNS').update(is_active=False)
        customer = TestDataFactory.create_customer()
        vendor = TestDataFactory.create_vendor()

        response = self.client.post('/api/v1/orders/wizard/customer/complete/',
                                    {'customer_id': customer.pk, 'type_of_work': 'DESIGNS'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['errors']['type_of_work'], 'Select an active type of work')

        response = self.client.post('/api/v1/orders/', {
            'title': 'Chair design', 'type': 'DESIGNS', 'customer': customer.pk, 'vendor': vendor.pk,
            'country': 'Canada', 'priority': 'LOW', 'amount': '100.00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(str(response.data['type'][0]), 'Select an active type of work')

    def test_order_keeps_deactivated_type_on_edit(self):
        order = TestDataFactory.create_order(customer=TestDataFactory.create_customer(),
                                             vendor=TestDataFactory.create_vendor(), type='DESIGNS')
        TypeOfWork.objects.filter(code='DESIGNS').update(is_active=False)
        response = self.client.put(f'/api/v1/orders/{order.pk}/edit/', {
            'title': order.title, 'type': 'DESIGNS', 'status': order.status, 'priority': order.priority,
            'country': order.country, 'amount': str(order.amount),
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_delete_refused_while_used(self):
        TestDataFactory.create_order(customer=TestDataFactory.create_customer(),
                                     vendor=TestDataFactory.create_vendor(), type='PATENTS')
        used = TypeOfWork.objects.get(code='PATENTS')
        response = self.client.delete(f'/api/v1/type-of-work/{used.pk}/')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(TypeOfWork.objects.filter(pk=used.pk).exists())

        unused = TypeOfWork.objects.create(name='Licensing')
        response = self.client.delete(f'/api/v1/type-of-work/{unused.pk}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(TypeOfWork.objects.filter(pk=unused.pk).exists())

    def test_changes_require_manage_orders(self):
        viewer = TestDataFactory.create_user(permissions=[UserPermission.VIEW_ANALYTICS])
        self.client.authenticate_user(viewer)
        response = self.client.get('/api/v1/type-of-work/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response = self.client.post('/api/v1/type-of-work/', {'name': 'Licensing'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class PurgeWizardUploadsTests(BaseAPITestCase):
    """Uploads left behind by wizards whose session expired"""

    def test_unreferenced_uploads_are_deleted(self):
        kept = store_upload(TestDataFactory.file_upload('filed.pdf'), 'customer_documents')
        orphan = store_upload(TestDataFactory.file_upload('abandoned.pdf'), 'customer_documents')
        TestDataFactory.create_order(customer_documents=kept)

        out = StringIO()
        call_command('purge_wizard_uploads', hours=0, dry_run=True, stdout=out)
        self.assertTrue(default_storage.exists(orphan))
        self.assertIn(orphan, out.getvalue())

        call_command('purge_wizard_uploads', hours=0, stdout=StringIO())
        self.assertFalse(default_storage.exists(orphan))
        self.assertTrue(default_storage.exists(kept))

    def test_recent_uploads_survive(self):
        recent = store_upload(TestDataFactory.image_upload('fresh.png'), 'order_friendly_image')
        call_command('purge_wizard_uploads', stdout=StringIO())
        self.assertTrue(default_storage.exists(recent))
