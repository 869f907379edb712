"""
Tests: KPI counts, sub-admin scope, timeframes, permissions, cache invalidation, monthly analytics
Tests: KPI counts, sub-admin scope, timeframes, permissions, cache invalidation
"""
from datetime import datetime, timedelta
from decimal import Decimal
from django.test import SimpleTestCase
from django.utils import timezone
from rest_framework import status
from ipdesk.core.models import UserPermission
from ipdesk.core.test_utils import BaseAPITestCase, TestDataFactory, AuthenticatedAPIClient
from ipdesk.orders.models import Order
from .views import analytics_months, timeframe_start


class TimeframeTests(SimpleTestCase):

    def test_starts(self):
        now = timezone.make_aware(datetime(2026, 8, 17, 15, 30))
        self.assertIsNone(timeframe_start('all', now))
        self.assertEqual(timeframe_start('month', now).date().isoformat(), '2026-08-01')
        self.assertEqual(timeframe_start('quarter', now).date().isoformat(), '2026-07-01')
        self.assertEqual(timeframe_start('year', now).date().isoformat(), '2026-01-01')

    def test_analytics_months(self):
        now = timezone.make_aware(datetime(2026, 2, 10))
        self.assertEqual(analytics_months('1month', now), [(2026, 2)])
        self.assertEqual(analytics_months('3months', now), [(2025, 12), (2026, 1), (2026, 2)])
        self.assertEqual(len(analytics_months('1year', now)), 12)
        self.assertEqual(analytics_months('1year', now)[0], (2025, 3))


class DashboardTests(BaseAPITestCase):
    """Test the dashboard summary endpoint"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.sub_admin = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)

        self.customer = TestDataFactory.create_customer()
        TestDataFactory.create_customer(country='Australia', state='Victoria', city='Melbourne')
        self.vendor = TestDataFactory.create_vendor()
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, assigned_to=self.sub_admin,
                                     amount=Decimal('1000.00'), paid_amount=Decimal('400.00'))
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, status=Order.STATUS_COMPLETED,
                                     amount=Decimal('500.00'), paid_amount=Decimal('500.00'))
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor,
                                     status=Order.STATUS_PENDING_PAYMENT, amount=Decimal('250.00'),
                                     payment_expected_date=timezone.localdate() + timedelta(days=5))

    def test_admin_summary(self):
        response = self.client.get('/api/v1/reports/dashboard/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data
        self.assertEqual(data['scope'], 'all')
        self.assertEqual(data['total_customers'], 2)
        self.assertEqual(data['total_vendors'], 1)
        self.assertEqual(data['total_orders'], 3)
        self.assertEqual(data['orders_completed'], 1)
        self.assertEqual(data['orders_yet_to_start'], 1)
        self.assertEqual(data['total_order_value'], '1750.00')
        self.assertEqual(data['total_paid'], '900.00')
        self.assertEqual(data['total_outstanding'], '850.00')
        self.assertEqual(data['customers_by_country'][0]['count'], 1)
        self.assertEqual(data['work_distribution'], [{'country': 'Canada', 'count': 3}])

    def test_pending_lists(self):
        data = self.client.get('/api/v1/reports/dashboard/').data
        self.assertEqual(len(data['pending_work']), 2)
        self.assertEqual(len(data['pending_payments']), 1)
        self.assertEqual(data['pending_payments'][0]['days_left'], 5)

    def test_sub_admin_sees_assigned_orders(self):
        self.client.authenticate_user(self.sub_admin)
        response = self.client.get('/api/v1/reports/dashboard/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['scope'], 'assigned')
        self.assertEqual(response.data['total_orders'], 1)
        self.assertEqual(response.data['total_customers'], 2)

    def test_invalid_timeframe(self):
        response = self.client.get('/api/v1/reports/dashboard/', {'timeframe': 'decade'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_timeframe_excludes_older_orders(self):
        old = Order.objects.order_by('created_at').first()
        Order.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=800))
        response = self.client.get('/api/v1/reports/dashboard/', {'timeframe': 'year'})
        self.assertEqual(response.data['timeframe'], 'year')
        self.assertEqual(response.data['total_orders'], 2)

    def test_requires_view_analytics(self):
        user = TestDataFactory.create_user(permissions=[UserPermission.MANAGE_ORDERS])
        self.client.authenticate_user(user)
        response = self.client.get('/api/v1/reports/dashboard/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_new_order_invalidates_cached_summary(self):
        first = self.client.get('/api/v1/reports/dashboard/').data
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        second = self.client.get('/api/v1/reports/dashboard/').data
        self.assertEqual(second['total_orders'], first['total_orders'] + 1)


class AnalyticsTests(BaseAPITestCase):
    """Test the monthly analytics endpoint"""

    def setUp(self):
        super().setUp()
        self.admin = TestDataFactory.create_admin()
        self.sub_admin = TestDataFactory.create_user()
        self.client = AuthenticatedAPIClient()
        self.client.authenticate_user(self.admin)

        self.customer = TestDataFactory.create_customer()
        self.vendor = TestDataFactory.create_vendor()
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, assigned_to=self.sub_admin,
                                     type='PATENTS', paid_amount=Decimal('400.00'))
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, type='TRADEMARKS',
                                     status=Order.STATUS_COMPLETED, paid_amount=Decimal('500.00'))
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor, type='TRADEMARKS',
                                     status=Order.STATUS_COMPLETED, paid_amount=Decimal('250.00'))

    def move_to_month(self, order, year, month):
        created = timezone.make_aware(datetime(year, month, 15, 12, 0))
        Order.objects.filter(pk=order.pk).update(created_at=created)

    def test_kpis_and_current_month(self):
        response = self.client.get('/api/v1/reports/analytics/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data
        self.assertEqual(data['timeframe'], '6months')
        self.assertEqual(data['kpis'], {
            'total_revenue': '750.00',
            'active_customers': 1,
            'orders_completed': 2,
            'success_rate': 67,
        })
        self.assertEqual(len(data['months']), 6)
        now = timezone.localtime()
        current = data['months'][-1]
        self.assertEqual(current['month'], f'{now.year}-{now.month:02d}')
        self.assertEqual((current['new'], current['completed'], current['revenue']), (3, 2, '750.00'))
        self.assertEqual(data['months'][0]['new'], 0)

    def test_orders_by_type(self):
        data = self.client.get('/api/v1/reports/analytics/').data
        counts = {row['type']: row['count'] for row in data['orders_by_type']}
        self.assertEqual(counts['PATENTS'], 1)
        self.assertEqual(counts['TRADEMARKS'], 2)
        self.assertEqual(counts['DESIGNS'], 0)
        names = {row['type']: row['name'] for row in data['orders_by_type']}
        self.assertEqual(names['TRADEMARKS'], 'Trademarks')

    def test_orders_fall_into_their_month(self):
        first, previous = analytics_months('3months')[0], analytics_months('3months')[1]
        self.move_to_month(Order.objects.get(type='PATENTS'), *first)
        self.move_to_month(Order.objects.get(paid_amount=Decimal('500.00')), *previous)

        data = self.client.get('/api/v1/reports/analytics/', {'timeframe': '3months'}).data
        self.assertEqual([bucket['new'] for bucket in data['months']], [1, 1, 1])
        self.assertEqual([bucket['completed'] for bucket in data['months']], [0, 1, 1])
        self.assertEqual(data['months'][1]['revenue'], '500.00')

        data = self.client.get('/api/v1/reports/analytics/', {'timeframe': '1month'}).data
        self.assertEqual(len(data['months']), 1)
        self.assertEqual(data['kpis']['orders_completed'], 1)
        self.assertEqual(data['kpis']['total_revenue'], '250.00')

    def test_sub_admin_sees_assigned_orders(self):
        self.client.authenticate_user(self.sub_admin)
        response = self.client.get('/api/v1/reports/analytics/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['scope'], 'assigned')
        self.assertEqual(response.data['months'][-1]['new'], 1)
        self.assertEqual(response.data['kpis']['success_rate'], 0)

    def test_invalid_timeframe(self):
        response = self.client.get('/api/v1/reports/analytics/', {'timeframe': 'quarter'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_requires_view_analytics(self):
        user = TestDataFactory.create_user(permissions=[UserPermission.MANAGE_ORDERS])
        self.client.authenticate_user(user)
        response = self.client.get('/api/v1/reports/analytics/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_new_order_invalidates_cached_analytics(self):
        first = self.client.get('/api/v1/reports/analytics/').data
        TestDataFactory.create_order(customer=self.customer, vendor=self.vendor)
        second = self.client.get('/api/v1/reports/analytics/').data
        self.assertEqual(second['months'][-1]['new'], first['months'][-1]['new'] + 1)
