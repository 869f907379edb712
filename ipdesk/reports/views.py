import logging
import calendar
from datetime import datetime
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.core.cache import cache
from django.db.models import Count, Q, Sum, DecimalField
from django.db.models.functions import TruncMonth
from django.utils import timezone
from decimal import Decimal

from ipdesk.core.model_cache import get_dashboard_cache_key, DASHBOARD_CACHE_TTL
from ipdesk.core.models import UserPermission
from ipdesk.core.session import require_permission, session_context
from ipdesk.orders.models import Order, TypeOfWork
from ipdesk.parties.models import Customer, Vendor

logger = logging.getLogger('ipdesk.reports')

TIMEFRAMES = ('all', 'month', 'quarter', 'year')
# Analytics window in calendar months, the current month included
ANALYTICS_TIMEFRAMES = {'1month': 1, '3months': 3, '6months': 6, '1year': 12}


def timeframe_start(timeframe, now=None):
    """First instant of the current month/quarter/year; None for all time"""
    now = now or timezone.localtime()
    if timeframe == 'month':
        start = datetime(now.year, now.month, 1)
    elif timeframe == 'quarter':
        start = datetime(now.year, (now.month - 1) // 3 * 3 + 1, 1)
    elif timeframe == 'year':
        start = datetime(now.year, 1, 1)
    else:
        return None
    return timezone.make_aware(start, timezone.get_current_timezone())


def _by_country(queryset, limit=10):
    rows = (queryset.values('country').annotate(count=Count('id')).order_by('-count', 'country')[:limit])
    return [{'country': row['country'], 'count': row['count']} for row in rows]


def _days_left(due_date, today):
    return (due_date - today).days if due_date else 0


def _pending_work(orders, today, limit=10):
    pending = orders.filter(status__in=Order.PENDING_STATUSES).select_related('customer').order_by('-created_at')[:limit]
    return [{
        'id': order.id,
        'reference_number': order.reference_number,
        'title': order.title,
        'customer_name': order.customer.name,
        'status': order.status,
        'priority': order.priority,
        'days_left': _days_left(order.due_date, today),
    } for order in pending]


def _pending_payments(orders, today, limit=10):
    awaiting = (orders.filter(status=Order.STATUS_PENDING_PAYMENT).select_related('customer')
                .order_by('payment_expected_date', 'created_at')[:limit])
    return [{
        'id': order.id,
        'reference_number': order.reference_number,
        'customer_name': order.customer.name,
        'amount': str(order.amount),
        'paid_amount': str(order.paid_amount),
        'days_left': _days_left(order.payment_expected_date, today),
    } for order in awaiting]


def build_dashboard(context, timeframe):
    """KPI figures for the dashboard; sub-admins only see orders assigned to them"""
    today = timezone.localdate()
    orders = Order.objects.all()
    start = timeframe_start(timeframe)
    if start is not None:
        orders = orders.filter(created_at__gte=start)
    if not context.is_admin:
        orders = orders.filter(assigned_to_id=context.user_id)

    customers = Customer.objects.filter(is_active=True)
    vendors = Vendor.objects.filter(is_active=True)
    status_counts = dict(orders.values_list('status').annotate(count=Count('id')).order_by())
    totals = orders.aggregate(
        amount=Sum('amount', output_field=DecimalField()),
        paid=Sum('paid_amount', output_field=DecimalField()),
    )
    amount = totals['amount'] or Decimal('0.00')
    paid = totals['paid'] or Decimal('0.00')

    return {
        'timeframe': timeframe,
        'scope': 'all' if context.is_admin else 'assigned',
        'total_customers': customers.count(),
        'total_vendors': vendors.count(),
        'total_orders': sum(status_counts.values()),
        'orders_completed': status_counts.get(Order.STATUS_COMPLETED, 0),
        'orders_closed': status_counts.get(Order.STATUS_CLOSED, 0),
        'orders_yet_to_start': status_counts.get(Order.STATUS_YET_TO_START, 0),
        'orders_pending_with_client': status_counts.get(Order.STATUS_PENDING_WITH_CLIENT, 0),
        'orders_by_status': status_counts,
        'total_order_value': str(amount),
        'total_paid': str(paid),
        'total_outstanding': str(amount - paid),
        'customers_by_country': _by_country(customers),
        'vendors_by_country': _by_country(vendors),
        'work_distribution': _by_country(orders),
        'pending_work': _pending_work(orders, today),
        'pending_payments': _pending_payments(orders, today),
    }


@api_view(['GET'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.VIEW_ANALYTICS)])
def dashboard_summary(request):
    """Dashboard KPIs for ?timeframe=all|month|quarter|year"""
    timeframe = request.query_params.get('timeframe', 'all')
    if timeframe not in TIMEFRAMES:
        return Response({'error': f"Invalid timeframe. Must be one of: {', '.join(TIMEFRAMES)}"},
                        status=status.HTTP_400_BAD_REQUEST)

    context = session_context(request)
    scope = 'admin' if context.is_admin else f"user:{context.user_id}"
    cache_key = get_dashboard_cache_key(scope, timeframe)
    cached_data = cache.get(cache_key)
    if cached_data is not None:
        return Response(cached_data)

    data = build_dashboard(context, timeframe)
    cache.set(cache_key, data, DASHBOARD_CACHE_TTL)
    logger.debug(f"Dashboard computed for {scope} ({timeframe})")
    return Response(data)


def analytics_months(timeframe, now=None):
    """(year, month) pairs covered by an analytics timeframe, oldest first"""
    now = now or timezone.localtime()
    year, month = now.year, now.month
    months = []
    for _ in range(ANALYTICS_TIMEFRAMES[timeframe]):
        months.append((year, month))
        year, month = (year, month - 1) if month > 1 else (year - 1, 12)
    return months[::-1]


def _money(value):
    return str((value or Decimal('0')).quantize(Decimal('0.01')))


def _orders_by_type(orders):
    """Every active type plus any other type the orders use, with its count"""
    counts = dict(orders.values_list('type').annotate(count=Count('id')).order_by())
    names = TypeOfWork.names_by_code()
    codes = list(TypeOfWork.objects.filter(is_active=True).order_by('name').values_list('code', flat=True))
    codes += sorted(code for code in counts if code not in codes)
    return [{'type': code, 'name': names.get(code, code), 'count': counts.get(code, 0)} for code in codes]


def build_analytics(context, timeframe):
    """
    Revenue and order trends over the last N calendar months.

    Revenue is the paid amount of completed orders. Each month bucket reports
    the revenue, the completed orders and the new orders created in it.
    """
    months = analytics_months(timeframe)
    start = timezone.make_aware(datetime(months[0][0], months[0][1], 1), timezone.get_current_timezone())
    orders = Order.objects.filter(created_at__gte=start)
    if not context.is_admin:
        orders = orders.filter(assigned_to_id=context.user_id)

    completed_only = Q(status=Order.STATUS_COMPLETED)
    totals = orders.aggregate(
        total=Count('id'),
        completed=Count('id', filter=completed_only),
        revenue=Sum('paid_amount', filter=completed_only, output_field=DecimalField()),
    )
    monthly = (orders.annotate(month=TruncMonth('created_at')).values('month')
               .annotate(new=Count('id'),
                         completed=Count('id', filter=completed_only),
                         revenue=Sum('paid_amount', filter=completed_only, output_field=DecimalField()))
               .order_by('month'))
    by_month = {(row['month'].year, row['month'].month): row for row in monthly}

    buckets = []
    for year, month in months:
        row = by_month.get((year, month), {})
        buckets.append({
            'month': f"{year}-{month:02d}",
            'label': calendar.month_abbr[month],
            'revenue': _money(row.get('revenue')),
            'completed': row.get('completed', 0),
            'new': row.get('new', 0),
        })

    total = totals['total']
    return {
        'timeframe': timeframe,
        'scope': 'all' if context.is_admin else 'assigned',
        'kpis': {
            'total_revenue': _money(totals['revenue']),
            'active_customers': Customer.objects.filter(is_active=True, created_at__gte=start).count(),
            'orders_completed': totals['completed'],
            'success_rate': round(totals['completed'] * 100 / total) if total else 0,
        },
        'months': buckets,
        'orders_by_type': _orders_by_type(orders),
    }


@api_view(['GET'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.VIEW_ANALYTICS)])
def analytics_summary(request):
    """Monthly revenue and order trends for ?timeframe=1month|3months|6months|1year"""
    timeframe = request.query_params.get('timeframe', '6months')
    if timeframe not in ANALYTICS_TIMEFRAMES:
        return Response({'error': f"Invalid timeframe. Must be one of: {', '.join(ANALYTICS_TIMEFRAMES)}"},
                        status=status.HTTP_400_BAD_REQUEST)

    context = session_context(request)
    scope = 'admin' if context.is_admin else f"user:{context.user_id}"
    cache_key = get_dashboard_cache_key(f"analytics:{scope}", timeframe)
    cached_data = cache.get(cache_key)
    if cached_data is not None:
        return Response(cached_data)

    data = build_analytics(context, timeframe)
    cache.set(cache_key, data, DASHBOARD_CACHE_TTL)
    logger.debug(f"Analytics computed for {scope} ({timeframe})")
    return Response(data)
