import django_filters
from django.db.models import Q
from .models import Order


class OrderFilter(django_filters.FilterSet):
    """Order list filters: free-text search plus status/type/priority"""

    search = django_filters.CharFilter(method='filter_search', label='Search')
    status = django_filters.ChoiceFilter(choices=Order.STATUS_CHOICES)
    type = django_filters.CharFilter(field_name='type', lookup_expr='iexact')
    priority = django_filters.ChoiceFilter(choices=Order.PRIORITY_CHOICES)
    country = django_filters.CharFilter(field_name='country', lookup_expr='iexact')
    customer = django_filters.NumberFilter(field_name='customer_id', lookup_expr='exact')
    vendor = django_filters.NumberFilter(field_name='vendor_id', lookup_expr='exact')

    class Meta:
        model = Order
        fields = ['search', 'status', 'type', 'priority', 'country', 'customer', 'vendor']

    def filter_search(self, queryset, name, value):
        """Reference number or title, case-insensitive"""
        value = (value or '').strip()
        if not value:
            return queryset
        return queryset.filter(Q(reference_number__icontains=value) | Q(title__icontains=value))
