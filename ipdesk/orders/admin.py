from django.contrib import admin
from .models import Order, TypeOfWork


@admin.register(TypeOfWork)
class TypeOfWorkAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'is_active', 'created_by', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name', 'code']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['reference_number', 'title', 'type', 'status', 'priority', 'customer', 'vendor',
                    'amount', 'paid_amount', 'due_date', 'created_at']
    list_filter = ['status', 'type', 'priority', 'country', 'created_at']
    search_fields = ['reference_number', 'title', 'customer__name', 'vendor__name', 'customer_reference']
    readonly_fields = ['reference_number', 'completed_date', 'created_at', 'updated_at']
    raw_id_fields = ['customer', 'vendor', 'assigned_to', 'created_by']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
