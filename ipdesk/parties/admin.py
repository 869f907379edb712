from django.contrib import admin
from .models import Customer, Vendor


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['name', 'company_type', 'email', 'phone', 'country', 'dpiit_registered', 'is_active', 'created_at']
    list_filter = ['is_active', 'company_type', 'country', 'dpiit_registered', 'created_at']
    search_fields = ['name', 'email', 'company_name', 'individual_name', 'gst_number']
    readonly_fields = ['name', 'created_at', 'updated_at']
    ordering = ['name']


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    list_display = ['name', 'company_type', 'email', 'specialization', 'rating', 'country', 'is_active', 'created_at']
    list_filter = ['is_active', 'company_type', 'country', 'created_at']
    search_fields = ['name', 'email', 'company_name', 'specialization']
    readonly_fields = ['name', 'created_at', 'updated_at']
    ordering = ['name']
