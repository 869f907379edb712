from django.urls import path
from .views import (
    customer_list_create, customer_detail,
    vendor_list_create, vendor_detail, vendor_rating,
)

urlpatterns = [
    # Customer endpoints
    path('customers/', customer_list_create, name='customer-list-create'),
    path('customers/<int:pk>/', customer_detail, name='customer-detail'),

    # Vendor endpoints
    path('vendors/', vendor_list_create, name='vendor-list-create'),
    path('vendors/<int:pk>/', vendor_detail, name='vendor-detail'),
    path('vendors/<int:pk>/rating/', vendor_rating, name='vendor-rating'),
]
