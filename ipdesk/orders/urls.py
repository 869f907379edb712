from django.urls import path
from .views import (
    order_list_create, order_detail, order_edit,
    type_of_work_list_create, type_of_work_detail, type_of_work_toggle_status,
    wizard_state, wizard_select, wizard_complete, wizard_submit,
)

urlpatterns = [
    path('orders/', order_list_create, name='order-list-create'),
    path('orders/<int:pk>/', order_detail, name='order-detail'),
    path('orders/<int:pk>/edit/', order_edit, name='order-edit'),

    # Type of work
    path('type-of-work/', type_of_work_list_create, name='type-of-work-list-create'),
    path('type-of-work/<int:pk>/', type_of_work_detail, name='type-of-work-detail'),
    path('type-of-work/<int:pk>/toggle-status/', type_of_work_toggle_status, name='type-of-work-toggle-status'),

    # Order wizard
    path('orders/wizard/', wizard_state, name='order-wizard'),
    path('orders/wizard/submit/', wizard_submit, name='order-wizard-submit'),
    path('orders/wizard/<str:section>/select/', wizard_select, name='order-wizard-select'),
    path('orders/wizard/<str:section>/complete/', wizard_complete, name='order-wizard-complete'),
]
