import logging
from django.db import models, transaction
from rest_framework import serializers
from ipdesk.parties.models import Customer, Vendor
from .models import Order, TypeOfWork

logger = logging.getLogger('ipdesk.orders')


def _order_field_values(payload):
    """Keep payload keys that are Order fields, parsed to the field's Python type"""
    values = {}
    for field in Order._meta.concrete_fields:
        if field.primary_key or field.name == 'reference_number':
            continue
        key = field.attname
        if key not in payload:
            continue
        value = payload[key]
        if isinstance(field, models.FileField):
            # Stored file name
            values[field.name] = value
        else:
            values[key] = field.to_python(value)
    return values


@transaction.atomic
def create_order_from_payload(payload, user=None):
    """
    Create an Order from the combined wizard payload.

    Order-section values win over the customer section where both set the
    same field. Fields the wizard leaves optional fall back to defaults
    taken from the selected customer.
    """
    try:
        customer = Customer.objects.get(pk=payload.get('customer_id'), is_active=True)
    except Customer.DoesNotExist:
        raise serializers.ValidationError({'customer_id': 'Selected customer does not exist or is inactive'})
    try:
        vendor = Vendor.objects.get(pk=payload.get('vendor_id'), is_active=True)
    except Vendor.DoesNotExist:
        raise serializers.ValidationError({'vendor_id': 'Selected vendor does not exist or is inactive'})

    values = _order_field_values(payload)
    values['customer'] = customer
    values['vendor'] = vendor
    values.pop('customer_id', None)
    values.pop('vendor_id', None)

    if not values.get('title'):
        values['title'] = f"{TypeOfWork.display_name(values.get('type', ''))} for {customer.name}"
    if not values.get('country'):
        values['country'] = customer.country
    if values.get('amount') is None:
        values['amount'] = values.get('total_invoice_value') or 0
    if user is not None and user.is_authenticated:
        values.setdefault('created_by', user)
        values.setdefault('assigned_to', user)

    order = Order.objects.create(**values)
    logger.info(f"Created order {order.reference_number} for customer {customer.pk} / vendor {vendor.pk}")
    return order
