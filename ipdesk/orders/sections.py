"""
Validators for the three order wizard sections, built on DRF serializers.

Every section field is named as the browser form names it; cleaned values are
renamed to ``Order`` field names and converted to JSON-safe primitives so the
wizard can live in the session. Uploaded files are written to the default
storage straight away and only their stored names are kept; ``discard_uploads``
deletes them again when the wizard drops those values.

Error maps use the same snake_case form names as keys (``type_of_work``,
``customer_id``, ``current_status``); the front end binds on these names.
"""
import logging
import random
import time
from datetime import date, datetime
from decimal import Decimal
from django.core.files.base import File
from django.core.files.storage import default_storage
from django.db import models
from django.utils import timezone
from rest_framework import serializers
from ipdesk.parties.models import Customer, Vendor
from ipdesk.parties.serializers import customer_snapshot, vendor_snapshot
from .models import Order, VENDOR_STATUS_CHOICES
from .serializers import check_type_of_work
from .wizard import CUSTOMER, VENDOR, ORDER

logger = logging.getLogger('ipdesk.orders')


def _required(label):
    return {'required': f'{label} is required', 'null': f'{label} is required'}


def generate_customer_reference():
    """IS-<last 6 digits of the epoch millis><3 random digits>"""
    millis = str(int(time.time() * 1000))[-6:]
    return f"IS-{millis}{random.randint(0, 999):03d}"


class CustomerSectionSerializer(serializers.Serializer):
    customer_id = serializers.PrimaryKeyRelatedField(
        queryset=Customer.objects.filter(is_active=True),
        error_messages={**_required('Customer selection'),
                        'does_not_exist': 'Selected customer does not exist or is inactive',
                        'incorrect_type': 'Customer selection is invalid'},
    )
    order_reference_number = serializers.CharField(max_length=30, required=False)
    order_onboarding_date = serializers.DateField(error_messages=_required('Order onboarding date'))
    order_friendly_image = serializers.ImageField(error_messages=_required('Order friendly image'))
    type_of_work = serializers.CharField(max_length=30, validators=[check_type_of_work],
                                         error_messages=_required('Type of work'))
    work_completion_date = serializers.DateField(error_messages=_required('Work completion date'))
    documents_provided = serializers.FileField(error_messages=_required('Documents provided'))
    invoice_for_customer = serializers.FileField(error_messages=_required('Invoice for customer'))
    total_invoice_value = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0,
        error_messages={**_required('Total invoice value'), 'invalid': 'Total invoice value must be a number'},
    )
    total_gst_govt_fees = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    payment_expected_date = serializers.DateField(error_messages=_required('Payment expected date'))


class VendorSectionSerializer(serializers.Serializer):
    vendor_id = serializers.PrimaryKeyRelatedField(
        queryset=Vendor.objects.filter(is_active=True),
        error_messages={**_required('Vendor selection'),
                        'does_not_exist': 'Selected vendor does not exist or is inactive',
                        'incorrect_type': 'Vendor selection is invalid'},
    )
    onboarding_date = serializers.DateField(error_messages=_required('Date of onboarding vendor'))
    current_status = serializers.ChoiceField(choices=VENDOR_STATUS_CHOICES, error_messages=_required('Current status'))
    status_comment = serializers.CharField(required=False)
    status_change_date = serializers.DateField(required=False)
    work_completion_expected = serializers.DateField(required=False)
    documents_provided = serializers.FileField(required=False)
    invoice_from_vendor = serializers.FileField(required=False)
    amount_to_be_paid = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    amount_paid_to_vendor = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)


class OrderSectionSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False)
    type = serializers.CharField(max_length=30, required=False, validators=[check_type_of_work])
    country = serializers.CharField(max_length=100, required=False)
    priority = serializers.ChoiceField(choices=Order.PRIORITY_CHOICES, required=False)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    due_date = serializers.DateField(required=False)
    date_of_completion = serializers.DateField(required=False)
    country_to_be_implemented = serializers.CharField(max_length=100, required=False)
    work_documents = serializers.FileField(required=False)
    application_dairy_number = serializers.CharField(max_length=100, required=False)
    date_of_filing_at_po = serializers.DateField(required=False)
    lawyer_reference_number = serializers.CharField(max_length=100, required=False)


# Form field name -> Order field name, per section. Unlisted fields keep their name.
FIELD_RENAMES = {
    CUSTOMER: {
        'order_reference_number': 'customer_reference',
        'type_of_work': 'type',
        'documents_provided': 'customer_documents',
        'invoice_for_customer': 'customer_invoice',
    },
    VENDOR: {
        'onboarding_date': 'vendor_onboarding_date',
        'current_status': 'vendor_status',
        'status_comment': 'vendor_status_comment',
        'status_change_date': 'vendor_status_change_date',
        'work_completion_expected': 'vendor_work_completion_expected',
        'documents_provided': 'vendor_documents',
        'invoice_from_vendor': 'vendor_invoice',
    },
    ORDER: {},
}

SECTION_SERIALIZERS = {
    CUSTOMER: CustomerSectionSerializer,
    VENDOR: VendorSectionSerializer,
    ORDER: OrderSectionSerializer,
}


def flatten_errors(errors):
    """DRF error lists -> one message per field"""
    flat = {}
    for field, messages in errors.items():
        if isinstance(messages, (list, tuple)):
            flat[field] = str(messages[0]) if messages else ''
        elif isinstance(messages, dict):
            flat[field] = str(next(iter(messages.values()), ''))
        else:
            flat[field] = str(messages)
    return flat


def _present(raw):
    """Drop blank values so they count as missing, as the browser form does"""
    present = {}
    for key in raw:
        value = raw.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        present[key] = value
    return present


# Order fields holding a stored upload name
UPLOAD_FIELDS = frozenset(
    field.name for field in Order._meta.concrete_fields if isinstance(field, models.FileField)
)


def discard_uploads(values):
    """Delete the stored files referenced by dropped wizard section values"""
    for field, name in values.items():
        if field in UPLOAD_FIELDS and name:
            default_storage.delete(name)
            logger.info(f"Discarded wizard upload {name}")


def store_upload(upload, order_field):
    """Save an uploaded file under the Order field's upload directory"""
    upload_to = Order._meta.get_field(order_field).upload_to
    stored_name = default_storage.save(f"{upload_to}{upload.name}", upload)
    logger.info(f"Stored wizard upload {stored_name}")
    return stored_name


def to_primitive(value, order_field=None):
    if isinstance(value, models.Model):
        return value.pk
    if isinstance(value, File):
        return store_upload(value, order_field)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def validate_section(section, raw):
    """Run the section serializer; returns ``(cleaned, errors)``"""
    serializer = SECTION_SERIALIZERS[section](data=_present(raw))
    if not serializer.is_valid():
        return {}, flatten_errors(serializer.errors)

    data = dict(serializer.validated_data)
    if section == CUSTOMER and not data.get('order_reference_number'):
        data['order_reference_number'] = generate_customer_reference()
    if section == VENDOR and not data.get('status_change_date'):
        data['status_change_date'] = timezone.localdate()

    renames = FIELD_RENAMES[section]
    cleaned = {}
    for field, value in data.items():
        order_field = renames.get(field, field)
        cleaned[order_field] = to_primitive(value, order_field)

    # Selected party details shown back in the wizard
    if section == CUSTOMER:
        cleaned.update(customer_snapshot(data['customer_id']))
    elif section == VENDOR:
        cleaned.update(vendor_snapshot(data['vendor_id']))
    return cleaned, {}


def section_validators():
    return {section: (lambda raw, section=section: validate_section(section, raw)) for section in SECTION_SERIALIZERS}
