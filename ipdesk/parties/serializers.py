from rest_framework import serializers
from ipdesk.locations.serializers import AddressSerializer
from .contacts import (
    StructuredContact, parse_contact_info,
    serialize_contact, serialize_contact_list,
)
from .models import COMPANY_TYPE_INDIVIDUAL, Customer, Vendor


class ContactSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, allow_blank=True, required=False, default='')
    email = serializers.EmailField(allow_blank=True, required=False, default='')
    phone = serializers.CharField(max_length=30, allow_blank=True, required=False, default='')
    country_code = serializers.CharField(max_length=10, allow_blank=True, required=False, default='')
    area_of_expertise = serializers.CharField(max_length=200, allow_blank=True, required=False, default='')


class PartySerializerMixin:
    """Address and company-type rules shared by customers and vendors"""

    def check_address(self, attrs, errors):
        address = AddressSerializer(data={field: self._current(attrs, field) for field in ('country', 'state', 'city')})
        if not address.is_valid():
            errors.update({field: str(messages[0]) for field, messages in address.errors.items()})
        if not self._current(attrs, 'country'):
            errors['country'] = 'Country is required'

    def check_company_type(self, attrs, errors):
        company_type = self._current(attrs, 'company_type')
        if company_type == COMPANY_TYPE_INDIVIDUAL and not self._current(attrs, 'individual_name').strip():
            errors['individual_name'] = 'Individual name is required for Individual company type'
        if company_type and company_type != COMPANY_TYPE_INDIVIDUAL and not self._current(attrs, 'company_name').strip():
            errors['company_name'] = 'Company name is required for non-Individual company types'

    def _current(self, attrs, field):
        """Value after this update: the incoming one, else the stored one"""
        if field in attrs:
            return attrs[field] or ''
        if self.instance is not None:
            return getattr(self.instance, field, '') or ''
        return ''


class CustomerSerializer(PartySerializerMixin, serializers.ModelSerializer):
    point_of_contact = ContactSerializer(required=False, allow_null=True, write_only=True)
    contact_info = serializers.SerializerMethodField()
    company = serializers.CharField(read_only=True)
    order_count = serializers.SerializerMethodField()

    class Meta:
        model = Customer
        fields = [
            'id', 'name', 'company', 'company_type', 'company_name', 'individual_name',
            'email', 'phone', 'address', 'city', 'state', 'country', 'username', 'gst_number',
            'client_onboarding_date', 'dpiit_registered', 'dpiit_valid_till',
            'point_of_contact', 'contact_info', 'order_count', 'is_active', 'created_at', 'updated_at',
        ]
        read_only_fields = ['name', 'created_at', 'updated_at']
        extra_kwargs = {
            'email': {'error_messages': {'required': 'Email is required', 'blank': 'Email is required',
                                         'invalid': 'Email is invalid'}},
            'country': {'required': False, 'allow_blank': True},
        }

    def get_contact_info(self, obj):
        contact = obj.contact_info
        return contact.to_representation() if contact else None

    def get_order_count(self, obj):
        return obj.orders.count()

    def validate(self, attrs):
        errors = {}
        self.check_address(attrs, errors)
        self.check_company_type(attrs, errors)

        if self._current(attrs, 'company_type') == COMPANY_TYPE_INDIVIDUAL:
            if 'point_of_contact' in attrs:
                contact = StructuredContact(**(attrs['point_of_contact'] or {}))
            else:
                contact = parse_contact_info(self.instance.point_of_contact) if self.instance else None
            contact = contact or StructuredContact()
            if not getattr(contact, 'name', '').strip():
                errors['point_of_contact_name'] = 'Point of contact name is required for Individual'
            if not getattr(contact, 'email', '').strip():
                errors['point_of_contact_email'] = 'Point of contact email is required for Individual'
            if not getattr(contact, 'phone', '').strip():
                errors['point_of_contact_phone'] = 'Point of contact phone is required for Individual'

        if not self._current(attrs, 'dpiit_registered') and 'dpiit_valid_till' not in attrs:
            attrs['dpiit_valid_till'] = None

        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def _pack_contact(self, validated_data):
        if 'point_of_contact' in validated_data:
            contact = validated_data.pop('point_of_contact')
            validated_data['point_of_contact'] = serialize_contact(StructuredContact(**contact) if contact else None)
        return validated_data

    def create(self, validated_data):
        return super().create(self._pack_contact(validated_data))

    def update(self, instance, validated_data):
        return super().update(instance, self._pack_contact(validated_data))


class VendorSerializer(PartySerializerMixin, serializers.ModelSerializer):
    points_of_contact = ContactSerializer(many=True, required=False, write_only=True)
    contacts = serializers.SerializerMethodField()
    company = serializers.CharField(read_only=True)
    order_count = serializers.SerializerMethodField()

    class Meta:
        model = Vendor
        fields = [
            'id', 'name', 'company', 'company_type', 'company_name', 'individual_name',
            'email', 'phone', 'address', 'city', 'state', 'country', 'username', 'gst_number',
            'onboarding_date', 'specialization', 'rating',
            'points_of_contact', 'contacts', 'order_count', 'is_active', 'created_at', 'updated_at',
        ]
        read_only_fields = ['name', 'rating', 'created_at', 'updated_at']
        extra_kwargs = {
            'email': {'error_messages': {'required': 'Email is required', 'blank': 'Email is required',
                                         'invalid': 'Email is invalid'}},
            'country': {'required': False, 'allow_blank': True},
        }

    def get_contacts(self, obj):
        return [contact.to_representation() for contact in obj.contacts]

    def get_order_count(self, obj):
        return obj.orders.count()

    def validate(self, attrs):
        errors = {}
        self.check_address(attrs, errors)
        self.check_company_type(attrs, errors)
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def _pack_contacts(self, validated_data):
        if 'points_of_contact' in validated_data:
            contacts = [StructuredContact(**item) for item in validated_data.pop('points_of_contact')]
            validated_data['points_of_contact'] = serialize_contact_list(contacts)
        return validated_data

    def create(self, validated_data):
        return super().create(self._pack_contacts(validated_data))

    def update(self, instance, validated_data):
        return super().update(instance, self._pack_contacts(validated_data))


class VendorRatingSerializer(serializers.Serializer):
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, min_value=0, max_value=5, allow_null=True)


# Used by the order wizard when a customer/vendor is picked
def customer_snapshot(customer):
    return {
        'customer_name': customer.name,
        'customer_email': customer.email,
        'customer_company': customer.company,
        'customer_phone': customer.phone,
        'customer_address': customer.address,
    }


def vendor_snapshot(vendor):
    return {
        'vendor_name': vendor.name,
        'vendor_email': vendor.email,
        'vendor_company': vendor.company,
        'vendor_specialization': vendor.specialization,
        'vendor_phone': vendor.phone,
    }


