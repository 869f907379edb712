from rest_framework import serializers
from .models import Order, TypeOfWork, code_from_name


def check_type_of_work(value):
    """Field validator: ``value`` must be the code of an active TypeOfWork"""
    if not TypeOfWork.is_active_code(value):
        raise serializers.ValidationError('Select an active type of work')
    return value


class TypeOfWorkSerializer(serializers.ModelSerializer):
    created_by_name = serializers.SerializerMethodField()
    name = serializers.CharField(max_length=100, error_messages={'required': 'Name is required',
                                                                 'blank': 'Name is required'})
    code = serializers.CharField(max_length=30, required=False, allow_blank=True)

    class Meta:
        model = TypeOfWork
        fields = ['id', 'code', 'name', 'description', 'is_active', 'created_by', 'created_by_name',
                  'created_at', 'updated_at']
        read_only_fields = ['created_by', 'created_at', 'updated_at']

    def get_created_by_name(self, obj):
        if obj.created_by is None:
            return None
        return obj.created_by.get_full_name() or obj.created_by.username

    def _others(self):
        queryset = TypeOfWork.objects.all()
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        return queryset

    def validate_name(self, value):
        value = value.strip()
        if self._others().filter(name__iexact=value).exists():
            raise serializers.ValidationError('Type of work with this name already exists')
        return value

    def validate(self, attrs):
        # Codes are stored on orders, so an existing code never changes
        if self.instance is not None:
            attrs.pop('code', None)
            return attrs
        code = code_from_name(attrs.get('code') or attrs.get('name'))
        if not code:
            raise serializers.ValidationError({'code': 'Code must contain letters or digits'})
        if self._others().filter(code=code).exists():
            raise serializers.ValidationError({'code': 'Type of work with this code already exists'})
        attrs['code'] = code
        return attrs


class TypeOfWorkStatusSerializer(serializers.Serializer):
    is_active = serializers.BooleanField(error_messages={'required': 'is_active is required',
                                                         'invalid': 'is_active must be a boolean'})


class OrderSerializer(serializers.ModelSerializer):
    customer_name = serializers.CharField(source='customer.name', read_only=True)
    customer_company = serializers.CharField(source='customer.company', read_only=True)
    vendor_name = serializers.CharField(source='vendor.name', read_only=True)
    vendor_company = serializers.CharField(source='vendor.company', read_only=True)
    assigned_to_name = serializers.SerializerMethodField()
    balance_due = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'reference_number', 'title', 'description', 'type', 'status', 'priority',
            'customer', 'customer_name', 'customer_company', 'vendor', 'vendor_name', 'vendor_company',
            'assigned_to', 'assigned_to_name', 'country', 'amount', 'paid_amount', 'balance_due',
            'due_date', 'start_date', 'completed_date',
            'customer_reference', 'order_onboarding_date', 'order_friendly_image', 'work_completion_date',
            'customer_documents', 'customer_invoice', 'total_invoice_value', 'total_gst_govt_fees',
            'payment_expected_date',
            'vendor_onboarding_date', 'vendor_status', 'vendor_status_comment', 'vendor_status_change_date',
            'vendor_work_completion_expected', 'vendor_documents', 'vendor_invoice',
            'amount_to_be_paid', 'amount_paid_to_vendor',
            'date_of_completion', 'country_to_be_implemented', 'work_documents', 'application_dairy_number',
            'date_of_filing_at_po', 'lawyer_reference_number',
            'created_at', 'updated_at',
        ]
        read_only_fields = [
            'reference_number', 'start_date', 'completed_date', 'order_friendly_image',
            'customer_documents', 'customer_invoice', 'vendor_documents', 'vendor_invoice', 'work_documents',
            'created_at', 'updated_at',
        ]

    def get_assigned_to_name(self, obj):
        if obj.assigned_to is None:
            return None
        return obj.assigned_to.get_full_name() or obj.assigned_to.username


class OrderCreateSerializer(serializers.ModelSerializer):
    """Direct creation; every listed field is required"""
    title = serializers.CharField(max_length=255, error_messages={'required': 'Title is required', 'blank': 'Title is required'})
    type = serializers.CharField(max_length=30, validators=[check_type_of_work],
                                 error_messages={'required': 'Type is required', 'blank': 'Type is required'})
    country = serializers.CharField(max_length=100, error_messages={'required': 'Country is required', 'blank': 'Country is required'})
    priority = serializers.ChoiceField(choices=Order.PRIORITY_CHOICES, error_messages={'required': 'Priority is required'})
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0,
                                      error_messages={'required': 'Amount is required'})

    class Meta:
        model = Order
        fields = ['title', 'description', 'type', 'customer', 'vendor', 'assigned_to', 'country',
                  'priority', 'amount', 'due_date']
        extra_kwargs = {
            'customer': {'required': True, 'allow_null': False},
            'vendor': {'required': True, 'allow_null': False},
        }


class OrderUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = ['title', 'description', 'type', 'status', 'priority', 'country', 'amount', 'paid_amount',
                  'due_date', 'assigned_to',
                  'vendor_status', 'vendor_status_comment', 'vendor_status_change_date',
                  'date_of_completion', 'country_to_be_implemented', 'application_dairy_number',
                  'date_of_filing_at_po', 'lawyer_reference_number']

    def validate_type(self, value):
        # An order may keep a type that has since been deactivated
        if self.instance is not None and value == self.instance.type:
            return value
        return check_type_of_work(value)

    def validate(self, attrs):
        amount = attrs.get('amount', self.instance.amount if self.instance else None)
        paid_amount = attrs.get('paid_amount', self.instance.paid_amount if self.instance else None)
        if amount is not None and paid_amount is not None and paid_amount > amount:
            raise serializers.ValidationError({'paid_amount': 'Paid amount cannot exceed the order amount'})
        return attrs
