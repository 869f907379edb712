import re
from django.conf import settings
from django.db import models
from django.utils import timezone

# Seeded by migration 0002; managed afterwards through /type-of-work/
DEFAULT_TYPES_OF_WORK = [
    ('PATENTS', 'Patents'),
    ('TRADEMARKS', 'Trademarks'),
    ('COPYRIGHTS', 'Copyrights'),
    ('DESIGNS', 'Designs'),
    ('CONSULTANCY', 'Consultancy'),
    ('AUDIT_SERVICE', 'Audit Service'),
    ('AGREEMENT_DRAFTING', 'Agreement Drafting'),
    ('OTHERS', 'Others'),
]

VENDOR_STATUS_CHOICES = [
    ('YET_TO_START', 'Yet to start'),
    ('PENDING_WITH_CLIENT', 'Pending with client'),
    ('PENDING_WITH_VENDOR', 'Pending with vendor'),
    ('BLOCKED', 'Blocked'),
    ('COMPLETED', 'Completed'),
]


def code_from_name(name):
    """'Audit Service' -> 'AUDIT_SERVICE'"""
    return re.sub(r'[^A-Z0-9]+', '_', (name or '').upper()).strip('_')


class TypeOfWork(models.Model):
    """
    Kind of IP work an order can be raised for.

    Orders store the ``code``; only active entries are offered when an order
    is created or edited, so deactivating a type never touches past orders.
    """
    code = models.CharField(max_length=30, unique=True)
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name='types_of_work')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.code:
            self.code = code_from_name(self.name)
        super().save(*args, **kwargs)

    @classmethod
    def is_active_code(cls, code):
        return bool(code) and cls.objects.filter(code=code, is_active=True).exists()

    @classmethod
    def names_by_code(cls):
        return dict(cls.objects.values_list('code', 'name'))

    @classmethod
    def display_name(cls, code):
        """Name for ``code``, falling back to the code itself"""
        return cls.objects.filter(code=code).values_list('name', flat=True).first() or code

    class Meta:
        db_table = 'types_of_work'
        ordering = ['-created_at']


class Order(models.Model):
    """An IP work order linking a customer to the vendor doing the work"""
    STATUS_YET_TO_START = 'YET_TO_START'
    STATUS_IN_PROGRESS = 'IN_PROGRESS'
    STATUS_PENDING_WITH_CLIENT = 'PENDING_WITH_CLIENT'
    STATUS_PENDING_PAYMENT = 'PENDING_PAYMENT'
    STATUS_COMPLETED = 'COMPLETED'
    STATUS_CLOSED = 'CLOSED'
    STATUS_CANCELLED = 'CANCELLED'

    STATUS_CHOICES = [
        (STATUS_YET_TO_START, 'Yet to start'),
        (STATUS_IN_PROGRESS, 'In progress'),
        (STATUS_PENDING_WITH_CLIENT, 'Pending with client'),
        (STATUS_PENDING_PAYMENT, 'Pending payment'),
        (STATUS_COMPLETED, 'Completed'),
        (STATUS_CLOSED, 'Closed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]
    # Statuses listed as pending work on the dashboard
    PENDING_STATUSES = [STATUS_YET_TO_START, STATUS_IN_PROGRESS, STATUS_PENDING_WITH_CLIENT, STATUS_PENDING_PAYMENT]

    PRIORITY_CHOICES = [
        ('LOW', 'Low'),
        ('MEDIUM', 'Medium'),
        ('HIGH', 'High'),
        ('URGENT', 'Urgent'),
    ]

    reference_number = models.CharField(max_length=20, unique=True, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    # TypeOfWork.code
    type = models.CharField(max_length=30)
    status = models.CharField(max_length=30, choices=STATUS_CHOICES, default=STATUS_YET_TO_START)
    priority = models.CharField(max_length=10, choices=PRIORITY_CHOICES, default='MEDIUM')
    customer = models.ForeignKey('parties.Customer', on_delete=models.CASCADE, related_name='orders')
    vendor = models.ForeignKey('parties.Vendor', on_delete=models.CASCADE, related_name='orders')
    assigned_to = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
                                    related_name='assigned_orders')
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name='created_orders')
    country = models.CharField(max_length=100)
    amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    paid_amount = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    due_date = models.DateField(null=True, blank=True)
    start_date = models.DateTimeField(default=timezone.now)
    completed_date = models.DateTimeField(null=True, blank=True)

    # Customer section of the order wizard
    customer_reference = models.CharField(max_length=30, blank=True)
    order_onboarding_date = models.DateField(null=True, blank=True)
    order_friendly_image = models.ImageField(upload_to='orders/images/', blank=True)
    work_completion_date = models.DateField(null=True, blank=True)
    customer_documents = models.FileField(upload_to='orders/customer_documents/', blank=True)
    customer_invoice = models.FileField(upload_to='orders/customer_invoices/', blank=True)
    total_invoice_value = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    total_gst_govt_fees = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    payment_expected_date = models.DateField(null=True, blank=True)

    # Vendor section
    vendor_onboarding_date = models.DateField(null=True, blank=True)
    vendor_status = models.CharField(max_length=30, choices=VENDOR_STATUS_CHOICES, blank=True)
    vendor_status_comment = models.TextField(blank=True)
    vendor_status_change_date = models.DateField(null=True, blank=True)
    vendor_work_completion_expected = models.DateField(null=True, blank=True)
    vendor_documents = models.FileField(upload_to='orders/vendor_documents/', blank=True)
    vendor_invoice = models.FileField(upload_to='orders/vendor_invoices/', blank=True)
    amount_to_be_paid = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    amount_paid_to_vendor = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    # Order section: filing details
    date_of_completion = models.DateField(null=True, blank=True)
    country_to_be_implemented = models.CharField(max_length=100, blank=True)
    work_documents = models.FileField(upload_to='orders/work_documents/', blank=True)
    application_dairy_number = models.CharField(max_length=100, blank=True)
    date_of_filing_at_po = models.DateField(null=True, blank=True)
    lawyer_reference_number = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.reference_number} - {self.title}"

    @property
    def balance_due(self):
        return self.amount - self.paid_amount

    @classmethod
    def next_reference_number(cls, year=None):
        """IP-<year>-<NNN>, numbered per year"""
        year = year or timezone.now().year
        prefix = f"IP-{year}-"
        sequence = 0
        for reference in cls.objects.filter(reference_number__startswith=prefix).values_list('reference_number', flat=True):
            suffix = reference[len(prefix):]
            if suffix.isdigit():
                sequence = max(sequence, int(suffix))
        return f"{prefix}{sequence + 1:03d}"

    def save(self, *args, **kwargs):
        if not self.reference_number:
            self.reference_number = self.next_reference_number()
        if self.status == self.STATUS_COMPLETED and self.completed_date is None:
            self.completed_date = timezone.now()
        super().save(*args, **kwargs)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='idx_order_status'),
            models.Index(fields=['type'], name='idx_order_type'),
            models.Index(fields=['country'], name='idx_order_country'),
            models.Index(fields=['-created_at'], name='idx_order_created'),
        ]
