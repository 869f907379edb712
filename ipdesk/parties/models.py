from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from .contacts import parse_contact_info, parse_contact_list

COMPANY_TYPE_INDIVIDUAL = 'Individual'
COMPANY_TYPE_CHOICES = [
    ('Pvt. Limited', 'Pvt. Limited'),
    ('MSME', 'MSME'),
    ('Firm', 'Firm'),
    (COMPANY_TYPE_INDIVIDUAL, 'Individual'),
    ('Partnership', 'Partnership'),
    ('LLP', 'LLP'),
]


class Party(models.Model):
    """Fields shared by customers and vendors"""
    name = models.CharField(max_length=200)
    company_type = models.CharField(max_length=20, choices=COMPANY_TYPE_CHOICES, blank=True)
    company_name = models.CharField(max_length=200, blank=True)
    individual_name = models.CharField(max_length=200, blank=True)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=20, blank=True)
    address = models.TextField(blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100)
    username = models.CharField(max_length=150, blank=True)
    gst_number = models.CharField(max_length=20, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name

    @property
    def company(self):
        return self.company_name or self.individual_name or 'Unknown'

    def save(self, *args, **kwargs):
        if self.company_type == COMPANY_TYPE_INDIVIDUAL:
            self.name = self.individual_name or self.company_name or self.email
        else:
            self.name = self.company_name or self.individual_name or self.email
        super().save(*args, **kwargs)

    class Meta:
        abstract = True


class Customer(Party):
    """Clients placing IP work orders"""
    client_onboarding_date = models.DateField(null=True, blank=True)
    dpiit_registered = models.BooleanField(default=False)
    dpiit_valid_till = models.DateField(null=True, blank=True)
    # Serialized point of contact, see contacts.parse_contact_info
    point_of_contact = models.TextField(blank=True)

    @property
    def contact_info(self):
        return parse_contact_info(self.point_of_contact)

    class Meta:
        db_table = 'customers'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['country'], name='idx_customer_country'),
            models.Index(fields=['is_active', '-created_at'], name='idx_customer_active_created'),
        ]


class Vendor(Party):
    """Agents and law firms that carry out the work"""
    onboarding_date = models.DateField(null=True, blank=True)
    specialization = models.CharField(max_length=200, blank=True)
    rating = models.DecimalField(
        max_digits=2, decimal_places=1, null=True, blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    # Serialized list of points of contact, see contacts.parse_contact_list
    points_of_contact = models.TextField(blank=True)

    @property
    def contacts(self):
        return parse_contact_list(self.points_of_contact)

    class Meta:
        db_table = 'vendors'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['country'], name='idx_vendor_country'),
            models.Index(fields=['is_active', '-created_at'], name='idx_vendor_active_created'),
        ]
