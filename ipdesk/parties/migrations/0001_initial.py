# Generated manually
import django.core.validators
from django.db import migrations, models

COMPANY_TYPES = [
    ('Pvt. Limited', 'Pvt. Limited'), ('MSME', 'MSME'), ('Firm', 'Firm'),
    ('Individual', 'Individual'), ('Partnership', 'Partnership'), ('LLP', 'LLP'),
]


def party_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('name', models.CharField(max_length=200)),
        ('company_type', models.CharField(blank=True, choices=COMPANY_TYPES, max_length=20)),
        ('company_name', models.CharField(blank=True, max_length=200)),
        ('individual_name', models.CharField(blank=True, max_length=200)),
        ('email', models.EmailField(max_length=254, unique=True)),
        ('phone', models.CharField(blank=True, max_length=20)),
        ('address', models.TextField(blank=True)),
        ('city', models.CharField(blank=True, max_length=100)),
        ('state', models.CharField(blank=True, max_length=100)),
        ('country', models.CharField(max_length=100)),
        ('username', models.CharField(blank=True, max_length=150)),
        ('gst_number', models.CharField(blank=True, max_length=20)),
        ('is_active', models.BooleanField(default=True)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=party_fields() + [
                ('client_onboarding_date', models.DateField(blank=True, null=True)),
                ('dpiit_registered', models.BooleanField(default=False)),
                ('dpiit_valid_till', models.DateField(blank=True, null=True)),
                ('point_of_contact', models.TextField(blank=True)),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['country'], name='idx_customer_country'),
                    models.Index(fields=['is_active', '-created_at'], name='idx_customer_active_created'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Vendor',
            fields=party_fields() + [
                ('onboarding_date', models.DateField(blank=True, null=True)),
                ('specialization', models.CharField(blank=True, max_length=200)),
                ('rating', models.DecimalField(blank=True, decimal_places=1, max_digits=2, null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ('points_of_contact', models.TextField(blank=True)),
            ],
            options={
                'db_table': 'vendors',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['country'], name='idx_vendor_country'),
                    models.Index(fields=['is_active', '-created_at'], name='idx_vendor_active_created'),
                ],
            },
        ),
    ]
