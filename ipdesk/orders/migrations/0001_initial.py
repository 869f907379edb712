# Generated manually
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

TYPE_OF_WORK = [
    ('PATENTS', 'Patents'), ('TRADEMARKS', 'Trademarks'), ('COPYRIGHTS', 'Copyrights'), ('DESIGNS', 'Designs'),
    ('CONSULTANCY', 'Consultancy'), ('AUDIT_SERVICE', 'Audit Service'),
    ('AGREEMENT_DRAFTING', 'Agreement Drafting'), ('OTHERS', 'Others'),
]
VENDOR_STATUS = [
    ('YET_TO_START', 'Yet to start'), ('PENDING_WITH_CLIENT', 'Pending with client'),
    ('PENDING_WITH_VENDOR', 'Pending with vendor'), ('BLOCKED', 'Blocked'), ('COMPLETED', 'Completed'),
]
ORDER_STATUS = [
    ('YET_TO_START', 'Yet to start'), ('IN_PROGRESS', 'In progress'),
    ('PENDING_WITH_CLIENT', 'Pending with client'), ('PENDING_PAYMENT', 'Pending payment'),
    ('COMPLETED', 'Completed'), ('CLOSED', 'Closed'), ('CANCELLED', 'Cancelled'),
]
PRIORITY = [('LOW', 'Low'), ('MEDIUM', 'Medium'), ('HIGH', 'High'), ('URGENT', 'Urgent')]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('parties', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('reference_number', models.CharField(editable=False, max_length=20, unique=True)),
                ('title', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('type', models.CharField(choices=TYPE_OF_WORK, max_length=30)),
                ('status', models.CharField(choices=ORDER_STATUS, default='YET_TO_START', max_length=30)),
                ('priority', models.CharField(choices=PRIORITY, default='MEDIUM', max_length=10)),
                ('country', models.CharField(max_length=100)),
                ('amount', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('paid_amount', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('due_date', models.DateField(blank=True, null=True)),
                ('start_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('completed_date', models.DateTimeField(blank=True, null=True)),
                ('customer_reference', models.CharField(blank=True, max_length=30)),
                ('order_onboarding_date', models.DateField(blank=True, null=True)),
                ('order_friendly_image', models.ImageField(blank=True, upload_to='orders/images/')),
                ('work_completion_date', models.DateField(blank=True, null=True)),
                ('customer_documents', models.FileField(blank=True, upload_to='orders/customer_documents/')),
                ('customer_invoice', models.FileField(blank=True, upload_to='orders/customer_invoices/')),
                ('total_invoice_value', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('total_gst_govt_fees', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('payment_expected_date', models.DateField(blank=True, null=True)),
                ('vendor_onboarding_date', models.DateField(blank=True, null=True)),
                ('vendor_status', models.CharField(blank=True, choices=VENDOR_STATUS, max_length=30)),
                ('vendor_status_comment', models.TextField(blank=True)),
                ('vendor_status_change_date', models.DateField(blank=True, null=True)),
                ('vendor_work_completion_expected', models.DateField(blank=True, null=True)),
                ('vendor_documents', models.FileField(blank=True, upload_to='orders/vendor_documents/')),
                ('vendor_invoice', models.FileField(blank=True, upload_to='orders/vendor_invoices/')),
                ('amount_to_be_paid', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('amount_paid_to_vendor', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('date_of_completion', models.DateField(blank=True, null=True)),
                ('country_to_be_implemented', models.CharField(blank=True, max_length=100)),
                ('work_documents', models.FileField(blank=True, upload_to='orders/work_documents/')),
                ('application_dairy_number', models.CharField(blank=True, max_length=100)),
                ('date_of_filing_at_po', models.DateField(blank=True, null=True)),
                ('lawyer_reference_number', models.CharField(blank=True, max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to='parties.customer')),
                ('vendor', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to='parties.vendor')),
                ('assigned_to', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_orders', to=settings.AUTH_USER_MODEL)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='created_orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='idx_order_status'),
                    models.Index(fields=['type'], name='idx_order_type'),
                    models.Index(fields=['country'], name='idx_order_country'),
                    models.Index(fields=['-created_at'], name='idx_order_created'),
                ],
            },
        ),
    ]
