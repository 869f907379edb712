# Generated manually
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

DEFAULT_TYPES_OF_WORK = [
    ('PATENTS', 'Patents'), ('TRADEMARKS', 'Trademarks'), ('COPYRIGHTS', 'Copyrights'), ('DESIGNS', 'Designs'),
    ('CONSULTANCY', 'Consultancy'), ('AUDIT_SERVICE', 'Audit Service'),
    ('AGREEMENT_DRAFTING', 'Agreement Drafting'), ('OTHERS', 'Others'),
]


def seed_types_of_work(apps, schema_editor):
    TypeOfWork = apps.get_model('orders', 'TypeOfWork')
    for code, name in DEFAULT_TYPES_OF_WORK:
        TypeOfWork.objects.get_or_create(code=code, defaults={'name': name})


def remove_seeded_types(apps, schema_editor):
    TypeOfWork = apps.get_model('orders', 'TypeOfWork')
    TypeOfWork.objects.filter(code__in=[code for code, _ in DEFAULT_TYPES_OF_WORK]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('orders', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TypeOfWork',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=30, unique=True)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('description', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL,
                                                 related_name='types_of_work', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'types_of_work',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AlterField(
            model_name='order',
            name='type',
            field=models.CharField(max_length=30),
        ),
        migrations.RunPython(seed_types_of_work, remove_seeded_types),
    ]
