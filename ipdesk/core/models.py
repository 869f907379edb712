from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Back-office staff account; access is driven by role and app permissions"""
    ROLE_ADMIN = 'ADMIN'
    ROLE_SUB_ADMIN = 'SUB_ADMIN'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_SUB_ADMIN, 'Sub Admin'),
    ]

    phone = models.CharField(max_length=20, blank=True, null=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_SUB_ADMIN)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def get_app_permissions(self):
        """Application permission codes granted to this user"""
        return sorted(self.app_permissions.values_list('permission', flat=True))

    def grant_default_permissions(self):
        """Grant the default permission set of the user's role"""
        for code in UserPermission.DEFAULTS_BY_ROLE.get(self.role, []):
            UserPermission.objects.get_or_create(user=self, permission=code)

    class Meta:
        db_table = 'users'


class UserPermission(models.Model):
    """Application permission granted to a user"""
    MANAGE_USERS = 'MANAGE_USERS'
    MANAGE_CUSTOMERS = 'MANAGE_CUSTOMERS'
    MANAGE_VENDORS = 'MANAGE_VENDORS'
    MANAGE_ORDERS = 'MANAGE_ORDERS'
    VIEW_ANALYTICS = 'VIEW_ANALYTICS'
    MANAGE_PAYMENTS = 'MANAGE_PAYMENTS'
    VIEW_REPORTS = 'VIEW_REPORTS'
    PERMISSION_CHOICES = [
        (MANAGE_USERS, 'Manage users'),
        (MANAGE_CUSTOMERS, 'Manage customers'),
        (MANAGE_VENDORS, 'Manage vendors'),
        (MANAGE_ORDERS, 'Manage orders'),
        (VIEW_ANALYTICS, 'View analytics'),
        (MANAGE_PAYMENTS, 'Manage payments'),
        (VIEW_REPORTS, 'View reports'),
    ]
    DEFAULTS_BY_ROLE = {
        User.ROLE_ADMIN: [code for code, _ in PERMISSION_CHOICES],
        User.ROLE_SUB_ADMIN: [MANAGE_CUSTOMERS, MANAGE_ORDERS, VIEW_ANALYTICS],
    }

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='app_permissions')
    permission = models.CharField(max_length=50, choices=PERMISSION_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user.username} - {self.permission}"

    class Meta:
        db_table = 'user_permissions'
        unique_together = ('user', 'permission')


class AuditLog(models.Model):
    """Audit log for back-office changes"""
    ACTION_CHOICES = [
        ('create', 'Create'),
        ('update', 'Update'),
        ('delete', 'Delete'),
        ('login', 'Login'),
        ('order_create', 'Order Created'),
        ('order_update', 'Order Updated'),
        ('order_status_change', 'Order Status Changed'),
        ('vendor_rating', 'Vendor Rated'),
    ]

    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, related_name='audit_logs')
    action = models.CharField(max_length=50, choices=ACTION_CHOICES)
    model_name = models.CharField(max_length=100)
    object_id = models.CharField(max_length=100)
    object_name = models.CharField(max_length=255, blank=True, null=True, help_text="Human-readable name of the object (e.g., customer name, order title)")
    object_reference = models.CharField(max_length=255, blank=True, null=True, help_text="Reference identifier (e.g., order reference number)")
    changes = models.JSONField(default=dict, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['-created_at'], name='idx_audit_created'),
            models.Index(fields=['action'], name='idx_audit_action'),
            models.Index(fields=['model_name'], name='idx_audit_model'),
            models.Index(fields=['object_reference'], name='idx_audit_reference'),
        ]
