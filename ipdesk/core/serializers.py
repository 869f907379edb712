from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, UserPermission, AuditLog


class UserSerializer(serializers.ModelSerializer):
    permissions = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'first_name', 'last_name', 'phone', 'role', 'permissions',
                  'is_active', 'is_staff', 'is_superuser', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']

    def get_permissions(self, obj):
        return obj.get_app_permissions()


class UserCreateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, validators=[validate_password])
    password_confirm = serializers.CharField(write_only=True)
    permissions = serializers.ListField(
        child=serializers.ChoiceField(choices=UserPermission.PERMISSION_CHOICES),
        required=False,
        write_only=True,
    )

    class Meta:
        model = User
        fields = ['username', 'email', 'password', 'password_confirm', 'first_name', 'last_name', 'phone',
                  'role', 'permissions']

    def validate(self, attrs):
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({"password": "Passwords don't match"})
        return attrs

    def create(self, validated_data):
        validated_data.pop('password_confirm')
        password = validated_data.pop('password')
        permissions = validated_data.pop('permissions', None)
        user = User.objects.create(**validated_data, is_active=True)
        user.set_password(password)
        user.save()
        if permissions is None:
            user.grant_default_permissions()
        else:
            for code in set(permissions):
                UserPermission.objects.create(user=user, permission=code)
        return user


class AuditLogSerializer(serializers.ModelSerializer):
    user = UserSerializer(read_only=True)

    class Meta:
        model = AuditLog
        fields = ['id', 'user', 'action', 'model_name', 'object_id', 'object_name',
                  'object_reference', 'changes', 'ip_address', 'created_at']
