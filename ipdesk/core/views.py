import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer, TokenRefreshSerializer
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken, TokenError
from django.contrib.auth import get_user_model
from django.core.exceptions import ObjectDoesNotExist
from django.db import connection, DatabaseError
from django.shortcuts import get_object_or_404
from django.utils import timezone
from .models import AuditLog, UserPermission
from .serializers import UserSerializer, UserCreateSerializer, AuditLogSerializer
from .session import require_permission, session_context
from .utils import create_audit_log

User = get_user_model()
logger = logging.getLogger('ipdesk.core')


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    def validate(self, attrs):
        data = super().validate(attrs)
        if not self.user.is_active:
            raise AuthenticationFailed('User account is disabled.')
        data['user'] = UserSerializer(self.user).data
        create_audit_log(
            request=self.context.get('request'),
            user=self.user,
            action='login',
            model_name='User',
            object_id=self.user.pk,
            object_name=self.user.username,
        )
        return data

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token['username'] = user.username
        token['email'] = user.email
        token['role'] = user.role
        token['permissions'] = user.get_app_permissions()
        return token


class CustomTokenObtainPairView(TokenObtainPairView):
    serializer_class = CustomTokenObtainPairSerializer


class CustomTokenRefreshSerializer(TokenRefreshSerializer):
    """Token refresh that reports deleted users as an invalid token"""
    def validate(self, attrs):
        try:
            return super().validate(attrs)
        except (InvalidToken, TokenError):
            raise InvalidToken('Token is invalid or expired.')
        except (ObjectDoesNotExist, User.DoesNotExist):
            raise InvalidToken('Token is invalid. User no longer exists.')


class CustomTokenRefreshView(TokenRefreshView):
    serializer_class = CustomTokenRefreshSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_me(request):
    """Current user with role, permissions and derived access flags"""
    context = session_context(request)
    user_data = UserSerializer(request.user).data
    user_data['is_admin'] = context.is_admin
    user_data['can_access_dashboard'] = context.has_permission(UserPermission.VIEW_ANALYTICS)
    user_data['can_access_reports'] = context.has_permission(UserPermission.VIEW_REPORTS)
    user_data['can_access_customers'] = context.has_permission(UserPermission.MANAGE_CUSTOMERS)
    user_data['can_access_vendors'] = context.has_permission(UserPermission.MANAGE_VENDORS)
    user_data['can_access_orders'] = context.has_permission(UserPermission.MANAGE_ORDERS)
    return Response(user_data)


# User views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_USERS)])
def user_list_create(request):
    """List all users or create a new user"""
    if request.method == 'GET':
        users = User.objects.all().order_by('username')
        role = request.query_params.get('role', None)
        if role:
            users = users.filter(role=role)
        serializer = UserSerializer(users, many=True)
        return Response(serializer.data)
    else:
        serializer = UserCreateSerializer(data=request.data)
        if serializer.is_valid():
            user = serializer.save()
            logger.info(f"User {request.user.username} created user '{user.username}' ({user.role})")
            create_audit_log(request=request, action='create', model_name='User',
                             object_id=user.pk, object_name=user.username)
            return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)
        logger.warning(f"User creation validation failed: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_USERS)])
def user_detail(request, pk):
    """Retrieve, update or delete a user"""
    user = get_object_or_404(User, pk=pk)

    if request.method == 'GET':
        serializer = UserSerializer(user)
        return Response(serializer.data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = UserSerializer(user, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            serializer.save()
            create_audit_log(request=request, action='update', model_name='User',
                             object_id=user.pk, object_name=user.username,
                             changes={k: str(v) for k, v in serializer.validated_data.items()})
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        if user.pk == request.user.pk:
            return Response({'error': 'You cannot delete your own account'}, status=status.HTTP_400_BAD_REQUEST)
        create_audit_log(request=request, action='delete', model_name='User',
                         object_id=user.pk, object_name=user.username)
        user.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


# AuditLog views (read-only)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def audit_log_list(request):
    """List audit logs; non-admins only see their own entries"""
    queryset = AuditLog.objects.select_related('user')

    if not session_context(request).is_admin:
        queryset = queryset.filter(user=request.user)

    action_filter = request.query_params.get('action', None)
    if action_filter:
        queryset = queryset.filter(action=action_filter)

    model_filter = request.query_params.get('model', None)
    if model_filter:
        queryset = queryset.filter(model_name=model_filter)

    date_from = request.query_params.get('date_from', None)
    date_to = request.query_params.get('date_to', None)
    if date_from:
        queryset = queryset.filter(created_at__date__gte=date_from)
    if date_to:
        queryset = queryset.filter(created_at__date__lte=date_to)

    serializer = AuditLogSerializer(queryset.order_by('-created_at'), many=True)
    return Response(serializer.data)


@api_view(['GET'])
@permission_classes([AllowAny])
def health(request):
    """Liveness plus database reachability"""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'connected'
    except DatabaseError as e:
        logger.error(f"Health check database error: {str(e)}", exc_info=True)
        database = 'disconnected'

    healthy = database == 'connected'
    return Response(
        {'status': 'healthy' if healthy else 'unhealthy', 'database': database, 'timestamp': timezone.now()},
        status=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
