import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.db import DatabaseError
from django.shortcuts import get_object_or_404
from django.utils import timezone
from ipdesk.core.models import UserPermission
from ipdesk.core.session import require_permission
from ipdesk.core.utils import create_audit_log
from .filters import OrderFilter
from .models import Order, TypeOfWork
from .sections import discard_uploads, section_validators
from .serializers import (
    OrderSerializer, OrderCreateSerializer, OrderUpdateSerializer, TypeOfWorkSerializer, TypeOfWorkStatusSerializer,
)
from .services import create_order_from_payload
from .wizard import OrderWizard, UnknownSection

logger = logging.getLogger('ipdesk.orders')

CanManageOrders = require_permission(UserPermission.MANAGE_ORDERS, allow_read=True)


def _order_queryset():
    return Order.objects.select_related('customer', 'vendor', 'assigned_to')


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, CanManageOrders])
def order_list_create(request):
    """List orders (search/status/type filters) or create one directly"""
    if request.method == 'GET':
        filterset = OrderFilter(request.query_params, queryset=_order_queryset())
        if not filterset.is_valid():
            return Response(filterset.errors, status=status.HTTP_400_BAD_REQUEST)
        serializer = OrderSerializer(filterset.qs, many=True)
        return Response(serializer.data)

    serializer = OrderCreateSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Order validation failed: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    assigned_to = serializer.validated_data.get('assigned_to') or request.user
    order = serializer.save(created_by=request.user, assigned_to=assigned_to)
    logger.info(f"User {request.user.username} created order {order.reference_number}")
    create_audit_log(request=request, action='order_create', model_name='Order',
                     object_id=order.pk, object_name=order.title, object_reference=order.reference_number)
    return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def order_detail(request, pk):
    order = get_object_or_404(_order_queryset(), pk=pk)
    return Response(OrderSerializer(order).data)


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_ORDERS)])
def order_edit(request, pk):
    """Update an order; moving it to COMPLETED stamps the completion date"""
    order = get_object_or_404(_order_queryset(), pk=pk)
    previous_status = order.status
    serializer = OrderUpdateSerializer(order, data=request.data, partial=request.method == 'PATCH')
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    new_status = serializer.validated_data.get('status', previous_status)
    extra = {}
    if new_status == Order.STATUS_COMPLETED and previous_status != Order.STATUS_COMPLETED:
        extra['completed_date'] = timezone.now()
    order = serializer.save(**extra)

    changes = {k: str(v) for k, v in serializer.validated_data.items()}
    if new_status != previous_status:
        changes['status'] = {'old': previous_status, 'new': new_status}
        action = 'order_status_change'
        logger.info(f"Order {order.reference_number} moved {previous_status} -> {new_status}")
    else:
        action = 'order_update'
    create_audit_log(request=request, action=action, model_name='Order', object_id=order.pk,
                     object_name=order.title, object_reference=order.reference_number, changes=changes)
    return Response(OrderSerializer(order).data)


# Type of work views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, CanManageOrders])
def type_of_work_list_create(request):
    """List types of work (?active=true for the selectable ones) or create one"""
    if request.method == 'GET':
        queryset = TypeOfWork.objects.select_related('created_by')
        if request.query_params.get('active', '').lower() in ('1', 'true', 'yes'):
            queryset = queryset.filter(is_active=True)
        return Response(TypeOfWorkSerializer(queryset, many=True).data)

    serializer = TypeOfWorkSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Type of work validation failed: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    type_of_work = serializer.save(created_by=request.user)
    logger.info(f"User {request.user.username} created type of work '{type_of_work.code}'")
    create_audit_log(request=request, action='create', model_name='TypeOfWork',
                     object_id=type_of_work.pk, object_name=type_of_work.name)
    return Response(TypeOfWorkSerializer(type_of_work).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, CanManageOrders])
def type_of_work_detail(request, pk):
    """Retrieve, update or delete a type of work; one used by orders can only be deactivated"""
    type_of_work = get_object_or_404(TypeOfWork.objects.select_related('created_by'), pk=pk)

    if request.method == 'GET':
        return Response(TypeOfWorkSerializer(type_of_work).data)

    if request.method in ('PUT', 'PATCH'):
        serializer = TypeOfWorkSerializer(type_of_work, data=request.data, partial=request.method == 'PATCH')
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        serializer.save()
        create_audit_log(request=request, action='update', model_name='TypeOfWork',
                         object_id=type_of_work.pk, object_name=type_of_work.name,
                         changes={k: str(v) for k, v in serializer.validated_data.items()})
        return Response(serializer.data)

    order_count = Order.objects.filter(type=type_of_work.code).count()
    if order_count:
        return Response(
            {'error': f'Type of work is used by {order_count} order(s); deactivate it instead'},
            status=status.HTTP_400_BAD_REQUEST,
        )
    create_audit_log(request=request, action='delete', model_name='TypeOfWork',
                     object_id=type_of_work.pk, object_name=type_of_work.name)
    type_of_work.delete()
    logger.info(f"User {request.user.username} deleted type of work '{type_of_work.code}'")
    return Response({'message': 'Type of work deleted successfully'})


@api_view(['PATCH'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_ORDERS)])
def type_of_work_toggle_status(request, pk):
    """Activate or deactivate a type of work with {"is_active": bool}"""
    type_of_work = get_object_or_404(TypeOfWork, pk=pk)
    serializer = TypeOfWorkStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    is_active = serializer.validated_data['is_active']
    type_of_work.is_active = is_active
    type_of_work.save(update_fields=['is_active', 'updated_at'])
    create_audit_log(request=request, action='update', model_name='TypeOfWork',
                     object_id=type_of_work.pk, object_name=type_of_work.name,
                     changes={'is_active': str(is_active)})
    return Response({
        'message': f"Type of work {'activated' if is_active else 'deactivated'} successfully",
        'type_of_work': TypeOfWorkSerializer(type_of_work).data,
    })


# Order wizard views. State lives in the user's session.

def _wizard_session_key(request):
    return f"order_wizard:{request.user.pk}"


def _load_wizard(request):
    return OrderWizard.from_dict(request.session.get(_wizard_session_key(request)), section_validators(),
                                 discard=discard_uploads)


def _save_wizard(request, wizard):
    request.session[_wizard_session_key(request)] = wizard.to_dict()


def _wizard_state(wizard):
    state = wizard.to_dict()
    state['can_submit'] = wizard.can_submit()
    state['missing_sections'] = wizard.missing_sections()
    return state


def _unknown_section(exc):
    return Response({'error': str(exc)}, status=status.HTTP_404_NOT_FOUND)


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_ORDERS)])
def wizard_state(request):
    """Current wizard state, or reset it with DELETE"""
    wizard = _load_wizard(request)
    if request.method == 'DELETE':
        wizard.reset()
        _save_wizard(request, wizard)
        logger.info(f"User {request.user.username} reset the order wizard")
    return Response(_wizard_state(wizard))


@api_view(['POST'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_ORDERS)])
def wizard_select(request, section):
    wizard = _load_wizard(request)
    try:
        wizard.select_section(section)
    except UnknownSection as e:
        return _unknown_section(e)
    _save_wizard(request, wizard)
    return Response(_wizard_state(wizard))


@api_view(['POST'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_ORDERS)])
def wizard_complete(request, section):
    """Validate one section; accepts multipart (file uploads) or JSON"""
    wizard = _load_wizard(request)
    try:
        errors = wizard.complete_section(section, request.data)
    except UnknownSection as e:
        return _unknown_section(e)
    _save_wizard(request, wizard)

    state = _wizard_state(wizard)
    if errors:
        # Keys are the snake_case form field names, e.g. 'type_of_work'
        logger.warning(f"Order wizard section '{section}' invalid: {sorted(errors)}")
        return Response({'errors': errors, 'wizard': state}, status=status.HTTP_400_BAD_REQUEST)
    return Response({'errors': {}, 'wizard': state})


@api_view(['POST'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_ORDERS)])
def wizard_submit(request):
    """Create the order once all three sections are complete"""
    wizard = _load_wizard(request)
    if not wizard.can_submit():
        return Response(
            {'error': 'Complete all sections before submitting',
             'missing_sections': wizard.missing_sections()},
            status=status.HTTP_409_CONFLICT,
        )

    try:
        order = wizard.submit(lambda payload: create_order_from_payload(payload, user=request.user))
    except ValidationError as e:
        return Response(e.detail, status=status.HTTP_400_BAD_REQUEST)
    except DatabaseError as e:
        logger.error(f"Order wizard submit failed: {str(e)}", exc_info=True)
        return Response({'error': 'Failed to create order'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    create_audit_log(request=request, action='order_create', model_name='Order',
                     object_id=order.pk, object_name=order.title, object_reference=order.reference_number)
    # The form closes after a successful submit; its uploads now belong to the order
    wizard.reset(discard=False)
    _save_wizard(request, wizard)
    return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
