import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django.core.cache import cache
from django.db import IntegrityError
from django.db.models import Q
from django.shortcuts import get_object_or_404
from ipdesk.core.model_cache import (
    get_customer_list_cache_key, get_vendor_list_cache_key,
    CUSTOMER_LIST_CACHE_TTL, VENDOR_LIST_CACHE_TTL,
)
from ipdesk.core.models import UserPermission
from ipdesk.core.session import require_permission
from ipdesk.core.utils import create_audit_log
from .models import Customer, Vendor
from .serializers import CustomerSerializer, VendorSerializer, VendorRatingSerializer

logger = logging.getLogger('ipdesk.parties')

CanManageCustomers = require_permission(UserPermission.MANAGE_CUSTOMERS, allow_read=True)
CanManageVendors = require_permission(UserPermission.MANAGE_VENDORS, allow_read=True)


def _filtered_parties(model, request):
    queryset = model.objects.filter(is_active=True).order_by('-created_at')
    search = request.query_params.get('search', '')
    country = request.query_params.get('country', '')
    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) | Q(email__icontains=search) |
            Q(company_name__icontains=search) | Q(individual_name__icontains=search)
        )
    if country:
        queryset = queryset.filter(country=country)
    return queryset, search, country


def _duplicate_email_response(exc, kind):
    logger.warning(f"Duplicate {kind} email rejected: {str(exc)}")
    return Response({'email': f'A {kind} with this email already exists'}, status=status.HTTP_400_BAD_REQUEST)


# Customer views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, CanManageCustomers])
def customer_list_create(request):
    """List active customers or create a new customer"""
    if request.method == 'GET':
        queryset, search, country = _filtered_parties(Customer, request)

        # Try cache first
        cache_key = get_customer_list_cache_key(search, country)
        cached_data = cache.get(cache_key)
        if cached_data is not None:
            response = Response(cached_data)
            response['Cache-Control'] = 'private, max-age=300'
            return response

        response_data = CustomerSerializer(queryset, many=True).data
        cache.set(cache_key, response_data, CUSTOMER_LIST_CACHE_TTL)
        response = Response(response_data)
        response['Cache-Control'] = 'private, max-age=300'
        return response
    else:
        serializer = CustomerSerializer(data=request.data)
        if serializer.is_valid():
            try:
                customer = serializer.save()
            except IntegrityError as e:
                return _duplicate_email_response(e, 'customer')
            logger.info(f"User {request.user.username} created customer '{customer.name}'")
            create_audit_log(request=request, action='create', model_name='Customer',
                             object_id=customer.pk, object_name=customer.name)
            return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)
        logger.warning(f"Customer validation failed: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, CanManageCustomers])
def customer_detail(request, pk):
    """Retrieve, update or delete a customer"""
    customer = get_object_or_404(Customer, pk=pk)

    if request.method == 'GET':
        serializer = CustomerSerializer(customer)
        return Response(serializer.data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = CustomerSerializer(customer, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            try:
                serializer.save()
            except IntegrityError as e:
                return _duplicate_email_response(e, 'customer')
            create_audit_log(request=request, action='update', model_name='Customer',
                             object_id=customer.pk, object_name=customer.name,
                             changes={k: str(v) for k, v in serializer.validated_data.items()})
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        # Orders belonging to the customer go with it
        order_count = customer.orders.count()
        create_audit_log(request=request, action='delete', model_name='Customer',
                         object_id=customer.pk, object_name=customer.name,
                         changes={'deleted_orders': order_count})
        logger.info(f"User {request.user.username} deleted customer '{customer.name}' "
                    f"and {order_count} related orders")
        customer.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


# Vendor views
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated, CanManageVendors])
def vendor_list_create(request):
    """List active vendors or create a new vendor"""
    if request.method == 'GET':
        queryset, search, country = _filtered_parties(Vendor, request)

        cache_key = get_vendor_list_cache_key(search, country)
        cached_data = cache.get(cache_key)
        if cached_data is not None:
            response = Response(cached_data)
            response['Cache-Control'] = 'private, max-age=300'
            return response

        response_data = VendorSerializer(queryset, many=True).data
        cache.set(cache_key, response_data, VENDOR_LIST_CACHE_TTL)
        response = Response(response_data)
        response['Cache-Control'] = 'private, max-age=300'
        return response
    else:
        serializer = VendorSerializer(data=request.data)
        if serializer.is_valid():
            try:
                vendor = serializer.save()
            except IntegrityError as e:
                return _duplicate_email_response(e, 'vendor')
            logger.info(f"User {request.user.username} created vendor '{vendor.name}'")
            create_audit_log(request=request, action='create', model_name='Vendor',
                             object_id=vendor.pk, object_name=vendor.name)
            return Response(VendorSerializer(vendor).data, status=status.HTTP_201_CREATED)
        logger.warning(f"Vendor validation failed: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@permission_classes([IsAuthenticated, CanManageVendors])
def vendor_detail(request, pk):
    """Retrieve, update or delete a vendor"""
    vendor = get_object_or_404(Vendor, pk=pk)

    if request.method == 'GET':
        serializer = VendorSerializer(vendor)
        return Response(serializer.data)
    elif request.method in ('PUT', 'PATCH'):
        serializer = VendorSerializer(vendor, data=request.data, partial=request.method == 'PATCH')
        if serializer.is_valid():
            try:
                serializer.save()
            except IntegrityError as e:
                return _duplicate_email_response(e, 'vendor')
            create_audit_log(request=request, action='update', model_name='Vendor',
                             object_id=vendor.pk, object_name=vendor.name,
                             changes={k: str(v) for k, v in serializer.validated_data.items()})
            return Response(serializer.data)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
    else:  # DELETE
        order_count = vendor.orders.count()
        create_audit_log(request=request, action='delete', model_name='Vendor',
                         object_id=vendor.pk, object_name=vendor.name,
                         changes={'deleted_orders': order_count})
        logger.info(f"User {request.user.username} deleted vendor '{vendor.name}'")
        vendor.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated, require_permission(UserPermission.MANAGE_VENDORS)])
def vendor_rating(request, pk):
    """Set or clear a vendor's 0-5 rating"""
    vendor = get_object_or_404(Vendor, pk=pk)
    serializer = VendorRatingSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    previous = vendor.rating
    vendor.rating = serializer.validated_data['rating']
    vendor.save(update_fields=['rating', 'updated_at'])
    create_audit_log(request=request, action='vendor_rating', model_name='Vendor',
                     object_id=vendor.pk, object_name=vendor.name,
                     changes={'rating': {'old': str(previous) if previous is not None else None,
                                         'new': str(vendor.rating) if vendor.rating is not None else None}})
    return Response(VendorSerializer(vendor).data)
