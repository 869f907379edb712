import logging
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from .resolver import COUNTRY, STATE, CITY, list_countries, list_states, list_cities
from .serializers import ResolveSerializer

logger = logging.getLogger('ipdesk.locations')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def country_list(request):
    """List every country in the location table"""
    return Response(list_countries())


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def state_list(request):
    """List states of ?country=; unknown or missing country gives []"""
    country = request.query_params.get('country', '')
    states = list_states(country)
    if country and not states:
        logger.debug(f"No states known for country '{country}'")
    return Response(states)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def city_list(request):
    """List cities of ?country=&state=; unknown keys give []"""
    country = request.query_params.get('country', '')
    state = request.query_params.get('state', '')
    return Response(list_cities(country, state))


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def resolve_selection(request):
    """
    Apply one picker edit and return the resulting selection.

    Response carries the new selection, the option list for each level and
    whether each picker is enabled, so the client can re-render all three
    controls from a single call.
    """
    serializer = ResolveSerializer(data=request.data)
    if not serializer.is_valid():
        logger.warning(f"Location resolve rejected: {serializer.errors}")
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    selection = serializer.to_selection()
    return Response({
        'selection': selection.as_dict(),
        'options': selection.options(),
        'enabled': {level: selection.is_enabled(level) for level in (COUNTRY, STATE, CITY)},
    })
