"""
API views for the CEDA spend-based emissions calculator and ledger.
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from profiles.services import get_profile
from utils.exceptions import EcoPilotError, ValidationError
from utils.responses import error_response, unexpected_error_response
from .filters import SpendEmissionEntryFilter
from .serializers import AddEntrySerializer, CedaCalculationSerializer, SpendEmissionEntrySerializer
from .services import spend
from .services.factors import list_categories

logger = logging.getLogger(__name__)

CEDA_HELP = {
    'message': 'This is the CEDA emissions API. Please use a POST request to calculate emissions.',
    'example_body': {
        'country': 'United States',
        'category': 'Air transportation',
        'spend_amount': 1000
    }
}


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedOrReadOnly])
def ceda_calculator(request):
    """
    Stateless spend-based emissions calculation.

    POST JSON: {"country": "United States", "category": "Air transportation", "spend_amount": 1000}
    GET returns usage help and needs no authentication.
    """
    if request.method == 'GET':
        return Response(CEDA_HELP)

    serializer = CedaCalculationSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(ValidationError(serializer.first_error_message(), errors=serializer.errors))

    data = serializer.validated_data
    try:
        result = spend.calculate_spend_emissions(
            category=data['category'],
            country=data['country'],
            spend_amount=data['spend_amount'],
        )
        return Response(result)
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Error in CEDA calculation: {str(e)}", exc_info=True)
        return Response({'error': 'An internal server error occurred'},
                        status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def ceda_categories(request):
    """
    Spending categories with a factor.

    Query parameters:
    - country: Limit to one country (defaults to the profile's country)
    - all: "true" to list categories for every country
    """
    country = request.query_params.get('country')
    if not country and request.query_params.get('all', '').lower() != 'true':
        profile = get_profile(request.user)
        country = profile.country if profile else None
    return Response({'country': country, 'categories': list_categories(country)})


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def ledger_entries(request):
    """
    GET: the user's ledger entries, newest first. Optional query parameters:
    category (substring), created_after, created_before (YYYY-MM-DD).
    POST: add an entry; the country comes from the business profile.
    """
    if request.method == 'GET':
        entries = SpendEmissionEntryFilter(request.query_params, queryset=spend.list_entries(request.user)).qs
        return Response(SpendEmissionEntrySerializer(entries, many=True).data)

    serializer = AddEntrySerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(ValidationError("Invalid ledger entry", errors=serializer.errors))

    data = serializer.validated_data
    try:
        entry = spend.add_entry(
            request.user,
            category=data['category'],
            spend_amount=data['spend_amount'],
            description=data.get('description'),
        )
        return Response(SpendEmissionEntrySerializer(entry).data, status=status.HTTP_201_CREATED)
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error_response('adding the ledger entry', e)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def ledger_totals(request):
    return Response(spend.get_totals(request.user))


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_ledger_entry(request, entry_id):
    try:
        return Response(spend.delete_entry(request.user, entry_id))
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error_response('deleting the ledger entry', e)
