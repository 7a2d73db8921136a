"""
API views for the onboarding questionnaire and the settings form.
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from utils.exceptions import EcoPilotError
from utils.responses import error_response, unexpected_error_response
from .postal_codes import get_postal_code_format
from .serializers import BusinessProfileSerializer
from .services import get_profile, save_step

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def onboarding_data(request):
    """
    Current onboarding answers for the authenticated user, or null when
    onboarding has not started.
    """
    profile = get_profile(request.user)
    if profile is None:
        return Response(None)
    return Response(BusinessProfileSerializer(profile).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def save_onboarding_step(request, step):
    """
    Save one onboarding step (1-4). Also used by the settings page to edit
    an existing profile.
    """
    try:
        profile = save_step(request.user, step, request.data)
        return Response({
            'success': True,
            'current_step': profile.current_step,
            'is_complete': profile.is_complete,
        }, status=status.HTTP_200_OK)
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error_response(f'saving onboarding step {step}', e)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def postal_code_format(request):
    """
    Postal code format hint.

    Query parameters:
    - country: Country name (defaults to the profile's country)
    """
    country = request.query_params.get('country')
    if not country:
        profile = get_profile(request.user)
        country = profile.country if profile else None
    return Response({'country': country, **get_postal_code_format(country)})
