"""
API views for footprint generation, the dashboard, action completion and
the sustainability advisor chat.
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from profiles.services import get_profile
from utils.exceptions import EcoPilotError, ValidationError
from utils.responses import error_response, unexpected_error_response
from .serializers import ChatRequestSerializer, ToggleActionSerializer
from .services import advisor
from .services.dashboard import calculate_and_generate, get_latest, toggle_action_completion

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def generate_footprint(request):
    """
    Estimate the carbon footprint and generate the action plan for the
    authenticated user, then store both. Takes tens of seconds.
    """
    try:
        result = calculate_and_generate(request.user)
        return Response(result, status=status.HTTP_201_CREATED)
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error_response('generating the footprint', e)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def latest_footprint(request):
    """
    Latest footprint, action plan and completed action ids; null when
    nothing has been generated yet.
    """
    try:
        return Response(get_latest(request.user))
    except Exception as e:
        return unexpected_error_response('loading the dashboard', e)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_action(request):
    """
    Mark an action completed or not completed.

    Expects JSON: {"actionId": "action_123", "actionType": "quickwin", "completed": true}
    """
    serializer = ToggleActionSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response(ValidationError("Invalid action toggle", errors=serializer.errors))

    data = serializer.validated_data
    try:
        result = toggle_action_completion(
            request.user,
            action_id=data['actionId'],
            action_type=data['actionType'],
            completed=data['completed'],
        )
        return Response(result)
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error_response('updating the action', e)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def chat(request):
    """
    Sustainability advisor reply.

    Expects JSON: {"messages": [{"role": "user", "content": "..."}], "businessContext": {...}}
    Without businessContext the user's profile and latest footprint are used.
    """
    serializer = ChatRequestSerializer(data=request.data)
    if not serializer.is_valid():
        message = "Messages are required" if 'messages' in serializer.errors else "Invalid chat request"
        return error_response(ValidationError(message, errors=serializer.errors))

    data = serializer.validated_data
    business_context = data.get('businessContext')
    try:
        if business_context is None:
            business_context = advisor.build_business_context(request.user, get_profile(request.user))
        message = advisor.reply(data['messages'], business_context)
        return Response({'message': message})
    except EcoPilotError as e:
        return error_response(e)
    except Exception as e:
        return unexpected_error_response('generating a response', e)
