"""
Business profile store: onboarding steps and settings edits.
"""

import logging

from django.db import transaction
from django.utils import timezone

from utils.exceptions import ProfileNotFound, ValidationError
from .models import BusinessProfile
from .serializers import STEP_SERIALIZERS

logger = logging.getLogger(__name__)


def get_profile(user):
    """Return the user's BusinessProfile or None."""
    return BusinessProfile.objects.filter(user=user).first()


def get_profile_or_raise(user):
    profile = get_profile(user)
    if profile is None:
        raise ProfileNotFound()
    return profile


def validate_step(step, data):
    """
    Validate the answers of one onboarding step.

    Returns:
        dict: validated answers

    Raises:
        ValidationError: unknown step or invalid answers
    """
    serializer_class = STEP_SERIALIZERS.get(step)
    if serializer_class is None:
        raise ValidationError(f"Unknown onboarding step: {step}")

    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        raise ValidationError("Invalid onboarding data", errors=serializer.errors)
    return serializer.validated_data


@transaction.atomic
def save_step(user, step, data):
    """
    Save one onboarding step and move the profile to the next one.

    Step 1 creates the profile if needed; later steps update an existing
    profile. The same call serves the settings form, so saving an earlier
    step on a completed profile does not rewind it.
    """
    answers = validate_step(step, data)

    if step == 1:
        profile, created = BusinessProfile.objects.select_for_update().get_or_create(user=user)
        if created:
            logger.info(f"Created business profile for user {user.pk}")
    else:
        profile = BusinessProfile.objects.select_for_update().filter(user=user).first()
        if profile is None:
            raise ProfileNotFound("Complete step 1 of onboarding first")

    for field, value in answers.items():
        setattr(profile, field, value)

    profile.current_step = max(profile.current_step, step + 1)
    if step == 4 and profile.completed_at is None:
        profile.completed_at = timezone.now()

    profile.save()
    logger.debug(f"Saved onboarding step {step} for user {user.pk}")
    return profile
