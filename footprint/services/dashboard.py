"""
Persistence and retrieval of footprint + action plan pairs, and the
completed-action toggle.
"""

import logging

from django.db import transaction

from profiles.services import get_profile, get_profile_or_raise
from utils.exceptions import ValidationError
from ..models import ActionPlan, ActionTypeChoices, CarbonFootprint, CompletedAction
from . import ai_client
from .action_plan import generate_action_plan
from .estimator import estimate_footprint

logger = logging.getLogger(__name__)


def save_footprint_and_plan(user, footprint, plan):
    """
    Store a footprint and its action plan as one immutable pair.

    Both rows are written in one transaction: if the plan insert fails the
    footprint insert is rolled back too.

    Returns:
        tuple: (CarbonFootprint, ActionPlan)
    """
    with transaction.atomic():
        saved_footprint = CarbonFootprint.objects.create(
            user=user,
            total_kg_co2e_annual=footprint['totalKgCO2eAnnual'],
            data_source=footprint.get('dataSource'),
            breakdown=footprint['breakdown'],
            calculation_notes=footprint.get('calculationNotes'),
            recommendations=footprint.get('recommendations'),
        )
        saved_plan = ActionPlan.objects.create(
            user=user,
            footprint=saved_footprint,
            executive_summary=plan['executiveSummary'],
            prioritized_next_step=plan['prioritizedNextStep'],
            quick_wins=plan['quickWins'],
            full_action_plan=plan['fullActionPlan'],
            rent_constraint_flags=plan.get('rentConstraintFlags', []),
        )

    logger.info(f"Saved footprint {saved_footprint.id} and action plan {saved_plan.id} for user {user.pk}")
    return saved_footprint, saved_plan


def calculate_and_generate(user, client=None):
    """
    Estimate the footprint, generate the action plan and persist both.

    Raises:
        ProfileNotFound: the user has not started onboarding
        EstimationFailed: the footprint estimate failed
        GenerationFailed: any action plan sub-request failed
    """
    profile = get_profile_or_raise(user)
    client = client or ai_client.get_model_client()

    footprint = estimate_footprint(profile, client=client)
    plan = generate_action_plan(profile, footprint, client=client)
    saved_footprint, saved_plan = save_footprint_and_plan(user, footprint, plan)

    return {
        "footprint": saved_footprint.to_dict(),
        "dashboard": saved_plan.to_dict(),
    }


def get_latest(user):
    """
    Latest footprint with its action plan, the business name and the ids of
    completed actions.

    Returns None when no footprint exists, or when the latest footprint has
    no action plan; the client should then offer to regenerate.
    """
    footprint = CarbonFootprint.objects.filter(user=user).order_by('-created_at', '-id').first()
    if footprint is None:
        return None

    plan = ActionPlan.objects.filter(footprint=footprint).first()
    if plan is None:
        logger.warning(f"Footprint {footprint.id} for user {user.pk} has no action plan")
        return None

    profile = get_profile(user)
    completed_ids = (
        CompletedAction.objects.filter(user=user)
        .order_by('action_id')
        .values_list('action_id', flat=True)
        .distinct()
    )

    return {
        "footprint": footprint.to_dict(),
        "dashboard": plan.to_dict(),
        "businessName": profile.business_name if profile else None,
        "completedActionIds": list(completed_ids),
    }


def toggle_action_completion(user, action_id, action_type, completed):
    """
    Converge the completion state of one action.

    Marking complete is an upsert that records the latest action type,
    marking incomplete deletes any marker; both are idempotent.
    """
    if not action_id:
        raise ValidationError("actionId is required")
    if action_type not in ActionTypeChoices.values:
        raise ValidationError(
            f"Invalid actionType '{action_type}'. Expected one of: {', '.join(ActionTypeChoices.values)}"
        )

    if completed:
        CompletedAction.objects.update_or_create(
            user=user,
            action_id=action_id,
            defaults={'action_type': action_type},
        )
    else:
        CompletedAction.objects.filter(user=user, action_id=action_id).delete()

    return {"success": True, "actionId": action_id, "completed": bool(completed)}
