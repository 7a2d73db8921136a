"""
Models for carbon footprint snapshots, their action plans and the user's
completed-action markers.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class CarbonFootprint(models.Model):
    """
    Immutable snapshot of an estimation run. Never updated, only superseded
    by a newer snapshot for the same user.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='carbon_footprints'
    )
    total_kg_co2e_annual = models.FloatField(help_text="Total annual footprint in kg CO2e")
    data_source = models.TextField(blank=True, null=True, help_text="How the footprint was calculated")
    breakdown = models.JSONField(
        default=list,
        help_text="List of {category, kgCO2e, percent, status?, notes?}"
    )
    calculation_notes = models.TextField(blank=True, null=True)
    recommendations = models.JSONField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = "Carbon Footprint"
        verbose_name_plural = "Carbon Footprints"

    def __str__(self):
        return f"{self.user} - {self.total_kg_co2e_annual:,.0f} kg CO2e ({self.created_at:%Y-%m-%d})"

    def to_dict(self):
        data = {
            "id": self.id,
            "totalKgCO2eAnnual": self.total_kg_co2e_annual,
            "dataSource": self.data_source,
            "breakdown": self.breakdown,
            "calculationNotes": self.calculation_notes,
            "createdAt": self.created_at.isoformat(),
        }
        if self.recommendations is not None:
            data["recommendations"] = self.recommendations
        return data


class ActionPlan(models.Model):
    """
    The generated dashboard, tied 1:1 to the footprint it was built from.
    Immutable once created.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='action_plans'
    )
    footprint = models.OneToOneField(
        CarbonFootprint,
        on_delete=models.CASCADE,
        related_name='action_plan'
    )
    executive_summary = models.TextField()
    prioritized_next_step = models.JSONField(help_text="{id, title, description, impact, cost, paybackPeriod}")
    quick_wins = models.JSONField(default=list, help_text="3-5 {id, title, description}")
    full_action_plan = models.JSONField(default=list, help_text="8-15 {id, category, title, description, impact, cost}")
    rent_constraint_flags = models.JSONField(
        default=list,
        blank=True,
        help_text="Ids of actions recommending building modifications although the business rents"
    )
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = "Action Plan"
        verbose_name_plural = "Action Plans"

    def __str__(self):
        return f"Action plan for {self.user} ({self.created_at:%Y-%m-%d})"

    def to_dict(self):
        return {
            "id": self.id,
            "footprintId": self.footprint_id,
            "executiveSummary": self.executive_summary,
            "prioritizedNextStep": self.prioritized_next_step,
            "quickWins": self.quick_wins,
            "fullActionPlan": self.full_action_plan,
            "rentConstraintFlags": self.rent_constraint_flags,
            "createdAt": self.created_at.isoformat(),
        }


class ActionTypeChoices(models.TextChoices):
    PRIORITY = "priority", _("Prioritized next step")
    QUICKWIN = "quickwin", _("Quick win")
    ACTIONPLAN = "actionplan", _("Action plan item")


class CompletedAction(models.Model):
    """
    Set membership: a row means the action is completed, no row means it is not.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='completed_actions'
    )
    action_id = models.CharField(max_length=255)
    action_type = models.CharField(max_length=20, choices=ActionTypeChoices.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'action_id'], name='unique_completed_action_per_user'),
        ]
        verbose_name = "Completed Action"
        verbose_name_plural = "Completed Actions"

    def __str__(self):
        return f"{self.user} completed {self.action_id} ({self.action_type})"
