from django.conf import settings
from django.db import models
from django.utils import timezone


class SpendEmissionEntry(models.Model):
    """
    One spend-based emissions calculation saved by a user. The factor and
    country are copied at creation so later table changes do not rewrite history.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='spend_entries'
    )
    category = models.CharField(max_length=255, help_text="CEDA spending category")
    country = models.CharField(max_length=256)
    spend_amount = models.FloatField(help_text="Spend in USD")
    emission_factor = models.FloatField(help_text="kg CO2e per USD")
    total_emissions = models.FloatField(help_text="kg CO2e")
    description = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']
        verbose_name = "Spend Emission Entry"
        verbose_name_plural = "Spend Emission Entries"

    def __str__(self):
        return f"{self.category} ({self.country}): ${self.spend_amount:,.2f} = {self.total_emissions:,.1f} kg CO2e"
