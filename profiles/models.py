"""
Onboarding answers for a business, one profile per user.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class LocationUnitChoices(models.TextChoices):
    SQFT = "sqft", _("Square feet")
    SQM = "sqm", _("Square meters")


class OwnOrRentChoices(models.TextChoices):
    OWN = "own", _("Own")
    RENT = "rent", _("Rent")


class BusinessProfile(models.Model):
    """
    Built incrementally across four onboarding steps and editable afterwards
    from the settings form. Every step field is nullable until its step is saved.
    """
    ONBOARDING_COMPLETE_STEP = 5

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='business_profile'
    )

    # Step 1: Business Information
    business_name = models.CharField(max_length=256, blank=True, null=True)
    industry = models.CharField(max_length=256, blank=True, null=True)
    country = models.CharField(max_length=256, blank=True, null=True)
    postal_code = models.CharField(max_length=50, blank=True, null=True)

    # Step 2: Team & Space
    number_of_employees = models.PositiveIntegerField(blank=True, null=True)
    location_size = models.FloatField(blank=True, null=True)
    location_unit = models.CharField(max_length=10, choices=LocationUnitChoices.choices, blank=True, null=True)
    own_or_rent = models.CharField(max_length=10, choices=OwnOrRentChoices.choices, blank=True, null=True)

    # Step 3: Energy Use
    monthly_electricity_kwh = models.FloatField(blank=True, null=True)
    monthly_electricity_amount = models.FloatField(blank=True, null=True, help_text="Currency fallback when kWh is unknown")
    electricity_currency = models.CharField(max_length=10, blank=True, null=True)
    heating_fuel = models.CharField(max_length=50, blank=True, null=True)
    monthly_heating_amount = models.FloatField(blank=True, null=True)
    heating_unit = models.CharField(max_length=20, blank=True, null=True, help_text="e.g. therms, gallons")
    energy_data_skipped = models.BooleanField(default=False)

    # Step 4: Operations
    has_vehicles = models.BooleanField(blank=True, null=True)
    number_of_vehicles = models.PositiveIntegerField(blank=True, null=True)
    employee_commute_pattern = models.CharField(max_length=50, blank=True, null=True)
    business_flights_per_year = models.PositiveIntegerField(blank=True, null=True)
    weekly_trash_bags = models.PositiveIntegerField(blank=True, null=True)

    # Tracking
    current_step = models.PositiveSmallIntegerField(default=1)
    completed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Business Profile"
        verbose_name_plural = "Business Profiles"

    def __str__(self):
        return f"{self.business_name or 'Unnamed business'} ({self.user})"

    @property
    def is_complete(self):
        return self.current_step >= self.ONBOARDING_COMPLETE_STEP

    @property
    def is_renting(self):
        # Unknown tenure is treated as renting, the more restrictive case
        return (self.own_or_rent or OwnOrRentChoices.RENT) == OwnOrRentChoices.RENT

    def business_profile_data(self):
        return {
            "industry": self.industry or "Unknown",
            "country": self.country or "Unknown",
            "postalCode": self.postal_code or "",
            "employeeCount": self.number_of_employees or 0,
            "locationSize": self.location_size or 0,
            "locationUnit": self.location_unit or LocationUnitChoices.SQFT,
            "ownsOrRents": self.own_or_rent or OwnOrRentChoices.RENT,
        }

    def to_business_data(self):
        """
        Estimator input. Missing answers fall back to "Unknown"/0 so a
        partially completed profile still produces a full breakdown.
        """
        energy_data = {"hasActualData": not self.energy_data_skipped}
        optional_energy = {
            "monthlyElectricityKwh": self.monthly_electricity_kwh,
            "monthlyElectricityAmount": self.monthly_electricity_amount,
            "electricityCurrency": self.electricity_currency,
            "heatingFuel": self.heating_fuel,
            "monthlyHeatingAmount": self.monthly_heating_amount,
            "heatingUnit": self.heating_unit,
        }
        energy_data.update({key: value for key, value in optional_energy.items() if value is not None})

        operations_data = {
            "hasVehicles": bool(self.has_vehicles),
            "employeeCommutePattern": self.employee_commute_pattern or "unknown",
            "businessFlightsPerYear": self.business_flights_per_year or 0,
            "weeklyTrashBags": self.weekly_trash_bags or 0,
        }
        if self.number_of_vehicles is not None:
            operations_data["numberOfVehicles"] = self.number_of_vehicles

        return {
            "businessProfile": self.business_profile_data(),
            "energyData": energy_data,
            "operationsData": operations_data,
        }
