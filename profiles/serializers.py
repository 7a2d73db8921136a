from rest_framework import serializers

from .models import BusinessProfile, LocationUnitChoices, OwnOrRentChoices


class BusinessProfileSerializer(serializers.ModelSerializer):
    is_complete = serializers.BooleanField(read_only=True)

    class Meta:
        model = BusinessProfile
        exclude = ['user']
        read_only_fields = ['current_step', 'completed_at', 'created_at', 'updated_at']


class BusinessInfoStepSerializer(serializers.Serializer):
    """Step 1: Business Information"""
    business_name = serializers.CharField(max_length=256, error_messages={'blank': 'Business name is required'})
    industry = serializers.CharField(max_length=256, error_messages={'blank': 'Industry is required'})
    country = serializers.CharField(max_length=256, error_messages={'blank': 'Country is required'})
    postal_code = serializers.CharField(max_length=50, error_messages={'blank': 'Postal code is required'})


class TeamSpaceStepSerializer(serializers.Serializer):
    """Step 2: Team & Space"""
    number_of_employees = serializers.IntegerField(min_value=1)
    location_size = serializers.FloatField(min_value=1)
    location_unit = serializers.ChoiceField(choices=LocationUnitChoices.choices)
    own_or_rent = serializers.ChoiceField(choices=OwnOrRentChoices.choices)


class EnergyUseStepSerializer(serializers.Serializer):
    """Step 3: Energy Use. Every answer is optional; the user may skip the step."""
    monthly_electricity_kwh = serializers.FloatField(min_value=0, required=False, allow_null=True)
    monthly_electricity_amount = serializers.FloatField(min_value=0, required=False, allow_null=True)
    electricity_currency = serializers.CharField(max_length=10, required=False, allow_null=True, allow_blank=True)
    heating_fuel = serializers.CharField(max_length=50, required=False, allow_null=True, allow_blank=True)
    monthly_heating_amount = serializers.FloatField(min_value=0, required=False, allow_null=True)
    heating_unit = serializers.CharField(max_length=20, required=False, allow_null=True, allow_blank=True)
    energy_data_skipped = serializers.BooleanField(default=False)


class OperationsStepSerializer(serializers.Serializer):
    """Step 4: Operations"""
    has_vehicles = serializers.BooleanField()
    number_of_vehicles = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    employee_commute_pattern = serializers.CharField(max_length=50)
    business_flights_per_year = serializers.IntegerField(min_value=0)
    weekly_trash_bags = serializers.IntegerField(min_value=0)

    def validate(self, data):
        if not data.get('has_vehicles'):
            data['number_of_vehicles'] = None
        return data


STEP_SERIALIZERS = {
    1: BusinessInfoStepSerializer,
    2: TeamSpaceStepSerializer,
    3: EnergyUseStepSerializer,
    4: OperationsStepSerializer,
}
