from rest_framework import serializers

from .models import SpendEmissionEntry


class SpendEmissionEntrySerializer(serializers.ModelSerializer):

    class Meta:
        model = SpendEmissionEntry
        fields = [
            'id', 'category', 'country', 'spend_amount', 'emission_factor',
            'total_emissions', 'description', 'created_at'
        ]
        read_only_fields = fields


class AddEntrySerializer(serializers.Serializer):
    category = serializers.CharField(max_length=255)
    spend_amount = serializers.FloatField()
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_spend_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Spend amount must be positive")
        return value


MISSING_FIELDS_MESSAGE = "Missing required fields: category, country, spend_amount"
INVALID_SPEND_MESSAGE = "Invalid spend_amount: must be a positive number"


class StrictCharField(serializers.CharField):
    """CharField that rejects numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


_MISSING = {'required': MISSING_FIELDS_MESSAGE, 'blank': MISSING_FIELDS_MESSAGE, 'null': MISSING_FIELDS_MESSAGE}


class CedaCalculationSerializer(serializers.Serializer):
    category = StrictCharField(max_length=255, error_messages=_MISSING)
    country = StrictCharField(max_length=256, error_messages=_MISSING)
    spend_amount = serializers.FloatField(
        min_value=0,
        error_messages=dict(_MISSING, invalid=INVALID_SPEND_MESSAGE, min_value=INVALID_SPEND_MESSAGE),
    )

    def first_error_message(self):
        for messages in self.errors.values():
            if messages:
                return str(messages[0])
        return "Invalid CEDA calculation request"
