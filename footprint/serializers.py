from rest_framework import serializers

from .models import ActionTypeChoices


class ToggleActionSerializer(serializers.Serializer):
    actionId = serializers.CharField(max_length=255)
    actionType = serializers.ChoiceField(choices=ActionTypeChoices.choices)
    completed = serializers.BooleanField()


class ChatMessageSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=[('user', 'user'), ('assistant', 'assistant')])
    content = serializers.CharField()


class BreakdownItemSerializer(serializers.Serializer):
    category = serializers.CharField()
    kgCO2e = serializers.FloatField()
    percent = serializers.FloatField()


class BusinessContextSerializer(serializers.Serializer):
    industry = serializers.CharField(required=False, allow_blank=True)
    employeeCount = serializers.IntegerField(required=False, min_value=0)
    totalEmissions = serializers.FloatField(required=False, min_value=0)
    breakdown = BreakdownItemSerializer(many=True, required=False)
    topEmissionSource = serializers.CharField(required=False, allow_blank=True)
    recommendations = serializers.ListField(child=serializers.CharField(), required=False)


class ChatRequestSerializer(serializers.Serializer):
    messages = ChatMessageSerializer(many=True, allow_empty=False, error_messages={'empty': 'Messages are required'})
    businessContext = BusinessContextSerializer(required=False)
