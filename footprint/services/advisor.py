"""
EcoPilot sustainability advisor: chat replies grounded in the business's
own footprint data.
"""

import logging

from utils.exceptions import EcoPilotError, GenerationFailed, ValidationError
from ..models import CarbonFootprint
from . import ai_client
from .estimator import largest_source

logger = logging.getLogger(__name__)

CHAT_ROLES = ("user", "assistant")

BASE_PROMPT = """You are EcoPilot, a friendly and knowledgeable sustainability assistant specializing in helping businesses reduce their carbon footprint.

**YOUR PERSONALITY:**
- Warm, encouraging, and supportive
- Expert in sustainability and environmental science
- Practical and action-oriented
- Use emojis occasionally to be friendly (🌱, 🌍, ♻️, 💚, ⚡, 🚗, 🏢)
- Keep responses concise but informative (2-4 sentences typically)

**YOUR EXPERTISE:**
- Carbon footprint calculation and reduction strategies
- Energy efficiency and renewable energy
- Sustainable transportation and commuting
- Waste reduction and circular economy
- Green procurement and supply chain
- Employee engagement in sustainability
- Industry-specific best practices
- Cost-benefit analysis of sustainability initiatives

**YOUR APPROACH:**
- Answer questions clearly and accurately
- Provide specific, actionable advice
- Reference real data and benchmarks when relevant
- Acknowledge uncertainty when appropriate
- Encourage progress over perfection
- Celebrate small wins and improvements
- Connect environmental benefits to business benefits (cost savings, employee satisfaction, brand value)

**IMPORTANT RULES:**
- Stay focused on sustainability and environmental topics
- If asked about non-environmental topics, politely redirect to sustainability
- Be honest about trade-offs and challenges
- Don't make up statistics - use general knowledge or acknowledge when you don't have specific data
- Keep responses conversational and easy to understand
- Avoid jargon unless necessary, and explain technical terms"""

CONTEXT_INSTRUCTIONS = """**IMPORTANT:** You have access to this business's complete carbon footprint data. When users ask questions:
- Reference specific numbers from their emissions breakdown
- Provide advice tailored to their largest emission sources
- Compare their emissions to industry benchmarks when relevant
- Suggest specific actions based on their actual data
- Help them understand what the numbers mean in practical terms

Use this context to provide highly relevant and personalized advice. Always reference their specific situation when appropriate."""


def build_system_prompt(business_context=None):
    if not business_context:
        return BASE_PROMPT

    lines = []
    if business_context.get("industry"):
        lines.append(f"Industry: {business_context['industry']}")
    if business_context.get("employeeCount"):
        lines.append(f"Employee count: {business_context['employeeCount']}")
    if business_context.get("totalEmissions"):
        lines.append(f"Current annual emissions: {business_context['totalEmissions']:,.0f} kg CO2e")

    breakdown = business_context.get("breakdown") or []
    if breakdown:
        lines.append("\n**EMISSIONS BREAKDOWN:**")
        for item in breakdown:
            lines.append(
                f"- {item['category']}: {item['kgCO2e']:,.0f} kg CO2e ({float(item['percent']):.1f}%)"
            )

    if business_context.get("topEmissionSource"):
        lines.append(f"\n**LARGEST EMISSION SOURCE:** {business_context['topEmissionSource']}")

    recommendations = business_context.get("recommendations") or []
    if recommendations:
        lines.append("\n**EXISTING RECOMMENDATIONS:**")
        for recommendation in recommendations:
            lines.append(f"- {recommendation}")

    if not lines:
        return BASE_PROMPT

    context = "\n".join(lines)
    return f"{BASE_PROMPT}\n\n**BUSINESS CONTEXT:**\n{context}\n\n{CONTEXT_INSTRUCTIONS}"


def build_business_context(user, profile=None):
    """Chat context from the user's profile and latest footprint, or None."""
    footprint = CarbonFootprint.objects.filter(user=user).order_by('-created_at', '-id').first()
    if profile is None and footprint is None:
        return None

    context = {}
    if profile is not None:
        context["industry"] = profile.industry
        context["employeeCount"] = profile.number_of_employees
    if footprint is not None:
        data = footprint.to_dict()
        top = largest_source(data)
        context.update({
            "totalEmissions": footprint.total_kg_co2e_annual,
            "breakdown": [
                {"category": item["category"], "kgCO2e": item["kgCO2e"], "percent": item["percent"]}
                for item in footprint.breakdown
            ],
            "topEmissionSource": top["category"] if top else None,
            "recommendations": footprint.recommendations or [],
        })
    return context


def validate_messages(messages):
    if not messages:
        raise ValidationError("Messages are required")
    for message in messages:
        if not isinstance(message, dict) or message.get("role") not in CHAT_ROLES or not message.get("content"):
            raise ValidationError("Each message needs a role of 'user' or 'assistant' and non-empty content")


def reply(messages, business_context=None, client=None):
    """
    Advisor reply to a conversation.

    Raises:
        ValidationError: missing or malformed messages
        GenerationFailed: the model call failed
    """
    validate_messages(messages)
    try:
        client = client or ai_client.get_model_client()
        return client.generate_text(
            system=build_system_prompt(business_context),
            messages=messages,
            temperature=0.7,
            max_tokens=500,
        )
    except EcoPilotError as e:
        raise GenerationFailed(f"Failed to generate response: {e}") from e
    except Exception as e:
        logger.error(f"Chat API error: {e}", exc_info=True)
        raise GenerationFailed(f"Failed to generate response: {e}") from e
