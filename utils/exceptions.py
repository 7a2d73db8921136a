"""
Error taxonomy shared by the onboarding, footprint and ledger apps.

Every error carries the HTTP status the API layer answers with.
"""

from rest_framework import status


class EcoPilotError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "An internal error occurred"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(EcoPilotError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or {}


class ProfileNotFound(EcoPilotError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No onboarding data found for user"


class NoEmissionFactor(EcoPilotError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No emission factor found for the specified country and category"


class EntryNotFound(EcoPilotError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Entry not found"


class Unauthorized(EcoPilotError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Unauthorized"


class AIConfigurationError(EcoPilotError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "No generative model credentials configured"


class AIResponseError(EcoPilotError):
    """The model answered, but not with data matching the requested schema."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Model response did not match the expected schema"


class EstimationFailed(EcoPilotError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Failed to calculate carbon footprint"


class GenerationFailed(EcoPilotError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Failed to generate dashboard"

    def __init__(self, message=None, task=None):
        super().__init__(message)
        self.task = task
