"""Basic exceptions for gemini-flows"""  # noqa: D415

from .core.types import ErrorKind


class GeminiFlowsError(Exception):
    """Base exception for gemini-flows errors"""  # noqa: D415


class ConfigurationError(GeminiFlowsError):
    """Raised when configuration cannot be resolved or is invalid"""  # noqa: D415


class ValidationError(GeminiFlowsError):
    """Raised when input validation fails"""  # noqa: D415

    kind: ErrorKind = ErrorKind.UNKNOWN


class MissingFieldError(ValidationError):
    """Raised when a prompt template is missing a required field"""  # noqa: D415

    kind = ErrorKind.MISSING_FIELD

    def __init__(self, field_name: str, template: str | None = None):
        self.field_name = field_name
        self.template = template
        where = f" for template '{template}'" if template else ""
        super().__init__(f"Missing required field '{field_name}'{where}")


class BackendError(GeminiFlowsError):
    """Raised by model backends when a response cannot be interpreted"""  # noqa: D415
