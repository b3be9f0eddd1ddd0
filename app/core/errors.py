"""Error taxonomy shared by the generation pipeline and the API layer.

Client-caused problems (``InputValidationError``) become HTTP 400. Everything
under ``GenerationError`` is a downstream failure that the generation
endpoints convert into a degraded response instead of an HTTP error.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for all application errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(AppError):
    """A required credential or setting is missing or invalid."""


class InputValidationError(AppError):
    """Request body failed a precondition (missing or too short text)."""

    status_code = 400


class ServiceUnavailableError(AppError):
    """No backing service is configured for the requested operation."""

    status_code = 503


class UpstreamError(AppError):
    """A non-generative upstream (storage, document host) failed."""

    status_code = 502


class GenerationError(AppError):
    """Base class for failures between the provider call and validation."""

    stage: str = "generation"


class ProviderError(GenerationError):
    """The generative-model call failed or timed out."""

    stage = "generating"


class ExtractionError(GenerationError):
    """No JSON array delimiters were found in the model output."""

    stage = "extracting"


class ParseError(GenerationError):
    """The extracted substring is not valid JSON."""

    stage = "parsing"


class SchemaError(GenerationError):
    """The parsed JSON does not satisfy the expected item shape."""

    stage = "validating"


class DocumentFetchError(GenerationError):
    """The source document could not be downloaded or read."""

    stage = "fetching"
