"""Exceptions raised inside the generation client.

They never escape a public operation: each is caught at the operation
boundary and turned into a failed GenerationResult carrying its kind.
"""

from src.models.models import FailureKind


class GenerationError(ValueError):
    """Base class for generation failures."""

    kind: FailureKind = FailureKind.TRANSPORT


class TransportError(GenerationError):
    """The Gemini call itself failed (network, credential, service error)."""

    kind = FailureKind.TRANSPORT


class MalformedResponseError(GenerationError):
    """The response text is not valid JSON."""

    kind = FailureKind.MALFORMED


class ShapeMismatchError(GenerationError):
    """The JSON parsed but does not match the requested array-of-object shape."""

    kind = FailureKind.SHAPE_MISMATCH
