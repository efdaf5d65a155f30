"""Error taxonomy for lyric generation.

Per-request failures (:class:`EmptyConceptError`, :class:`GenerationServiceError`,
:class:`EmptyGenerationError`) are the terminal outcome of a single
``generate`` call. :class:`MissingCredentialError` is a startup condition that
prevents a generator from being constructed at all.

The messages of the per-request errors are safe to show to end users.
"""

#: Message shown to users when the generation service fails for any reason.
SERVICE_ERROR_MESSAGE = (
    "The Architect encountered a technical glitch. Check your inputs and try again."
)

#: Message shown to users when the service answered without usable text.
EMPTY_GENERATION_MESSAGE = "Empty response from the AI Architect."

#: Message shown to users when the concept is blank.
EMPTY_CONCEPT_MESSAGE = "Please enter an idea for your lyrics."


class GhostwriterError(Exception):
    """Base class for all Ghostwriter errors."""


class EmptyConceptError(GhostwriterError, ValueError):
    """The concept text was empty or whitespace only.

    Recoverable by the caller: ask the user to enter an idea. Raised before
    any request reaches the generation service.
    """

    def __init__(self, message: str = EMPTY_CONCEPT_MESSAGE):
        super().__init__(message)


class GenerationServiceError(GhostwriterError):
    """The external generation call failed.

    The message is generic and user-safe. The underlying exception is chained
    as ``__cause__`` and logged, but never included in the message.
    """

    def __init__(self, message: str = SERVICE_ERROR_MESSAGE):
        super().__init__(message)


class EmptyGenerationError(GenerationServiceError):
    """The generation call succeeded but returned no usable text."""

    def __init__(self, message: str = EMPTY_GENERATION_MESSAGE):
        super().__init__(message)


class MissingCredentialError(GhostwriterError):
    """No API credential is configured; the generator cannot be built."""

    def __init__(self, message: str = "GHOSTWRITER_API_KEY environment variable not set"):
        super().__init__(message)
