"""Error taxonomy for Gemini Creative Suite.

Every error carries a message that is safe to show to the user as-is.
Transport details stay in the logs and in the chained ``__cause__``.

- MissingInputError: a required field is empty (raised before any network call)
- EmptyChunkResultError: story text yields no page-sized chunks
- NoImageProducedError: the service answered but returned no image payload
- GenerationFailedError: transport failure, malformed response or service error
- MissingCredentialError: no API key at startup (fatal, never caught)
"""


class CreativeSuiteError(Exception):
    """Base class for user-presentable errors."""

    default_message = "An unexpected error occurred."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class MissingInputError(CreativeSuiteError):
    """A required input field is empty."""

    default_message = "Please fill in all required fields."


class EmptyChunkResultError(CreativeSuiteError):
    """Story text could not be split into any pages."""

    default_message = "Could not split story into pages. Please provide more text."


class NoImageProducedError(CreativeSuiteError):
    """The response was well-formed but contained no image."""

    default_message = "No image was generated in the response."


class GenerationFailedError(CreativeSuiteError):
    """The remote call failed or returned something unusable."""

    default_message = "Image generation failed. Check the logs for details."


class MissingCredentialError(CreativeSuiteError):
    """No API key was configured. Raised once, at startup."""

    default_message = (
        "API key not set. Export CREATIVE_SUITE_API_KEY (or API_KEY) before starting."
    )
