"""
Error types raised while building a UI spec.

A blocked prompt is not an error: it is returned as the blocked output shape.
Failures from the AI services themselves (Groq, ModelsLab, ElevenLabs) are
propagated unchanged.
"""


class DecalForgeError(RuntimeError):
    """Base class. `code` maps to a user-facing message in context_loader."""

    code = "GENERATION_ERROR"


class TitleGenerationFailed(DecalForgeError):
    code = "TITLE_FAILED"

    def __init__(self, message: str = "The AI failed to generate a title for this prompt."):
        super().__init__(message)


class StoryGenerationFailed(DecalForgeError):
    code = "STORY_FAILED"

    def __init__(self, message: str = "The AI failed to generate a story or narration."):
        super().__init__(message)


class ImageGenerationError(DecalForgeError):
    """The image API answered with an error status."""

    code = "IMAGE_FAILED"


class ServiceNotConfigured(DecalForgeError):
    """An API key required by a collaborator is missing."""

    code = "NOT_CONFIGURED"

    def __init__(self, service: str, env_var: str):
        super().__init__(f"{service} is not configured: set {env_var}.")
        self.service = service
        self.env_var = env_var
