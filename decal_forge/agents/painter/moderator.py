import json
from typing import Optional

from groq import AsyncGroq

from decal_forge.core.config import settings
from decal_forge.core.errors import ServiceNotConfigured
from decal_forge.core.logger import get_logger
from decal_forge.agents.context_loader import load_context, wrap_user_input, get_user_friendly_error

logger = get_logger("moderator")


def is_approved(value) -> bool:
    """Only an explicit yes approves: true or the string "true"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


class PromptModerator:
    """Safety check run on a decal prompt before any image is generated."""

    def __init__(self, client: Optional[AsyncGroq] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.MODERATION_MODEL

    @property
    def client(self) -> AsyncGroq:
        if self._client is None:
            if not settings.GROQ_API_KEY:
                raise ServiceNotConfigured("Groq", "GROQ_API_KEY")
            self._client = AsyncGroq(api_key=settings.GROQ_API_KEY)
        return self._client

    async def review(self, prompt: str) -> dict:
        """
        Returns {"approved": bool, "reason": str | None}.

        API errors propagate to the caller.
        """
        user_prompt = f"""
{wrap_user_input(prompt)}

Evaluate this request for a decal or sticker design.
Return ONLY this JSON:
{{
    "approved": true/false,
    "reason": "Short explanation shown to the user if rejected"
}}
"""
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": load_context("moderator")},
                {"role": "user", "content": user_prompt}
            ],
            temperature=0.1,
            response_format={"type": "json_object"}
        )

        content = completion.choices[0].message.content
        try:
            result = json.loads(content)
        except (json.JSONDecodeError, TypeError):
            result = None

        # Fail closed
        if not isinstance(result, dict):
            logger.warning(f"Moderator returned unusable output, rejecting prompt: {content!r}")
            return {"approved": False, "reason": get_user_friendly_error("CONTENT_REJECTED")}

        approved = is_approved(result.get("approved"))
        reason = None
        if not approved:
            reason = result.get("reason") or get_user_friendly_error("CONTENT_REJECTED")
        return {"approved": approved, "reason": reason}
