import json
from typing import Optional

from groq import AsyncGroq

from decal_forge.core.config import settings
from decal_forge.core.errors import ServiceNotConfigured
from decal_forge.core.logger import get_logger
from decal_forge.agents.context_loader import load_context, wrap_user_input
from decal_forge.schemas.ui_spec import TitleResult

logger = get_logger("curator")


def clean_title(raw: Optional[str]) -> Optional[str]:
    """Strip whitespace and wrapping quotes; empty titles become None."""
    if not raw:
        return None
    title = raw.strip().strip('"\'“”‘’').strip()
    return title or None


class TitleGenerator:
    """Title collaborator backed by a Groq chat model."""

    def __init__(self, client: Optional[AsyncGroq] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.TITLE_MODEL

    @property
    def client(self) -> AsyncGroq:
        if self._client is None:
            if not settings.GROQ_API_KEY:
                raise ServiceNotConfigured("Groq", "GROQ_API_KEY")
            self._client = AsyncGroq(api_key=settings.GROQ_API_KEY)
        return self._client

    async def generate(self, prompt: str) -> TitleResult:
        user_prompt = f"""
{wrap_user_input(prompt)}

Based on the prompt above, generate a short, artistic title for this artwork.
Return only the title text, no quotes, as this JSON:
{{"title": "..."}}
"""
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": load_context("curator")},
                {"role": "user", "content": user_prompt}
            ],
            temperature=0.9,
            max_tokens=64,
            response_format={"type": "json_object"}
        )
        content = completion.choices[0].message.content

        try:
            data = json.loads(content)
        except (json.JSONDecodeError, TypeError):
            logger.warning(f"Curator returned invalid JSON: {content!r}")
            return TitleResult(title=None)

        if not isinstance(data, dict) or not isinstance(data.get("title"), str):
            return TitleResult(title=None)
        return TitleResult(title=clean_title(data["title"]))
