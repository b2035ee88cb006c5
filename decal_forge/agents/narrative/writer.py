from typing import Optional

from groq import AsyncGroq

from decal_forge.core.config import settings
from decal_forge.core.errors import ServiceNotConfigured
from decal_forge.agents.context_loader import load_context, wrap_user_input


class StoryWriter:
    """Writes the short lore text shown next to a decal."""

    def __init__(self, client: Optional[AsyncGroq] = None, model: Optional[str] = None):
        self._client = client
        self.model = model or settings.STORY_MODEL

    @property
    def client(self) -> AsyncGroq:
        if self._client is None:
            if not settings.GROQ_API_KEY:
                raise ServiceNotConfigured("Groq", "GROQ_API_KEY")
            self._client = AsyncGroq(api_key=settings.GROQ_API_KEY)
        return self._client

    async def write(self, prompt: str) -> str:
        """
        Generates a 2-4 sentence story for the design.

        Returns:
            The story text, or an empty string if the model produced nothing.
        """
        full_prompt = f"""
{wrap_user_input(prompt)}

Write a 2-4 sentence story or lore about the decal design described above.
Return ONLY the narrative text (no title, no JSON, no markdown).
"""
        completion = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": load_context("writer")},
                {"role": "user", "content": full_prompt}
            ],
            temperature=0.8,
            max_tokens=300
        )
        content = completion.choices[0].message.content
        return (content or "").strip()
