import base64
from typing import Optional

import requests
from fastapi.concurrency import run_in_threadpool

from decal_forge.core.config import settings
from decal_forge.core.errors import ImageGenerationError, ServiceNotConfigured
from decal_forge.core.logger import get_logger
from decal_forge.agents.painter.moderator import PromptModerator
from decal_forge.schemas.ui_spec import ImageResult

logger = get_logger("painter")

# Appended to every prompt so the model renders something usable as a decal.
DECAL_STYLE = (
    ", die-cut vinyl decal design, sticker art, bold clean outlines, "
    "flat vibrant colors, centered subject, plain white background"
)

NSFW_REASON = "The generated image was flagged by the safety filter. Please try again with a different idea."


def build_image_prompt(prompt: str) -> str:
    return prompt.strip() + DECAL_STYLE


def to_data_uri(content: bytes, content_type: Optional[str]) -> str:
    mime = (content_type or "image/png").split(";")[0].strip()
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


class ImageGenerator:
    """
    Image collaborator: moderation check, ModelsLab text-to-image, download.

    A blocked prompt is reported through ImageResult.blocked; HTTP and API
    errors are raised.
    """

    def __init__(
        self,
        moderator: Optional[PromptModerator] = None,
        session: Optional[requests.Session] = None,
        api_key: Optional[str] = None,
    ):
        self.moderator = moderator or PromptModerator()
        self.session = session or requests.Session()
        self.api_key = api_key or settings.STABLE_DIFFUSION_API_KEY

    async def generate(self, prompt: str) -> ImageResult:
        review = await self.moderator.review(prompt)
        if not review["approved"]:
            logger.info(f"Prompt rejected by moderator: {review['reason']}")
            return ImageResult(blocked=True, reason=review["reason"])

        return await run_in_threadpool(self._render, build_image_prompt(prompt))

    def _render(self, prompt: str) -> ImageResult:
        if not self.api_key:
            raise ServiceNotConfigured("ModelsLab", "STABLE_DIFFUSION_API_KEY")

        payload = {
            "prompt": prompt,
            "model_id": settings.IMAGE_MODEL_ID,
            "key": self.api_key,
            "width": settings.IMAGE_SIZE,
            "height": settings.IMAGE_SIZE,
            "samples": 1
        }

        resp = self.session.post(settings.IMAGE_API_URL, json=payload, timeout=settings.REQUEST_TIMEOUT_SECONDS)
        resp.raise_for_status()
        data = resp.json()

        if data.get("status") == "error":
            raise ImageGenerationError(f"Image API error: {data.get('message') or data}")

        if data.get("nsfw_content_detected"):
            return ImageResult(blocked=True, reason=NSFW_REASON)

        image_url = None
        if data.get("output"):
            image_url = data["output"][0]

        if not image_url:
            logger.warning(f"Image API returned no output (status={data.get('status')})")
            return ImageResult(blocked=False, media=None)

        img_resp = self.session.get(image_url, timeout=settings.REQUEST_TIMEOUT_SECONDS)
        img_resp.raise_for_status()

        return ImageResult(blocked=False, media=to_data_uri(img_resp.content, img_resp.headers.get("Content-Type")))
