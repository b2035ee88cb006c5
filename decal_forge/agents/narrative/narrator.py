import base64
from typing import Optional

from elevenlabs import AsyncElevenLabs

from decal_forge.core.config import settings
from decal_forge.core.errors import ServiceNotConfigured
from decal_forge.core.logger import get_logger

logger = get_logger("narrator")

AUDIO_MIME = "audio/mpeg"
OUTPUT_FORMAT = "mp3_44100_128"


class Narrator:
    """Text-to-speech with ElevenLabs; returns the audio as a data URI."""

    def __init__(
        self,
        client: Optional[AsyncElevenLabs] = None,
        voice_id: Optional[str] = None,
        model_id: Optional[str] = None,
    ):
        self._client = client
        self.voice_id = voice_id or settings.NARRATOR_VOICE_ID
        self.model_id = model_id or settings.TTS_MODEL

    @property
    def client(self) -> AsyncElevenLabs:
        if self._client is None:
            if not settings.ELEVENLABS_API_KEY:
                raise ServiceNotConfigured("ElevenLabs", "ELEVENLABS_API_KEY")
            self._client = AsyncElevenLabs(api_key=settings.ELEVENLABS_API_KEY)
        return self._client

    async def narrate(self, text: str) -> Optional[str]:
        audio_bytes = b"".join([
            chunk async for chunk in self.client.text_to_speech.convert(
                text=text,
                voice_id=self.voice_id,
                model_id=self.model_id,
                output_format=OUTPUT_FORMAT,
            )
        ])

        if not audio_bytes:
            logger.warning("ElevenLabs returned an empty audio stream")
            return None

        logger.debug(f"Narration generated: {len(audio_bytes)} bytes (voice={self.voice_id})")
        return f"data:{AUDIO_MIME};base64,{base64.b64encode(audio_bytes).decode('ascii')}"
