import os
from pathlib import Path
from dotenv import load_dotenv

# Load variables from .env file
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings:
    PROJECT_NAME: str = "Decal Forge"
    VERSION: str = "1.0.0"

    # AI Keys
    GROQ_API_KEY: str = os.getenv("GROQ_API_KEY")
    STABLE_DIFFUSION_API_KEY: str = os.getenv("STABLE_DIFFUSION_API_KEY")
    ELEVENLABS_API_KEY: str = os.getenv("ELEVENLABS_API_KEY")

    # Text models (Groq)
    TITLE_MODEL: str = os.getenv("TITLE_MODEL", "llama-3.3-70b-versatile")
    STORY_MODEL: str = os.getenv("STORY_MODEL", "llama-3.3-70b-versatile")
    MODERATION_MODEL: str = os.getenv("MODERATION_MODEL", "llama-3.3-70b-versatile")

    # Image generation (ModelsLab)
    IMAGE_API_URL: str = os.getenv("IMAGE_API_URL", "https://modelslab.com/api/v7/images/text-to-image")
    IMAGE_MODEL_ID: str = os.getenv("IMAGE_MODEL_ID", "nano-banana-t2i")
    IMAGE_SIZE: int = int(os.getenv("IMAGE_SIZE", "512"))

    # Narration (ElevenLabs)
    NARRATOR_VOICE_ID: str = os.getenv("NARRATOR_VOICE_ID", "21m00Tcm4TlvDq8ikWAM")  # Rachel
    TTS_MODEL: str = os.getenv("TTS_MODEL", "eleven_multilingual_v2")

    REQUEST_TIMEOUT_SECONDS: int = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "60"))

    LOG_DIR: Path = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))


settings = Settings()
