from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from decal_forge.core.config import settings
from decal_forge.core.logger import get_logger
from decal_forge.web import routes as web_routes

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Check that the AI services are configured
    for env_var in ("GROQ_API_KEY", "STABLE_DIFFUSION_API_KEY", "ELEVENLABS_API_KEY"):
        if not getattr(settings, env_var):
            logger.warning(f"{env_var} not found in environment variables")
    yield


app = FastAPI(title=f"{settings.PROJECT_NAME} API", version=settings.VERSION, lifespan=lifespan)

# Allow calls from the separate web front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

#Include Routers
app.include_router(web_routes.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("decal_forge.main:app", host="0.0.0.0", port=8000, reload=True)
