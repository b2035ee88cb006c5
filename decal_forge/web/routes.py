from fastapi import APIRouter, Depends, HTTPException

from decal_forge.core.graph.workflow import UiSpecOrchestrator, get_orchestrator
from decal_forge.core.errors import TitleGenerationFailed, StoryGenerationFailed, ServiceNotConfigured
from decal_forge.core.logger import log_error
from decal_forge.agents.context_loader import get_user_friendly_error
from decal_forge.schemas.ui_spec import UiSpecRequest, UiSpecOutput
from decal_forge.web.icons import resolve

router = APIRouter()


def _error_detail(code: str) -> dict:
    return {"code": code, "message": get_user_friendly_error(code)}


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


@router.post("/api/ui-spec", response_model=UiSpecOutput, response_model_exclude_none=True)
async def create_ui_spec(
    payload: UiSpecRequest,
    orchestrator: UiSpecOrchestrator = Depends(get_orchestrator),
):
    """
    Generate a decal: title, story, image and narration.
    A prompt rejected by the safety filter is a normal 200 response with blocked=true.
    """
    try:
        return await orchestrator.generate(payload.prompt)
    except (TitleGenerationFailed, StoryGenerationFailed) as exc:
        log_error("UI spec generation incomplete", exc, {"prompt": payload.prompt[:80]})
        raise HTTPException(status_code=502, detail=_error_detail(exc.code)) from exc
    except ServiceNotConfigured as exc:
        log_error("AI service not configured", exc)
        raise HTTPException(status_code=503, detail=_error_detail(exc.code)) from exc
    except Exception as exc:
        log_error("Unexpected error during UI spec generation", exc, {"prompt": payload.prompt[:80]})
        raise HTTPException(status_code=500, detail=_error_detail("GENERATION_ERROR")) from exc


@router.get("/api/icons/{name}")
async def get_icon(name: str):
    icon = resolve(name)
    if icon is None:
        raise HTTPException(status_code=404, detail=f"Unknown icon: {name}")
    return {"name": icon.name, "lucide": icon.lucide, "html": icon.render()}
