"""
UI spec workflow: image first, then title and story in parallel.

    painter --(blocked / no image)--> blocked --> END
        \\--> curator ----\\
         \\--> storyteller --> assemble --> END
"""
from typing import Optional, Protocol

from langgraph.graph import StateGraph, START, END

from decal_forge.core.graph.state import UiSpecState
from decal_forge.core.errors import TitleGenerationFailed, StoryGenerationFailed
from decal_forge.core.logger import log_agent_action
from decal_forge.schemas.ui_spec import ImageResult, TitleResult, StoryResult, UiSpecOutput


class ImageService(Protocol):
    async def generate(self, prompt: str) -> ImageResult: ...


class TitleService(Protocol):
    async def generate(self, prompt: str) -> TitleResult: ...


class StoryService(Protocol):
    async def generate(self, prompt: str) -> StoryResult: ...


# --- EDGES ---

def check_image(state: UiSpecState):
    image = state["image"]
    if image.blocked or not image.media:
        return "blocked"
    return ["curator", "storyteller"]


def build_ui_spec_graph(painter: ImageService, curator: TitleService, storyteller: StoryService):
    """Compile the graph with the given collaborators bound into its nodes."""

    # --- NODES ---

    async def painter_node(state: UiSpecState) -> UiSpecState:
        image = await painter.generate(state["prompt"])
        log_agent_action("painter", "Image generated", f"blocked={image.blocked} media={bool(image.media)}")
        return {"image": image}

    async def blocked_node(state: UiSpecState) -> UiSpecState:
        image = state["image"]
        log_agent_action("orchestrator", "Prompt blocked", image.reason or "no image returned", success=False)
        return {"output": UiSpecOutput.blocked_result(image.reason)}

    async def curator_node(state: UiSpecState) -> UiSpecState:
        return {"title": await curator.generate(state["prompt"])}

    async def storyteller_node(state: UiSpecState) -> UiSpecState:
        return {"story": await storyteller.generate(state["prompt"])}

    async def assemble_node(state: UiSpecState) -> UiSpecState:
        title = state["title"].title
        story = state["story"]

        if not title:
            raise TitleGenerationFailed()
        if not story.story or not story.audio:
            raise StoryGenerationFailed()

        log_agent_action("orchestrator", "UI spec assembled", f"title={title!r}")
        return {
            "output": UiSpecOutput.complete(
                title=title,
                story=story.story,
                image_url=state["image"].media,
                story_audio=story.audio,
            )
        }

    # --- GRAPH ---

    workflow = StateGraph(UiSpecState)

    workflow.add_node("painter", painter_node)
    workflow.add_node("blocked", blocked_node)
    workflow.add_node("curator", curator_node)
    workflow.add_node("storyteller", storyteller_node)
    workflow.add_node("assemble", assemble_node)

    workflow.add_edge(START, "painter")
    workflow.add_conditional_edges("painter", check_image, ["blocked", "curator", "storyteller"])

    # Fan-in: assemble runs once both branches have finished
    workflow.add_edge(["curator", "storyteller"], "assemble")

    workflow.add_edge("blocked", END)
    workflow.add_edge("assemble", END)

    return workflow.compile()


class UiSpecOrchestrator:
    """
    Turns a prompt into a UiSpecOutput.

    Collaborators default to the production agents (ModelsLab, Groq,
    ElevenLabs); tests inject their own.
    """

    def __init__(
        self,
        painter: Optional[ImageService] = None,
        curator: Optional[TitleService] = None,
        storyteller: Optional[StoryService] = None,
    ):
        if painter is None:
            from decal_forge.agents.painter.painter import ImageGenerator
            painter = ImageGenerator()
        if curator is None:
            from decal_forge.agents.curator.curator import TitleGenerator
            curator = TitleGenerator()
        if storyteller is None:
            from decal_forge.agents.narrative.storyteller import StoryGenerator
            storyteller = StoryGenerator()

        self.painter = painter
        self.curator = curator
        self.storyteller = storyteller
        self.graph = build_ui_spec_graph(painter, curator, storyteller)

    async def generate(self, prompt: str) -> UiSpecOutput:
        if not prompt or not prompt.strip():
            raise ValueError("prompt must be a non-empty string")

        log_agent_action("orchestrator", "UI spec requested", prompt[:80])
        final_state = await self.graph.ainvoke({"prompt": prompt})
        return final_state["output"]


_default_orchestrator: Optional[UiSpecOrchestrator] = None


def get_orchestrator() -> UiSpecOrchestrator:
    global _default_orchestrator
    if _default_orchestrator is None:
        _default_orchestrator = UiSpecOrchestrator()
    return _default_orchestrator


async def generate_ui_spec(prompt: str) -> UiSpecOutput:
    """Generate title, story, image and narration for a decal prompt."""
    return await get_orchestrator().generate(prompt)
