from typing import Optional

from decal_forge.core.logger import log_agent_action
from decal_forge.agents.narrative.writer import StoryWriter
from decal_forge.agents.narrative.narrator import Narrator
from decal_forge.schemas.ui_spec import StoryResult


class StoryGenerator:
    """Story collaborator: writes the lore, then narrates it."""

    def __init__(self, writer: Optional[StoryWriter] = None, narrator: Optional[Narrator] = None):
        self.writer = writer or StoryWriter()
        self.narrator = narrator or Narrator()

    async def generate(self, prompt: str) -> StoryResult:
        story = await self.writer.write(prompt)
        if not story:
            log_agent_action("storyteller", "Story writing", "empty story, narration skipped", success=False)
            return StoryResult(story="", audio=None)

        audio = await self.narrator.narrate(story)
        log_agent_action("storyteller", "Story narrated", f"{len(story)} chars, audio={bool(audio)}", success=bool(audio))
        return StoryResult(story=story, audio=audio)
