from typing import TypedDict, Optional

from decal_forge.schemas.ui_spec import ImageResult, TitleResult, StoryResult, UiSpecOutput


class UiSpecState(TypedDict, total=False):
    # Input
    prompt: str

    # Collaborator results
    image: Optional[ImageResult]
    title: Optional[TitleResult]
    story: Optional[StoryResult]

    # Final
    output: Optional[UiSpecOutput]
