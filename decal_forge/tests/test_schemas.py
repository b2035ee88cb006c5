import pytest
from pydantic import ValidationError

from decal_forge.schemas.ui_spec import UiSpecOutput, UiSpecRequest, DEFAULT_BLOCKED_REASON


def test_blocked_result_shape():
    """Test the blocked constructor fills the fixed fields."""
    output = UiSpecOutput.blocked_result("policy violation")

    assert output.title == "Blocked"
    assert output.story == ""
    assert output.image_url == ""
    assert output.story_audio == ""
    assert output.blocked is True
    assert output.blocked_reason == "policy violation"


def test_blocked_result_default_reason():
    assert UiSpecOutput.blocked_result().blocked_reason == DEFAULT_BLOCKED_REASON
    assert UiSpecOutput.blocked_result("").blocked_reason == DEFAULT_BLOCKED_REASON


def test_complete_result_omits_blocked_reason():
    output = UiSpecOutput.complete(title="T", story="S", image_url="img://1", story_audio="aud://1")

    dumped = output.model_dump(by_alias=True, exclude_none=True)
    assert "blockedReason" not in dumped
    assert dumped["imageUrl"] == "img://1"
    assert dumped["storyAudio"] == "aud://1"


def test_complete_result_requires_all_content():
    with pytest.raises(ValidationError):
        UiSpecOutput.complete(title="T", story="S", image_url="", story_audio="aud://1")


def test_blocked_result_cannot_carry_content():
    with pytest.raises(ValidationError):
        UiSpecOutput(
            title="Blocked", story="a story", image_url="", story_audio="",
            blocked=True, blocked_reason="no",
        )


def test_complete_result_cannot_carry_reason():
    with pytest.raises(ValidationError):
        UiSpecOutput(
            title="T", story="S", image_url="img://1", story_audio="aud://1",
            blocked=False, blocked_reason="why",
        )


def test_output_accepts_camel_case_input():
    output = UiSpecOutput.model_validate({
        "title": "T", "story": "S", "imageUrl": "img://1", "storyAudio": "aud://1", "blocked": False,
    })
    assert output.image_url == "img://1"


def test_request_rejects_empty_prompt():
    with pytest.raises(ValidationError):
        UiSpecRequest(prompt="")


def test_request_rejects_blank_prompt():
    with pytest.raises(ValidationError):
        UiSpecRequest(prompt="   ")


def test_request_keeps_prompt_text():
    assert UiSpecRequest(prompt=" a fox ").prompt == " a fox "
