"""Data models for the persisted documents.

These models define the shape of ``config.json`` and ``history.json``,
independent of how the store reads and writes them.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..llm.models import ChatMessage, Role

DEFAULT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-3.5-turbo"


class Config(BaseModel):
    """Endpoint configuration.

    Created once with defaults; afterwards only edited by hand.
    """

    url: str = Field(default=DEFAULT_URL, description="Chat-completion endpoint URL")
    model: str = Field(default=DEFAULT_MODEL, description="Model name sent with each request")
    key: str = Field(default="", description="Bearer token for the endpoint")


class History(BaseModel):
    """Conversation state persisted between invocations."""

    hint: ChatMessage = Field(
        default_factory=lambda: ChatMessage.system(""),
        description="System message steering the assistant"
    )
    history: list[ChatMessage] = Field(
        default_factory=list,
        description="Prior exchanges, oldest first"
    )

    @field_validator("hint", mode="before")
    @classmethod
    def _default_hint_role(cls, value: Any) -> Any:
        # Older files store the empty hint as {"role": "", "content": ""}
        if isinstance(value, dict) and not value.get("role"):
            return {"role": Role.SYSTEM.value, "content": value.get("content", "")}
        return value

    def with_hint(self, text: str) -> "History":
        """Return a copy with the hint replaced by a system message."""
        return self.model_copy(update={"hint": ChatMessage.system(text)})

    def with_turn(self, prompt: ChatMessage, reply: ChatMessage) -> "History":
        """Return a copy with one completed chat turn appended."""
        return self.model_copy(update={"history": [*self.history, prompt, reply]})

    def outbound_messages(self, prompt: ChatMessage) -> list[ChatMessage]:
        """Build the sequence sent to the endpoint for a new prompt.

        The hint is stored alongside the history but is not sent.
        """
        return [*self.history, prompt]
