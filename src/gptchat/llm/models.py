from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Role of a message sender."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(default="", description="Content of the message")

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=Role.ASSISTANT, content=content)


class ChatRequest(BaseModel):
    """Body of a chat-completion request."""

    model: str = Field(description="Model name sent to the endpoint")
    messages: list[ChatMessage] = Field(
        default_factory=list,
        description="Conversation so far, oldest first"
    )


class Usage(BaseModel):
    """Token accounting reported by the endpoint."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Choice(BaseModel):
    """One candidate reply."""

    index: int = 0
    message: ChatMessage
    finish_reason: str | None = None


class ChatResponse(BaseModel):
    """Response from a chat-completion endpoint.

    Only ``choices[0].message`` is consumed; the remaining fields are
    accepted so that a full response validates, but nothing reads them.
    """

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice] = Field(description="Candidate replies, in index order")
    usage: Usage | None = Field(default=None, description="Token usage information")
