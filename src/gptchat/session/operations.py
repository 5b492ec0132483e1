"""Operations a single invocation can perform.

The command line is translated once into a list of these variants; the
controller then executes them in order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Clean:
    """Reset the conversation history."""


@dataclass(frozen=True)
class SetHint:
    """Replace the stored system hint."""

    text: str


@dataclass(frozen=True)
class Chat:
    """Run one chat turn with ``prompt``."""

    prompt: str


@dataclass(frozen=True)
class Noop:
    """Nothing requested."""


Operation = Clean | SetHint | Chat | Noop


def plan_operations(
    clean: bool = False,
    hint: str | None = None,
    prompt: str | None = None,
) -> list[Operation]:
    """Decide what an invocation does.

    Clean takes priority and suppresses everything else. Otherwise a hint
    update runs before the chat turn, so the turn already sees the new hint.

    Args:
        clean: Whether the history should be wiped
        hint: New system hint, if supplied
        prompt: Prompt text; empty or None means no chat turn

    Returns:
        Operations in execution order (never empty)
    """
    if clean:
        return [Clean()]

    operations: list[Operation] = []
    if hint is not None:
        operations.append(SetHint(hint))
    if prompt:
        operations.append(Chat(prompt))

    return operations or [Noop()]
