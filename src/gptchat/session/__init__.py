"""Session orchestration for gptchat."""

from .controller import ClientFactory, SessionController
from .operations import Chat, Clean, Noop, Operation, SetHint, plan_operations

__all__ = [
    "Chat",
    "Clean",
    "ClientFactory",
    "Noop",
    "Operation",
    "SessionController",
    "SetHint",
    "plan_operations",
]
