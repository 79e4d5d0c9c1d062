"""Coordinators - Orchestration layer connecting UI with business logic."""

from .conversation_coordinator import ConversationCoordinator, RequestKind

__all__ = [
    "ConversationCoordinator",
    "RequestKind",
]
