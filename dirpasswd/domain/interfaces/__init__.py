"""Domain interfaces for dependency inversion.

These interfaces define the contracts the infrastructure layer implements:
- Directory: sessions, nodes and records of a directory service
- Prompt: secret input from the user
- System: boot mode detection and the local backend launcher
- Services: domain event publishing
"""

from .directory import (
    META_NODE_LOCATION,
    CredentialItems,
    IDirectoryNode,
    IDirectoryRecord,
    IDirectoryService,
    IDirectorySession,
)
from .prompt import ISecretPrompt
from .services import IEventPublisher
from .system import IBootModeProbe, ILocalBackendLauncher

__all__ = [
    "META_NODE_LOCATION",
    "CredentialItems",
    "IDirectoryNode",
    "IDirectoryRecord",
    "IDirectoryService",
    "IDirectorySession",
    "ISecretPrompt",
    "IEventPublisher",
    "IBootModeProbe",
    "ILocalBackendLauncher",
]
