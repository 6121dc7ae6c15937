"""Reactive store backends."""

from entityadapter.storage.local import LocalStore
from entityadapter.storage.protocol import Listener, StateContainer, Unsubscribe

__all__ = [
    "StateContainer",
    "LocalStore",
    "Listener",
    "Unsubscribe",
]
