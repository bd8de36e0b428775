"""Test DI wiring: in-memory persistence and the test container builder."""

from .container import build_test_container
from .persistence import MockPersistenceProvider

__all__ = [
    "MockPersistenceProvider",
    "build_test_container",
]
