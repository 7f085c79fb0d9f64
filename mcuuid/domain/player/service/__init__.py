"""Player domain services."""

from .classifier import classify
from .derivation import offline_uuid

__all__ = ["classify", "offline_uuid"]
