"""Player domain ports."""

from .profile_directory import Profile, ProfileDirectory

__all__ = ["Profile", "ProfileDirectory"]
