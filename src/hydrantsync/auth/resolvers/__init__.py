"""Concrete credentials resolvers."""

from hydrantsync.auth.resolvers.env import EnvCredentialsResolver
from hydrantsync.auth.resolvers.static import StaticCredentialsResolver

__all__ = ["EnvCredentialsResolver", "StaticCredentialsResolver"]
