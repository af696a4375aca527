from catalogsync.auth.resolvers.env import EnvCredentialResolver
from catalogsync.auth.resolvers.static import StaticCredentialResolver

__all__ = ["EnvCredentialResolver", "StaticCredentialResolver"]
