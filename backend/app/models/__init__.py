from .Admin import Admin
from .Article import Article
from .JWTAuthToken import TokenPayload

__all__ = ["Admin", "Article", "TokenPayload"]
