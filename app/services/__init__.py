from app.services.auth import AuthService
from app.services.blog import BlogService

__all__ = ["AuthService", "BlogService"]
