"""Open API client components."""

from .auth import AuthHelper, ClientAuth, UserAuth
from .post import PostPublish
from .user import UserApi

__all__ = ["AuthHelper", "ClientAuth", "UserAuth", "PostPublish", "UserApi"]
