"""OAuth clients for the user and client-credentials flows."""

from .client import ClientAuth
from .helpers import AuthHelper
from .user import AUTHORIZATION_URI_PARAMS, UserAuth

__all__ = ["AUTHORIZATION_URI_PARAMS", "AuthHelper", "ClientAuth", "UserAuth"]
