from docvault.domains.identity.entities import User, UserRole
from docvault.domains.identity.schemas import UserCreate, UserLogin, UserResponse, Token
from docvault.domains.identity.services import IdentityService

__all__ = [
    "User", "UserRole",
    "UserCreate", "UserLogin", "UserResponse", "Token",
    "IdentityService"
]
