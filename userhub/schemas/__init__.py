from .user import UserCreate, UserResponse, UserList

__all__ = [
    "UserCreate", "UserResponse", "UserList",
]
