from .user import UserCRUD, user_crud

__all__ = ["UserCRUD", "user_crud"]
