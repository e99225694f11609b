from models.user import PublicUser, UserRecord

__all__ = ["PublicUser", "UserRecord"]
