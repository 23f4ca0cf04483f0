from .ids import UserId

__all__ = ["UserId"]
