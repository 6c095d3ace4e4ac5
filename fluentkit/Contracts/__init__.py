from .OwnerInterface import OwnerInterface

__all__ = ["OwnerInterface"]
