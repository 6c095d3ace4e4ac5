from .Fluent import Fluent

__all__ = ["Fluent"]
