from .menu import ConsoleMenu

__all__ = [
    "ConsoleMenu",
]
