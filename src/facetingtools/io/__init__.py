from .off import to_off, write_off

__all__ = [
    "to_off",
    "write_off",
]
