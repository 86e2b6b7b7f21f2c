from . import insights

__all__ = ["insights"]
