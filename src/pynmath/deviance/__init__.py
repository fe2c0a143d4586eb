from .bd0 import bd0, ebd0
from .stirlerr import stirlerr

__all__ = ["bd0", "ebd0", "stirlerr"]
