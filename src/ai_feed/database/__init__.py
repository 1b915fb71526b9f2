from .base import Base, get_db
from .models import Node

__all__ = ["Base", "get_db", "Node"]
