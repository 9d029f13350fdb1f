from .processor import TaskProcessor

__all__ = ["TaskProcessor"]
