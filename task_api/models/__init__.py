from .task import Task, MAX_DESCRIPTION_LENGTH
from .results import NotFound, InvalidInput

# Export all models for easy importing
__all__ = ["Task", "MAX_DESCRIPTION_LENGTH", "NotFound", "InvalidInput"]
