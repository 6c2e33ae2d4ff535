"""Generic building blocks shared by the soundboard services.

- **PydanticPersistence**: load/save Pydantic models as JSON with backups
  and atomic writes
- **ObserverManager**: ordered, thread-safe observer list
"""

from soundboard.model_manager.observer import ObserverManager
from soundboard.model_manager.persistence import PydanticPersistence

__all__ = [
    "ObserverManager",
    "PydanticPersistence",
]
