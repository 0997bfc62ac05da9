from fittrack.core.config import settings
from fittrack.core.base import Base

__all__ = ["settings", "Base"]
