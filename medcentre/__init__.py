from medcentre.core.config import Settings
from medcentre.core.logging import configure_logging
from medcentre.manager import SchedulingManager

__all__ = ["SchedulingManager", "Settings", "configure_logging"]
