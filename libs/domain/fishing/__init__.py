from .model import FishingConfig, FishingContext, FishingState
from .service import FishingService

__all__ = ["FishingConfig", "FishingContext", "FishingService", "FishingState"]
