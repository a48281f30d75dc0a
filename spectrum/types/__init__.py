from .mode import Mode, CHANNEL_NAMES, HUE_360, HUE_SPACES

__all__ = ["Mode", "CHANNEL_NAMES", "HUE_360", "HUE_SPACES"]
