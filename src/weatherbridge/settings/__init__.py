"""Settings management.

This package provides:
- BridgeSettings: User-configurable settings loaded from config.yaml
"""

from weatherbridge.settings.user import BridgeSettings

__all__ = ["BridgeSettings"]
