# File location: mconfig/__init__.py
# Managed configuration schema pushed to the gateway

from .models import (
    DiamServerConfig,
    DiamClientConfig,
    HSSConfigSubscriptionProfile,
)

__all__ = [
    "DiamServerConfig",
    "DiamClientConfig",
    "HSSConfigSubscriptionProfile",
]
