# File location: controller/__init__.py
# Controller-side configuration and its projection to mconfig

from .models import (
    DiamServerConfig,
    DiamClientConfig,
    HSSConfigSubscriptionProfile,
)
from .convert import (
    diam_server_config_to_mconfig,
    diam_client_config_to_mconfig,
    subscription_profile_to_mconfig,
)

__all__ = [
    "DiamServerConfig",
    "DiamClientConfig",
    "HSSConfigSubscriptionProfile",
    "diam_server_config_to_mconfig",
    "diam_client_config_to_mconfig",
    "subscription_profile_to_mconfig",
]
