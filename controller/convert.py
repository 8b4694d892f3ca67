# File location: controller/convert.py
# Projection of controller configuration onto the managed (mconfig) schema

"""
Controller -> mconfig projection

Each function copies every field the managed schema knows about from the
controller record. Values are copied verbatim: no unit conversion and no
default substitution happens here. A missing (None) source record projects
to the all-zero managed record.
"""

import logging
from typing import Optional

from opentelemetry import trace

from mconfig import models as mconfig
from .models import (
    DiamServerConfig,
    DiamClientConfig,
    HSSConfigSubscriptionProfile,
)

logger = logging.getLogger(__name__)

# OpenTelemetry tracer
tracer = trace.get_tracer(__name__)


def diam_server_config_to_mconfig(
    config: Optional[DiamServerConfig],
) -> mconfig.DiamServerConfig:
    """Copy a controller Diameter server config into a new mconfig record."""
    with tracer.start_as_current_span("mconfig_projection") as span:
        span.set_attribute("entity", "DiamServerConfig")
        span.set_attribute("source_present", config is not None)
        if config is None:
            logger.debug("No DiamServerConfig on controller, projecting zero value")
            return mconfig.DiamServerConfig()
        return mconfig.DiamServerConfig(
            protocol=config.protocol,
            address=config.address,
            local_address=config.local_address,
            dest_realm=config.dest_realm,
            dest_host=config.dest_host,
        )


def diam_client_config_to_mconfig(
    config: Optional[DiamClientConfig],
) -> mconfig.DiamClientConfig:
    """Copy a controller Diameter client config into a new mconfig record."""
    with tracer.start_as_current_span("mconfig_projection") as span:
        span.set_attribute("entity", "DiamClientConfig")
        span.set_attribute("source_present", config is not None)
        if config is None:
            logger.debug("No DiamClientConfig on controller, projecting zero value")
            return mconfig.DiamClientConfig()
        return mconfig.DiamClientConfig(
            protocol=config.protocol,
            address=config.address,
            retransmits=config.retransmits,
            watchdog_interval=config.watchdog_interval,
            retry_count=config.retry_count,
            local_address=config.local_address,
            product_name=config.product_name,
            realm=config.realm,
            host=config.host,
            dest_realm=config.dest_realm,
            dest_host=config.dest_host,
        )


def subscription_profile_to_mconfig(
    profile: Optional[HSSConfigSubscriptionProfile],
) -> mconfig.HSSConfigSubscriptionProfile:
    """Copy a controller subscription profile into a new mconfig record."""
    with tracer.start_as_current_span("mconfig_projection") as span:
        span.set_attribute("entity", "HSSConfigSubscriptionProfile")
        span.set_attribute("source_present", profile is not None)
        if profile is None:
            logger.debug("No subscription profile on controller, projecting zero value")
            return mconfig.HSSConfigSubscriptionProfile()
        return mconfig.HSSConfigSubscriptionProfile(
            max_ul_bit_rate=profile.max_ul_bit_rate,
            max_dl_bit_rate=profile.max_dl_bit_rate,
        )
