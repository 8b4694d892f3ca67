# File location: controller/models.py
# Controller-authored configuration models
# Field names mirror the managed schema one-to-one; see controller/convert.py

from pydantic import BaseModel, ConfigDict, Field

from mconfig import models as mconfig


class DiamServerConfig(BaseModel):
    """Outbound Diameter server connection, as authored on the controller"""
    model_config = ConfigDict(frozen=True)

    protocol: str = Field("", description="Transport protocol (tcp, sctp)")
    address: str = Field("", description="Server address host:port")
    local_address: str = Field("", description="Local bind address")
    dest_realm: str = Field("", description="Destination-Realm")
    dest_host: str = Field("", description="Destination-Host")

    def to_mconfig(self) -> mconfig.DiamServerConfig:
        from .convert import diam_server_config_to_mconfig
        return diam_server_config_to_mconfig(self)


class DiamClientConfig(BaseModel):
    """Local Diameter client identity, as authored on the controller"""
    model_config = ConfigDict(frozen=True)

    protocol: str = Field("", description="Transport protocol (tcp, sctp)")
    address: str = Field("", description="Peer address host:port")
    retransmits: int = Field(0, ge=0, description="Request retransmit count")
    watchdog_interval: int = Field(0, ge=0, description="DWR interval in seconds")
    retry_count: int = Field(0, ge=0, description="Connection retry count")
    local_address: str = Field("", description="Local bind address")
    product_name: str = Field("", description="Product-Name sent in CER")
    realm: str = Field("", description="Origin-Realm")
    host: str = Field("", description="Origin-Host")
    dest_realm: str = Field("", description="Destination-Realm")
    dest_host: str = Field("", description="Destination-Host")

    def to_mconfig(self) -> mconfig.DiamClientConfig:
        from .convert import diam_client_config_to_mconfig
        return diam_client_config_to_mconfig(self)


class HSSConfigSubscriptionProfile(BaseModel):
    """Default bandwidth policy for a subscriber"""
    model_config = ConfigDict(frozen=True)

    max_ul_bit_rate: int = Field(0, ge=0, description="Max uplink bit rate (bps)")
    max_dl_bit_rate: int = Field(0, ge=0, description="Max downlink bit rate (bps)")

    def to_mconfig(self) -> mconfig.HSSConfigSubscriptionProfile:
        from .convert import subscription_profile_to_mconfig
        return subscription_profile_to_mconfig(self)
