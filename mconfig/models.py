# File location: mconfig/models.py
# Managed configuration (mconfig) models consumed by the gateway runtime

from pydantic import BaseModel, ConfigDict, Field


class DiamServerConfig(BaseModel):
    """Diameter server connection parameters as seen by the gateway"""
    model_config = ConfigDict(frozen=True)

    protocol: str = Field("", description="Transport protocol (tcp, sctp)")
    address: str = Field("", description="Server address host:port")
    local_address: str = Field("", description="Local bind address")
    dest_realm: str = Field("", description="Destination-Realm")
    dest_host: str = Field("", description="Destination-Host")


class DiamClientConfig(BaseModel):
    """Diameter client identity and behaviour as seen by the gateway"""
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


class HSSConfigSubscriptionProfile(BaseModel):
    """Per-subscriber bandwidth defaults"""
    model_config = ConfigDict(frozen=True)

    max_ul_bit_rate: int = Field(0, ge=0, description="Max uplink bit rate (bps)")
    max_dl_bit_rate: int = Field(0, ge=0, description="Max downlink bit rate (bps)")
