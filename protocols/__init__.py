"""
Charging Protocol Implementations

This package provides the Diameter charging vocabulary used by the gateway:
- credit_control: Diameter Credit-Control Application (RFC 4006)
- gy: Gy online charging model and AVP mapping (TS 32.299)
"""

from .credit_control import (
    CreditRequestType,
    GrantedServiceUnit,
    DiameterResultCode,
    DecodeError,
    ProtocolError,
    CorrelationError,
)

from .gy import (
    FinalUnitAction,
    UsedCreditsType,
    CreditControlRequest,
    CreditControlAnswer,
    ReAuthRequest,
    ReAuthAnswer,
    to_avps,
    from_avps,
)

__all__ = [
    # Credit-Control
    'CreditRequestType',
    'GrantedServiceUnit',
    'DiameterResultCode',
    'DecodeError',
    'ProtocolError',
    'CorrelationError',
    # Gy
    'FinalUnitAction',
    'UsedCreditsType',
    'CreditControlRequest',
    'CreditControlAnswer',
    'ReAuthRequest',
    'ReAuthAnswer',
    'to_avps',
    'from_avps',
]
