"""
Diameter Credit-Control vocabulary (RFC 4006)
"""

from .credit_control import (
    CREDIT_CONTROL_APPLICATION_ID,
    CreditRequestType,
    AVPCode,
    DiameterResultCode,
    GrantedServiceUnit,
    is_success,
)

from .errors import (
    CreditControlError,
    DecodeError,
    ProtocolError,
    CorrelationError,
)

__all__ = [
    'CREDIT_CONTROL_APPLICATION_ID',
    'CreditRequestType',
    'AVPCode',
    'DiameterResultCode',
    'GrantedServiceUnit',
    'is_success',
    'CreditControlError',
    'DecodeError',
    'ProtocolError',
    'CorrelationError',
]
