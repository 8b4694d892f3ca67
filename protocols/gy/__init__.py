"""
Gy Credit-Control model (3GPP TS 32.299)
"""

from .gy import (
    SERVICE_CONTEXT_ID_DEFAULT,
    SERVICE_ID_DEFAULT,
    FinalUnitAction,
    UsedCreditsType,
    SessionState,
    UsedCredits,
    QosRequestInfo,
    CreditControlRequest,
    ReceivedCredits,
    CreditControlAnswer,
    FinalUnitIndication,
    MSCCDiameterMessage,
    CCADiameterMessage,
    ReAuthRequest,
    ReAuthAnswer,
    received_credits_from_mscc,
    answer_from_message,
    check_answer,
)

from .avp_mapping import (
    AVPDataType,
    AVPField,
    AVP_MAPPINGS,
    avp_names,
    to_avps,
    from_avps,
)

__all__ = [
    'SERVICE_CONTEXT_ID_DEFAULT',
    'SERVICE_ID_DEFAULT',
    'FinalUnitAction',
    'UsedCreditsType',
    'SessionState',
    'UsedCredits',
    'QosRequestInfo',
    'CreditControlRequest',
    'ReceivedCredits',
    'CreditControlAnswer',
    'FinalUnitIndication',
    'MSCCDiameterMessage',
    'CCADiameterMessage',
    'ReAuthRequest',
    'ReAuthAnswer',
    'received_credits_from_mscc',
    'answer_from_message',
    'check_answer',
    'AVPDataType',
    'AVPField',
    'AVP_MAPPINGS',
    'avp_names',
    'to_avps',
    'from_avps',
]
