"""
Gy Credit-Control Model (3GPP TS 32.299, RFC 4006)

This module defines the records exchanged between the session charging client
and the Online Charging System (OCS) over Gy:

- CreditControlRequest / UsedCredits: usage reports and credit requests
- CreditControlAnswer / ReceivedCredits: grants returned by the OCS
- CCADiameterMessage / MSCCDiameterMessage: the answer as laid out in AVPs
- ReAuthRequest / ReAuthAnswer: OCS-initiated re-authorization

All records are frozen. Field to AVP bindings live in avp_mapping.py.

Reference: 3GPP TS 32.299 V15.5.0 (2019-06)
"""

import logging
from enum import Enum, IntEnum
from typing import Optional, Tuple
from dataclasses import dataclass, field

from config import get_default
from protocols.credit_control import (
    CreditRequestType,
    GrantedServiceUnit,
    ProtocolError,
    CorrelationError,
    is_success,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Protocol Constants
# =============================================================================

SERVICE_CONTEXT_ID_DEFAULT = get_default("service_context_id")  # Packet-Switch service context
SERVICE_ID_DEFAULT = get_default("service_id")


class FinalUnitAction(IntEnum):
    """Final-Unit-Action values (RFC 4006 Section 8.35)"""
    TERMINATE = 0
    REDIRECT = 1
    RESTRICT_ACCESS = 2


class UsedCreditsType(IntEnum):
    """Reporting-Reason values (3GPP TS 32.299 Section 7.2.175)

    Values are the ones placed on the wire. Append new reasons, never insert.
    """
    THRESHOLD = 0
    QHT = 1                         # Quota holding time expired
    FINAL = 2                       # UE disconnected, flow not in use
    QUOTA_EXHAUSTED = 3             # UE hit credit limit
    VALIDITY_TIMER_EXPIRED = 4      # Credit expired
    OTHER_QUOTA_TYPE = 5
    RATING_CONDITION_CHANGE = 6
    FORCED_REAUTHORISATION = 7
    POOL_EXHAUSTED = 8


class SessionState(str, Enum):
    """Charging session states driven by answers, FUIs and RARs"""
    ACTIVE = "ACTIVE"
    PENDING_REAUTH = "PENDING_REAUTH"
    TERMINATED = "TERMINATED"


# =============================================================================
# Request side
# =============================================================================

@dataclass(frozen=True)
class UsedCredits:
    """Usage for one rating group since the last report"""
    rating_group: int = 0
    input_octets: int = 0
    output_octets: int = 0
    total_octets: int = 0
    type: UsedCreditsType = UsedCreditsType.THRESHOLD


@dataclass(frozen=True)
class QosRequestInfo:
    apn_agg_max_bit_rate_ul: int = 0
    apn_agg_max_bit_rate_dl: int = 0


@dataclass(frozen=True)
class CreditControlRequest:
    """Credit-Control-Request sent to the OCS

    request_number increases for every request of a session; session_id does
    not change for the session's lifetime.
    """
    session_id: str
    type: CreditRequestType
    imsi: str
    request_number: int
    ue_ipv4: str = ""
    spgw_ipv4: str = ""
    apn: str = ""
    imei: str = ""
    plmn_id: str = ""
    gc_id: str = ""
    user_location: bytes = b""
    msisdn: bytes = b""
    qos: Optional[QosRequestInfo] = None
    credits: Tuple[UsedCredits, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "credits", tuple(self.credits))


# =============================================================================
# Answer side
# =============================================================================

@dataclass(frozen=True)
class ReceivedCredits:
    """Grant returned by the OCS for one rating group"""
    result_code: int = 0
    rating_group: int = 0
    granted_units: Optional[GrantedServiceUnit] = None
    validity_time: int = 0
    is_final: bool = False
    final_action: FinalUnitAction = FinalUnitAction.TERMINATE  # unused if is_final is False

    @property
    def effective_final_action(self) -> Optional[FinalUnitAction]:
        """The action to apply on exhaustion, or None when the grant is not final."""
        if not self.is_final:
            return None
        return self.final_action


@dataclass(frozen=True)
class CreditControlAnswer:
    result_code: int = 0
    session_id: str = ""
    request_number: int = 0
    credits: Tuple[ReceivedCredits, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "credits", tuple(self.credits))


@dataclass(frozen=True)
class FinalUnitIndication:
    action: FinalUnitAction = FinalUnitAction.TERMINATE


@dataclass(frozen=True)
class MSCCDiameterMessage:
    """Multiple-Services-Credit-Control AVP of a CCA"""
    result_code: int = 0
    granted_service_unit: GrantedServiceUnit = field(default_factory=GrantedServiceUnit)
    validity_time: int = 0
    final_unit_indication: Optional[FinalUnitIndication] = None
    rating_group: int = 0


@dataclass(frozen=True)
class CCADiameterMessage:
    """Credit-Control-Answer laid out as AVPs"""
    session_id: str = ""
    request_number: int = 0
    result_code: int = 0
    request_type: int = 0
    credit_control: Tuple[MSCCDiameterMessage, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "credit_control", tuple(self.credit_control))


# =============================================================================
# Re-authorization
# =============================================================================

@dataclass(frozen=True)
class ReAuthRequest:
    """Re-Auth-Request received from the OCS to initiate a credit update

    rating_group is None when the whole session is being re-authorized.
    """
    session_id: str = ""
    rating_group: Optional[int] = None


@dataclass(frozen=True)
class ReAuthAnswer:
    """Re-Auth-Answer sent back to the OCS"""
    session_id: str = ""
    result_code: int = 0


# =============================================================================
# Answer interpretation
# =============================================================================

def received_credits_from_mscc(mscc: MSCCDiameterMessage) -> ReceivedCredits:
    """Build the grant for one rating group out of its MSCC AVP."""
    gsu = mscc.granted_service_unit
    fui = mscc.final_unit_indication
    return ReceivedCredits(
        result_code=mscc.result_code,
        rating_group=mscc.rating_group,
        granted_units=None if gsu.is_empty() else gsu,
        validity_time=mscc.validity_time,
        is_final=fui is not None,
        final_action=fui.action if fui is not None else FinalUnitAction.TERMINATE,
    )


def answer_from_message(cca: CCADiameterMessage) -> CreditControlAnswer:
    """Convert a decoded CCA into the answer handed to the charging client."""
    return CreditControlAnswer(
        result_code=cca.result_code,
        session_id=cca.session_id,
        request_number=cca.request_number,
        credits=tuple(received_credits_from_mscc(mscc) for mscc in cca.credit_control),
    )


def check_answer(request: CreditControlRequest, answer: CreditControlAnswer) -> None:
    """Verify that an answer belongs to a request and was successful.

    Raises CorrelationError if session id or request number differ and
    ProtocolError if the answer's Result-Code is not a success.
    """
    if answer.session_id != request.session_id:
        raise CorrelationError(
            f"Answer for session {answer.session_id!r} does not match request "
            f"session {request.session_id!r}"
        )
    if answer.request_number != request.request_number:
        raise CorrelationError(
            f"Answer request number {answer.request_number} does not match "
            f"request number {request.request_number} for session {request.session_id!r}"
        )
    if not is_success(answer.result_code):
        logger.warning(
            f"CCA for session {answer.session_id} failed with Result-Code {answer.result_code}"
        )
        raise ProtocolError(
            f"Credit-Control-Answer returned Result-Code {answer.result_code}",
            result_code=answer.result_code,
        )
