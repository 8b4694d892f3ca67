"""
Diameter Credit-Control Application (RFC 4006)

Shared vocabulary for the Credit-Control interfaces (Gy, and Gx-style usage
monitoring): request types, result codes, the AVP codes the Gy model binds to
and the Granted-Service-Unit grouped AVP.

Encoding to and from the binary AVP format is done by the external codec.

Reference: RFC 4006 (2005-08), RFC 6733 (2012-10)
"""

from enum import IntEnum
from typing import Optional
from dataclasses import dataclass

from config import get_default


# =============================================================================
# Protocol Constants (RFC 4006 Section 12)
# =============================================================================

CREDIT_CONTROL_APPLICATION_ID = get_default("auth_application_id")


class CreditRequestType(IntEnum):
    """CC-Request-Type values (RFC 4006 Section 8.3)"""
    INITIAL = 1
    UPDATE = 2
    TERMINATION = 3


class AVPCode(IntEnum):
    """AVP codes used by the Credit-Control model (RFC 6733 / RFC 4006 / TS 29.061 / TS 32.299)

    TGPP_* and the TS 29.329/32.299/29.212 codes carry Vendor-Id 10415.
    """
    # 3GPP vendor specific (TS 29.061)
    TGPP_CHARGING_ID = 2
    TGPP_SGSN_ADDRESS = 6
    TGPP_SGSN_MCC_MNC = 18
    TGPP_USER_LOCATION_INFO = 22

    # Base protocol and NASREQ
    FRAMED_IP_ADDRESS = 8
    CALLED_STATION_ID = 30
    SESSION_ID = 263
    RESULT_CODE = 268

    # Credit-Control (RFC 4006)
    CC_INPUT_OCTETS = 412
    CC_OUTPUT_OCTETS = 414
    CC_REQUEST_NUMBER = 415
    CC_REQUEST_TYPE = 416
    CC_TOTAL_OCTETS = 421
    FINAL_UNIT_INDICATION = 430
    GRANTED_SERVICE_UNIT = 431
    RATING_GROUP = 432
    SUBSCRIPTION_ID = 443
    SUBSCRIPTION_ID_DATA = 444
    USED_SERVICE_UNIT = 446
    VALIDITY_TIME = 448
    FINAL_UNIT_ACTION = 449
    MULTIPLE_SERVICES_CREDIT_CONTROL = 456
    USER_EQUIPMENT_INFO = 458
    USER_EQUIPMENT_INFO_VALUE = 460

    # 3GPP (TS 29.329, TS 32.299, TS 29.212)
    MSISDN = 701
    REPORTING_REASON = 872
    QOS_INFORMATION = 1016
    APN_AGGREGATE_MAX_BITRATE_DL = 1040
    APN_AGGREGATE_MAX_BITRATE_UL = 1041


class DiameterResultCode(IntEnum):
    """Result-Code values (RFC 6733 Section 7.1, RFC 4006 Section 9)"""
    # Success
    DIAMETER_SUCCESS = 2001
    DIAMETER_LIMITED_SUCCESS = 2002

    # Protocol errors
    DIAMETER_UNABLE_TO_DELIVER = 3002
    DIAMETER_TOO_BUSY = 3004

    # Transient failures
    DIAMETER_END_USER_SERVICE_DENIED = 4010
    DIAMETER_CREDIT_CONTROL_NOT_APPLICABLE = 4011
    DIAMETER_CREDIT_LIMIT_REACHED = 4012

    # Permanent failures
    DIAMETER_UNKNOWN_SESSION_ID = 5002
    DIAMETER_AUTHORIZATION_REJECTED = 5003
    DIAMETER_MISSING_AVP = 5005
    DIAMETER_UNABLE_TO_COMPLY = 5012
    DIAMETER_USER_UNKNOWN = 5030
    DIAMETER_RATING_FAILED = 5031


def is_success(result_code: int) -> bool:
    """Result codes in the 2xxx class are successes (RFC 6733 Section 7.1.2)."""
    return 2000 <= result_code < 3000


# =============================================================================
# Grouped AVPs
# =============================================================================

@dataclass(frozen=True)
class GrantedServiceUnit:
    """Granted-Service-Unit AVP (RFC 4006 Section 8.17)

    Each volume is optional: an absent CC-*-Octets AVP is not the same grant
    as a zero one.
    """
    total_octets: Optional[int] = None
    input_octets: Optional[int] = None
    output_octets: Optional[int] = None

    def is_empty(self) -> bool:
        return (
            self.total_octets is None
            and self.input_octets is None
            and self.output_octets is None
        )
