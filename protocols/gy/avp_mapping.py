"""
Gy AVP Mapping

Explicit field -> AVP tables for every Gy record the codec marshals. The codec
works on a nested dictionary view of a message:

    {"Session-Id": "gw;1;2", "Rating-Group": 7}

Grouped AVPs are nested dictionaries, repeated AVPs are lists. A field holding
None has no AVP in the dictionary, so an absent Rating-Group stays distinct
from Rating-Group 0. A grouped AVP with no members is left out as well.

Some scalar fields sit one level down inside a grouped AVP that has no record
of its own (the IMSI inside Subscription-Id, the octet counts inside
Used-Service-Unit). Their AVPField names that enclosing AVP in `within`.

Binary AVP encoding is out of scope here; see RFC 6733 Section 4.
"""

import logging
from enum import Enum, IntEnum
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple, Type
import dataclasses

from protocols.credit_control import (
    AVPCode,
    CreditRequestType,
    DecodeError,
    GrantedServiceUnit,
)
from .gy import (
    CCADiameterMessage,
    CreditControlRequest,
    FinalUnitAction,
    FinalUnitIndication,
    MSCCDiameterMessage,
    QosRequestInfo,
    ReAuthAnswer,
    ReAuthRequest,
    UsedCredits,
    UsedCreditsType,
)

logger = logging.getLogger(__name__)


class AVPDataType(str, Enum):
    """Basic and derived AVP data formats (RFC 6733 Section 4.2, 4.3)"""
    UNSIGNED32 = "Unsigned32"
    UNSIGNED64 = "Unsigned64"
    OCTET_STRING = "OctetString"
    UTF8STRING = "UTF8String"
    ADDRESS = "Address"  # textual IPv4/IPv6 address, packed by the codec
    ENUMERATED = "Enumerated"
    GROUPED = "Grouped"


class AVPField(NamedTuple):
    """Binding of one record attribute to one AVP"""
    attr: str
    avp: str
    code: int
    data_type: AVPDataType
    group: Optional[type] = None
    repeated: bool = False
    enum: Optional[Type[IntEnum]] = None
    within: Optional[str] = None


AVP_MAPPINGS: Dict[type, Tuple[AVPField, ...]] = {
    GrantedServiceUnit: (
        AVPField("total_octets", "CC-Total-Octets", AVPCode.CC_TOTAL_OCTETS, AVPDataType.UNSIGNED64),
        AVPField("input_octets", "CC-Input-Octets", AVPCode.CC_INPUT_OCTETS, AVPDataType.UNSIGNED64),
        AVPField("output_octets", "CC-Output-Octets", AVPCode.CC_OUTPUT_OCTETS, AVPDataType.UNSIGNED64),
    ),
    FinalUnitIndication: (
        AVPField("action", "Final-Unit-Action", AVPCode.FINAL_UNIT_ACTION, AVPDataType.ENUMERATED,
                 enum=FinalUnitAction),
    ),
    MSCCDiameterMessage: (
        AVPField("result_code", "Result-Code", AVPCode.RESULT_CODE, AVPDataType.UNSIGNED32),
        AVPField("granted_service_unit", "Granted-Service-Unit", AVPCode.GRANTED_SERVICE_UNIT,
                 AVPDataType.GROUPED, group=GrantedServiceUnit),
        AVPField("validity_time", "Validity-Time", AVPCode.VALIDITY_TIME, AVPDataType.UNSIGNED32),
        AVPField("final_unit_indication", "Final-Unit-Indication", AVPCode.FINAL_UNIT_INDICATION,
                 AVPDataType.GROUPED, group=FinalUnitIndication),
        AVPField("rating_group", "Rating-Group", AVPCode.RATING_GROUP, AVPDataType.UNSIGNED32),
    ),
    CCADiameterMessage: (
        AVPField("session_id", "Session-Id", AVPCode.SESSION_ID, AVPDataType.UTF8STRING),
        AVPField("request_number", "CC-Request-Number", AVPCode.CC_REQUEST_NUMBER, AVPDataType.UNSIGNED32),
        AVPField("result_code", "Result-Code", AVPCode.RESULT_CODE, AVPDataType.UNSIGNED32),
        AVPField("request_type", "CC-Request-Type", AVPCode.CC_REQUEST_TYPE, AVPDataType.ENUMERATED),
        AVPField("credit_control", "Multiple-Services-Credit-Control",
                 AVPCode.MULTIPLE_SERVICES_CREDIT_CONTROL, AVPDataType.GROUPED,
                 group=MSCCDiameterMessage, repeated=True),
    ),
    UsedCredits: (
        AVPField("rating_group", "Rating-Group", AVPCode.RATING_GROUP, AVPDataType.UNSIGNED32),
        AVPField("input_octets", "CC-Input-Octets", AVPCode.CC_INPUT_OCTETS, AVPDataType.UNSIGNED64,
                 within="Used-Service-Unit"),
        AVPField("output_octets", "CC-Output-Octets", AVPCode.CC_OUTPUT_OCTETS, AVPDataType.UNSIGNED64,
                 within="Used-Service-Unit"),
        AVPField("total_octets", "CC-Total-Octets", AVPCode.CC_TOTAL_OCTETS, AVPDataType.UNSIGNED64,
                 within="Used-Service-Unit"),
        AVPField("type", "Reporting-Reason", AVPCode.REPORTING_REASON, AVPDataType.ENUMERATED,
                 enum=UsedCreditsType, within="Used-Service-Unit"),
    ),
    QosRequestInfo: (
        AVPField("apn_agg_max_bit_rate_ul", "APN-Aggregate-Max-Bitrate-UL",
                 AVPCode.APN_AGGREGATE_MAX_BITRATE_UL, AVPDataType.UNSIGNED32),
        AVPField("apn_agg_max_bit_rate_dl", "APN-Aggregate-Max-Bitrate-DL",
                 AVPCode.APN_AGGREGATE_MAX_BITRATE_DL, AVPDataType.UNSIGNED32),
    ),
    CreditControlRequest: (
        AVPField("session_id", "Session-Id", AVPCode.SESSION_ID, AVPDataType.UTF8STRING),
        AVPField("type", "CC-Request-Type", AVPCode.CC_REQUEST_TYPE, AVPDataType.ENUMERATED,
                 enum=CreditRequestType),
        AVPField("imsi", "Subscription-Id-Data", AVPCode.SUBSCRIPTION_ID_DATA, AVPDataType.UTF8STRING,
                 within="Subscription-Id"),
        AVPField("request_number", "CC-Request-Number", AVPCode.CC_REQUEST_NUMBER, AVPDataType.UNSIGNED32),
        AVPField("ue_ipv4", "Framed-IP-Address", AVPCode.FRAMED_IP_ADDRESS, AVPDataType.ADDRESS),
        AVPField("spgw_ipv4", "3GPP-SGSN-Address", AVPCode.TGPP_SGSN_ADDRESS, AVPDataType.ADDRESS),
        AVPField("apn", "Called-Station-Id", AVPCode.CALLED_STATION_ID, AVPDataType.UTF8STRING),
        AVPField("imei", "User-Equipment-Info-Value", AVPCode.USER_EQUIPMENT_INFO_VALUE,
                 AVPDataType.UTF8STRING, within="User-Equipment-Info"),
        AVPField("plmn_id", "3GPP-SGSN-MCC-MNC", AVPCode.TGPP_SGSN_MCC_MNC, AVPDataType.UTF8STRING),
        AVPField("gc_id", "3GPP-Charging-Id", AVPCode.TGPP_CHARGING_ID, AVPDataType.UTF8STRING),
        AVPField("user_location", "3GPP-User-Location-Info", AVPCode.TGPP_USER_LOCATION_INFO,
                 AVPDataType.OCTET_STRING),
        AVPField("msisdn", "MSISDN", AVPCode.MSISDN, AVPDataType.OCTET_STRING),
        AVPField("qos", "QoS-Information", AVPCode.QOS_INFORMATION, AVPDataType.GROUPED,
                 group=QosRequestInfo),
        AVPField("credits", "Multiple-Services-Credit-Control",
                 AVPCode.MULTIPLE_SERVICES_CREDIT_CONTROL, AVPDataType.GROUPED,
                 group=UsedCredits, repeated=True),
    ),
    ReAuthRequest: (
        AVPField("session_id", "Session-Id", AVPCode.SESSION_ID, AVPDataType.UTF8STRING),
        AVPField("rating_group", "Rating-Group", AVPCode.RATING_GROUP, AVPDataType.UNSIGNED32),
    ),
    ReAuthAnswer: (
        AVPField("session_id", "Session-Id", AVPCode.SESSION_ID, AVPDataType.UTF8STRING),
        AVPField("result_code", "Result-Code", AVPCode.RESULT_CODE, AVPDataType.UNSIGNED32),
    ),
}

# [low, high) per integer AVP format; Enumerated is derived from Integer32
_INTEGER_RANGES = {
    AVPDataType.UNSIGNED32: (0, 2 ** 32),
    AVPDataType.UNSIGNED64: (0, 2 ** 64),
    AVPDataType.ENUMERATED: (-2 ** 31, 2 ** 31),
}


def _mapping_for(cls: type) -> Tuple[AVPField, ...]:
    try:
        return AVP_MAPPINGS[cls]
    except KeyError:
        raise TypeError(f"No AVP mapping declared for {cls.__name__}") from None


def avp_names(cls: type) -> Tuple[str, ...]:
    """AVP names bound by a record class, in declaration order."""
    return tuple(f.avp for f in _mapping_for(cls))


def to_avps(message: Any) -> Dict[str, Any]:
    """Build the AVP dictionary view of a record."""
    avps: Dict[str, Any] = {}
    for f in _mapping_for(type(message)):
        value = getattr(message, f.attr)
        if value is None:
            continue
        if f.group is not None:
            if f.repeated:
                value = [to_avps(item) for item in value]
            else:
                value = to_avps(value)
                if not value:
                    continue
        elif isinstance(value, IntEnum):
            value = int(value)

        target = avps.setdefault(f.within, {}) if f.within else avps
        target[f.avp] = value
    return avps


def _decode_scalar(f: AVPField, raw: Any) -> Any:
    if f.data_type in (AVPDataType.UTF8STRING, AVPDataType.ADDRESS):
        if not isinstance(raw, str):
            raise DecodeError(f"{f.avp} ({f.code}) must be a string, got {type(raw).__name__}")
        return raw
    if f.data_type == AVPDataType.OCTET_STRING:
        if not isinstance(raw, (bytes, bytearray)):
            raise DecodeError(f"{f.avp} ({f.code}) must be bytes, got {type(raw).__name__}")
        return bytes(raw)

    if isinstance(raw, bool) or not isinstance(raw, int):
        raise DecodeError(f"{f.avp} ({f.code}) must be an integer, got {type(raw).__name__}")
    low, high = _INTEGER_RANGES[f.data_type]
    if not low <= raw < high:
        raise DecodeError(f"{f.avp} ({f.code}) value {raw} out of range for {f.data_type.value}")
    if f.enum is not None:
        try:
            return f.enum(raw)
        except ValueError:
            raise DecodeError(f"Unknown {f.avp} value {raw}") from None
    return raw


def _container(cls: type, f: AVPField, avps: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    if f.within is None:
        return avps
    container = avps.get(f.within)
    if container is not None and not isinstance(container, Mapping):
        raise DecodeError(f"{cls.__name__} {f.within} must be a grouped AVP")
    return container


def from_avps(cls: type, avps: Mapping[str, Any]) -> Any:
    """Build a record of type cls from its AVP dictionary view.

    AVPs missing from the dictionary leave the field at its default: None for
    optional AVPs, zero for the rest. A missing AVP for a field without a
    default raises DecodeError. Unknown AVPs are ignored.
    """
    mapping = _mapping_for(cls)
    if not isinstance(avps, Mapping):
        raise DecodeError(f"{cls.__name__} AVPs must be a mapping, got {type(avps).__name__}")

    kwargs: Dict[str, Any] = {}
    for f in mapping:
        source = _container(cls, f, avps)
        if source is None or f.avp not in source:
            continue
        raw = source[f.avp]
        if f.group is not None:
            if f.repeated:
                if not isinstance(raw, (list, tuple)):
                    raise DecodeError(f"{f.avp} ({f.code}) must be a list of grouped AVPs")
                kwargs[f.attr] = tuple(from_avps(f.group, item) for item in raw)
            else:
                kwargs[f.attr] = from_avps(f.group, raw)
        else:
            kwargs[f.attr] = _decode_scalar(f, raw)

    by_attr = {f.attr: f for f in mapping}
    for fld in dataclasses.fields(cls):
        required = fld.default is dataclasses.MISSING and fld.default_factory is dataclasses.MISSING
        if required and fld.name not in kwargs:
            raise DecodeError(f"{cls.__name__} is missing mandatory AVP {by_attr[fld.name].avp}")

    unknown = set(avps) - {f.within or f.avp for f in mapping}
    if unknown:
        logger.debug(f"Ignoring AVPs not mapped on {cls.__name__}: {sorted(unknown)}")
    return cls(**kwargs)


def unmapped_fields(cls: type) -> Tuple[str, ...]:
    """Record attributes with no AVP binding; empty for every mapped class."""
    mapped = {f.attr for f in _mapping_for(cls)}
    return tuple(f.name for f in dataclasses.fields(cls) if f.name not in mapped)
