"""
Pytest Configuration and Shared Fixtures for the Gy Charging Core Test Suite

This module provides fixtures for:
- Sample controller configuration records
- Sample Gy requests and answers
- Capturing OpenTelemetry spans emitted by the projection layer
"""

import pytest
import sys
from pathlib import Path

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from controller import DiamServerConfig, DiamClientConfig, HSSConfigSubscriptionProfile
from protocols.credit_control import CreditRequestType, DiameterResultCode, GrantedServiceUnit
from protocols.gy import (
    CCADiameterMessage,
    CreditControlRequest,
    FinalUnitAction,
    FinalUnitIndication,
    MSCCDiameterMessage,
    QosRequestInfo,
    UsedCredits,
    UsedCreditsType,
)


# =============================================================================
# Tracing
# =============================================================================

_span_exporter = InMemorySpanExporter()


@pytest.fixture(scope="session")
def tracer_provider():
    """Installs an SDK tracer provider that keeps finished spans in memory."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(_span_exporter))
    trace.set_tracer_provider(provider)
    return provider


@pytest.fixture
def span_exporter(tracer_provider):
    """Provides the in-memory exporter, emptied before each test."""
    _span_exporter.clear()
    yield _span_exporter
    _span_exporter.clear()


# =============================================================================
# Controller Configuration Fixtures
# =============================================================================

@pytest.fixture
def server_config() -> DiamServerConfig:
    return DiamServerConfig(
        protocol="sctp",
        address="ocs.example.org:3868",
        local_address="192.168.60.10:56789",
        dest_realm="example.org",
        dest_host="ocs.example.org",
    )


@pytest.fixture
def client_config() -> DiamClientConfig:
    return DiamClientConfig(
        protocol="tcp",
        address="10.0.0.1:3868",
        retransmits=3,
        watchdog_interval=30,
        retry_count=5,
        local_address="10.0.0.2:0",
        product_name="gateway",
        realm="gw.example.org",
        host="feg.gw.example.org",
        dest_realm="example.org",
        dest_host="ocs.example.org",
    )


@pytest.fixture
def subscription_profile() -> HSSConfigSubscriptionProfile:
    return HSSConfigSubscriptionProfile(
        max_ul_bit_rate=100000000,
        max_dl_bit_rate=200000000,
    )


# =============================================================================
# Gy Message Fixtures
# =============================================================================

@pytest.fixture
def update_request() -> CreditControlRequest:
    return CreditControlRequest(
        session_id="gw.example.org;1234;5678",
        type=CreditRequestType.UPDATE,
        imsi="001010000000001",
        request_number=2,
        ue_ipv4="192.168.128.11",
        spgw_ipv4="10.0.2.1",
        apn="internet",
        qos=QosRequestInfo(apn_agg_max_bit_rate_ul=1000, apn_agg_max_bit_rate_dl=2000),
        credits=(
            UsedCredits(
                rating_group=1,
                input_octets=1024,
                output_octets=2048,
                total_octets=3072,
                type=UsedCreditsType.QUOTA_EXHAUSTED,
            ),
        ),
    )


@pytest.fixture
def cca_message() -> CCADiameterMessage:
    return CCADiameterMessage(
        session_id="gw.example.org;1234;5678",
        request_number=2,
        result_code=DiameterResultCode.DIAMETER_SUCCESS,
        request_type=CreditRequestType.UPDATE,
        credit_control=(
            MSCCDiameterMessage(
                result_code=DiameterResultCode.DIAMETER_SUCCESS,
                granted_service_unit=GrantedServiceUnit(total_octets=4096),
                validity_time=3600,
                rating_group=1,
            ),
            MSCCDiameterMessage(
                result_code=DiameterResultCode.DIAMETER_SUCCESS,
                granted_service_unit=GrantedServiceUnit(total_octets=512, input_octets=256),
                validity_time=60,
                final_unit_indication=FinalUnitIndication(action=FinalUnitAction.REDIRECT),
                rating_group=2,
            ),
        ),
    )


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "mconfig: Tests for controller to mconfig projection"
    )
    config.addinivalue_line(
        "markers", "gy: Tests for the Gy credit-control model"
    )
    config.addinivalue_line(
        "markers", "credit_control: Tests for the generic Credit-Control vocabulary"
    )
