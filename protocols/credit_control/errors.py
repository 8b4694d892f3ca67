# File location: protocols/credit_control/errors.py
# Faults raised by the Credit-Control mapping layer and the charging client

from typing import Optional


class CreditControlError(Exception):
    """Base class for Credit-Control faults"""


class DecodeError(CreditControlError):
    """Malformed or unknown AVP data"""


class ProtocolError(CreditControlError):
    """An answer carried a non-success Result-Code"""

    def __init__(self, message: str, result_code: Optional[int] = None):
        super().__init__(message)
        self.result_code = result_code


class CorrelationError(CreditControlError):
    """An answer does not match the outstanding request"""
