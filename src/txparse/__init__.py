from txparse.client import TxParseClient
from txparse.domain.models import BalanceChange, DynamicFieldBalanceChange, GasCostSummary, ParseResult
from txparse.exceptions import ExternalServiceError, MissingGasInfoError, TxParseError
from txparse.parser.transaction import parse_transaction, parse_transaction_value

__all__ = [
    "BalanceChange",
    "DynamicFieldBalanceChange",
    "ExternalServiceError",
    "GasCostSummary",
    "MissingGasInfoError",
    "ParseResult",
    "TxParseClient",
    "TxParseError",
    "parse_transaction",
    "parse_transaction_value",
]
