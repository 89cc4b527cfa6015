"""Error taxonomy for transaction parsing and the Sui RPC boundary."""


class TxParseError(Exception):
    """Base class for all txparse errors."""


class MissingGasInfoError(TxParseError):
    """Transaction effects carry no gas usage; the record cannot be parsed."""


class InvalidPayloadError(TxParseError):
    """A raw JSON-RPC payload failed validation against the wire models."""


class ExternalServiceError(TxParseError):
    """An upstream service (Sui fullnode) failed or answered unexpectedly."""


class SuiRPCError(ExternalServiceError):
    """JSON-RPC `error` member returned by the fullnode."""

    def __init__(self, method: str, code: int, message: str, data: object = None) -> None:
        self.method = method
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"Sui RPC error ({method}) {code}: {message}")


class MissingResultError(ExternalServiceError):
    """JSON-RPC response carried neither `result` nor `error`."""
