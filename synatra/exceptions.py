"""Custom exceptions for the Synatra SDK."""

from typing import Optional


class SynatraError(Exception):
    """Base exception for Synatra SDK operations."""


class InvalidArgumentError(SynatraError, ValueError):
    """Raised when a pool id, amount or fee fails validation."""


class UnauthenticatedError(SynatraError):
    """Raised when an operation needs a wallet and none is set."""


class PoolNotFoundError(SynatraError):
    """Raised when the requested pool account does not exist on-chain."""


class InsufficientBalanceError(SynatraError):
    """Raised when the wallet holds less than the requested amount."""


class TokenAccountNotFoundError(SynatraError):
    """Raised when the wallet's associated token account cannot be read."""


class InvalidNetworkError(SynatraError):
    """Raised when an unknown network preset is requested."""


class NetworkError(SynatraError):
    """Raised when the Synatra API cannot be reached."""


class RemoteServiceError(SynatraError):
    """Raised when the Synatra API answers with an error status or a malformed body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
