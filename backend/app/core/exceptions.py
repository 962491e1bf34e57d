"""
Custom exceptions for Vault Gateway
"""
from typing import Optional


class GatewayException(Exception):
    """Base exception for Vault Gateway"""
    def __init__(self, message: str, code: str = "UNKNOWN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class VaultException(GatewayException):
    """Raised when a vault call fails"""
    def __init__(self, message: str, vault_code: Optional[int] = None):
        super().__init__(message, "VAULT_ERROR")
        self.vault_code = vault_code


class AuthenticationException(GatewayException):
    """Raised when no bearer token can be produced for the vault"""
    def __init__(self, message: str):
        super().__init__(message, "AUTH_ERROR")
