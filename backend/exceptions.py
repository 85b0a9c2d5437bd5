"""
Custom exception classes for on-chain read operations.
"""


class ChainReadError(Exception):
    """Raised when a contract view call fails (transport, revert, timeout)."""

    def __init__(self, function_name: str, token_id: int, cause: Exception):
        super().__init__(f"{function_name}({token_id}) failed: {cause}")
        self.function_name = function_name
        self.token_id = token_id
        self.cause = cause


class ContractNotConfiguredError(Exception):
    """Raised when a read targets a contract whose address is not configured."""

    def __init__(self, function_name: str):
        super().__init__(f"{function_name}: contract address not configured")
        self.function_name = function_name
