"""
Error messages returned in failed operation results.

The texts are part of the public contract and are matched verbatim by callers.
"""

CONNECTION_NOT_FOUND = "Connection not found"
SERVER_NOT_FOUND = "Server not found"
PROXY_REGISTRATION_FAILED = "Failed to add MCP server to agent"
TOOL_CALL_FAILED = "Tool call failed"
UNKNOWN_ERROR = "Unknown error"


def invalid_state(status: str) -> str:
    """Message for an operation attempted on a connection in the wrong status."""
    return f"Connection is {status}"


def describe(error: BaseException) -> str:
    """Message for an unexpected failure caught at an operation boundary."""
    return str(error) or UNKNOWN_ERROR
