from dataclasses import dataclass, field
from typing import Any


@dataclass
class Tool:
    """A tool discovered on an MCP server at connect time.

    Rows are additive: reconnecting to a server inserts a fresh row per
    discovered tool, so the same tool name may appear more than once.
    """

    id: str
    server_id: str
    tool_name: str
    description: str = ""
    input_schema: dict[str, Any] = field(default_factory=dict)
