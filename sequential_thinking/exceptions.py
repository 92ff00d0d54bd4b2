"""
Exception classes for the sequential thinking server
"""


class SequentialThinkingError(Exception):
    """Base exception for the sequential thinking server"""

    pass


class UnknownToolError(SequentialThinkingError):
    """Raised when a call targets a tool name the server does not expose"""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
