"""
MCP Sequential Thinking - records an agent's reasoning steps over MCP

Exposes one tool, ``sequential_thinking``, which appends a thought and the
intended next move to an in-memory log and reports the step number.
"""

from .exceptions import SequentialThinkingError, UnknownToolError
from .handler import TOOL_NAME, SequentialThinkingHandler
from .models import StepRecord, ThoughtEntry, ToolDescriptor
from .responses import create_tool_response, text_content
from .thought_log import ThoughtLog

__version__ = "1.0.0"
__all__ = [
    # Core
    "SequentialThinkingHandler",
    "ThoughtLog",
    "TOOL_NAME",
    # Models
    "StepRecord",
    "ThoughtEntry",
    "ToolDescriptor",
    # Response builders
    "create_tool_response",
    "text_content",
    # Exceptions
    "SequentialThinkingError",
    "UnknownToolError",
]
