"""
Response builders for tool call results.

Produces the protocol-agnostic call envelope:
{"content": [{"type": "text", "text": ...}]}
"""

from typing import Any, Dict


def text_content(text: str) -> Dict[str, Any]:
    """Create a single text content block."""
    return {"type": "text", "text": text}


def create_tool_response(text: str) -> Dict[str, Any]:
    """
    Wrap a tool's text payload in a call-response envelope.

    Args:
        text: The already-encoded payload (JSON text for sequential_thinking)
    """
    return {"content": [text_content(text)]}
