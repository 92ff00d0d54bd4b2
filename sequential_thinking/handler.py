"""
Sequential thinking tool handler.

Owns a ThoughtLog and implements the tool contract independently of any
transport: tool discovery plus a (tool name, arguments) call boundary.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from sequential_thinking.exceptions import UnknownToolError
from sequential_thinking.models import StepRecord, ThoughtEntry, ToolDescriptor
from sequential_thinking.responses import create_tool_response
from sequential_thinking.thought_log import ThoughtLog

logger = logging.getLogger(__name__)

TOOL_NAME = "sequential_thinking"

TOOL_DESCRIPTION = (
    "Enables dynamic and reflective problem-solving through flexible thinking sequences. "
    "Use this to break down complex problems, explore different approaches, and revise "
    "understanding as you progress."
)

THOUGHT_DESCRIPTION = "Current thinking step or observation"
NEXT_MOVE_DESCRIPTION = "What to explore or consider next"

INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "thought": {"type": "string", "description": THOUGHT_DESCRIPTION},
        "nextMove": {"type": "string", "description": NEXT_MOVE_DESCRIPTION},
    },
    "required": ["thought", "nextMove"],
}


class SequentialThinkingHandler:
    """Records reasoning steps into the ThoughtLog it owns."""

    def __init__(self, thought_log: Optional[ThoughtLog] = None) -> None:
        self._log = thought_log if thought_log is not None else ThoughtLog()
        self._descriptor = ToolDescriptor(
            name=TOOL_NAME,
            description=TOOL_DESCRIPTION,
            input_schema=INPUT_SCHEMA,
        )

    @property
    def thought_log(self) -> ThoughtLog:
        return self._log

    @property
    def history(self) -> List[ThoughtEntry]:
        """Recorded steps in call order."""
        return self._log.entries()

    def list_tools(self) -> List[ToolDescriptor]:
        """Return the static tool listing (always exactly one tool)."""
        return [self._descriptor.model_copy(deep=True)]

    def get_tool(self, name: str) -> ToolDescriptor:
        """Look up a tool by name, raising UnknownToolError if absent."""
        if name != TOOL_NAME:
            logger.warning("Unknown tool requested: %s", name)
            raise UnknownToolError(name)
        return self._descriptor

    def record(self, thought: str, next_move: str) -> StepRecord:
        """Append a step and report its position.

        Any string is accepted, including the empty string.
        """
        step_number = self._log.append(thought, next_move)
        logger.info("sequential_thinking recorded step %d", step_number)
        return StepRecord(thought=thought, next_move=next_move, step_number=step_number)

    def call_tool(self, name: str, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Dispatch a tool call and return the call-response envelope.

        Args:
            name: Requested tool name
            arguments: Tool arguments; ``thought`` and ``nextMove`` for sequential_thinking

        Returns:
            {"content": [{"type": "text", "text": <JSON-encoded StepRecord>}]}

        Raises:
            UnknownToolError: If ``name`` is not sequential_thinking
        """
        self.get_tool(name)
        result = self.record(arguments["thought"], arguments["nextMove"])
        return create_tool_response(result.to_text())
