"""Pydantic models for recorded thoughts and tool descriptors."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ThoughtEntry(BaseModel):
    """One recorded reasoning step."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    timestamp: datetime = Field(default_factory=_utcnow)
    thought: str
    next_move: str = Field(alias="nextMove")


class StepRecord(BaseModel):
    """Result of a sequential_thinking call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: Literal["recorded"] = "recorded"
    thought: str
    next_move: str = Field(alias="nextMove")
    step_number: int = Field(alias="stepNumber")

    def to_payload(self) -> Dict[str, Any]:
        """Return the wire payload using camelCase keys."""
        return self.model_dump(by_alias=True)

    def to_text(self) -> str:
        """Return the JSON text carried in the tool's text content."""
        return json.dumps(self.to_payload(), indent=2, ensure_ascii=False)


class ToolDescriptor(BaseModel):
    """Schema-described tool as returned by tool discovery."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias="inputSchema")


__all__ = ["ThoughtEntry", "StepRecord", "ToolDescriptor"]
