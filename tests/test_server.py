"""
Protocol-level tests: drive the FastMCP server through an in-memory client.
"""

import asyncio
import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from sequential_thinking.handler import TOOL_DESCRIPTION, SequentialThinkingHandler
from sequential_thinking.server import create_mcp_server


@pytest.fixture
def mcp_server(handler, settings):
    return create_mcp_server(handler=handler, settings=settings)


def _payload(result):
    """Decode the JSON text carried in the first content block"""
    assert result.content[0].type == "text"
    return json.loads(result.content[0].text)


class TestToolDiscovery:
    @pytest.mark.asyncio
    async def test_lists_single_tool(self, mcp_server):
        """The server advertises only sequential_thinking"""
        async with Client(mcp_server) as client:
            tools = await client.list_tools()

        assert [t.name for t in tools] == ["sequential_thinking"]
        assert tools[0].description == TOOL_DESCRIPTION

    @pytest.mark.asyncio
    async def test_input_schema(self, mcp_server):
        """thought and nextMove are required string properties"""
        async with Client(mcp_server) as client:
            tools = await client.list_tools()

        schema = tools[0].inputSchema
        assert schema["type"] == "object"
        assert schema["properties"]["thought"]["type"] == "string"
        assert schema["properties"]["nextMove"]["type"] == "string"
        assert set(schema["required"]) == {"thought", "nextMove"}


class TestToolCalls:
    @pytest.mark.asyncio
    async def test_records_and_numbers_steps(self, mcp_server, handler):
        """Consecutive calls report steps 1 and 2"""
        async with Client(mcp_server) as client:
            first = await client.call_tool(
                "sequential_thinking",
                {"thought": "Consider approach A", "nextMove": "Evaluate approach B"},
            )
            second = await client.call_tool(
                "sequential_thinking",
                {"thought": "B is simpler", "nextMove": "Prototype B"},
            )

        assert _payload(first) == {
            "status": "recorded",
            "thought": "Consider approach A",
            "nextMove": "Evaluate approach B",
            "stepNumber": 1,
        }
        assert _payload(second)["stepNumber"] == 2
        assert len(handler.history) == 2

    @pytest.mark.asyncio
    async def test_unicode_and_empty_round_trip(self, mcp_server):
        """Text fields come back unchanged"""
        async with Client(mcp_server) as client:
            result = await client.call_tool(
                "sequential_thinking", {"thought": "", "nextMove": "überlegen → 次へ"}
            )

        payload = _payload(result)
        assert payload["thought"] == ""
        assert payload["nextMove"] == "überlegen → 次へ"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, mcp_server, handler):
        """Unknown tool names fail and do not touch the log"""
        async with Client(mcp_server) as client:
            await client.call_tool("sequential_thinking", {"thought": "t", "nextMove": "m"})
            with pytest.raises(ToolError, match="Unknown tool") as exc_info:
                await client.call_tool("foo", {"thought": "t", "nextMove": "m"})

        assert "foo" in str(exc_info.value)
        assert len(handler.history) == 1

    @pytest.mark.asyncio
    async def test_concurrent_calls(self, mcp_server):
        """100 concurrent calls produce the steps 1..100 with no gaps"""
        async with Client(mcp_server) as client:
            results = await asyncio.gather(
                *(
                    client.call_tool(
                        "sequential_thinking", {"thought": f"t{i}", "nextMove": f"m{i}"}
                    )
                    for i in range(100)
                )
            )

        steps = [_payload(r)["stepNumber"] for r in results]
        assert sorted(steps) == list(range(1, 101))

    @pytest.mark.asyncio
    async def test_servers_are_isolated(self, settings):
        """Two servers built without a shared handler keep separate logs"""
        one = create_mcp_server(handler=SequentialThinkingHandler(), settings=settings)
        two = create_mcp_server(handler=SequentialThinkingHandler(), settings=settings)

        async with Client(one) as client:
            await client.call_tool("sequential_thinking", {"thought": "a", "nextMove": "b"})
        async with Client(two) as client:
            result = await client.call_tool(
                "sequential_thinking", {"thought": "c", "nextMove": "d"}
            )

        assert _payload(result)["stepNumber"] == 1
