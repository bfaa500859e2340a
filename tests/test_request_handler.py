"""
Tests for the request handler: validation, agent lookup and the failure boundary.
"""

from unittest.mock import AsyncMock

import pytest

from base.errors import InvalidAgentResponseError
from base.models import AgentResponse
from base.request_handler import summary_from_response
from tools.nutrition_tools import extract_nutrition

from tests.helpers import AGENT_ID, StaticAgent, jsonrpc_request


class TestValidationAndLookup:

    @pytest.mark.asyncio
    async def test_bad_version_is_invalid_request(self, apple_client, make_handler):
        agent = AsyncMock()
        handler = make_handler(apple_client, agent=agent)
        body = jsonrpc_request()
        body["jsonrpc"] = "1.0"

        status, envelope = await handler.handle(AGENT_ID, body)

        assert status == 400
        assert envelope["id"] == "req-1"
        assert envelope["error"]["code"] == -32600
        agent.generate.assert_not_called()
        assert apple_client.seen_requests == []

    @pytest.mark.asyncio
    async def test_missing_id_is_invalid_request_even_for_unknown_agent(self, apple_client, make_handler):
        handler = make_handler(apple_client)
        body = jsonrpc_request()
        del body["id"]

        status, envelope = await handler.handle("no-such-agent", body)

        assert status == 400
        assert envelope["id"] is None
        assert envelope["error"]["code"] == -32600

    @pytest.mark.asyncio
    async def test_unknown_agent(self, apple_client, make_handler):
        handler = make_handler(apple_client)

        status, envelope = await handler.handle("no-such-agent", jsonrpc_request())

        assert status == 404
        assert envelope == {
            "jsonrpc": "2.0",
            "id": "req-1",
            "error": {"code": -32602, "message": "Agent 'no-such-agent' not found"},
        }
        assert apple_client.seen_requests == []


class TestSuccess:

    @pytest.mark.asyncio
    async def test_completed_task(self, apple_client, make_handler):
        handler = make_handler(apple_client)

        status, envelope = await handler.handle(
            AGENT_ID, jsonrpc_request("apple", contextId="ctx-1", taskId="task-1")
        )

        assert status == 200
        assert envelope["id"] == "req-1"
        result = envelope["result"]
        assert result["id"] == "task-1"
        assert result["contextId"] == "ctx-1"
        assert result["status"]["state"] == "completed"

        data = result["artifacts"][1]["parts"][0]["data"]
        assert data["foodName"] == "Apples, raw"
        assert data["calories"] == 52
        assert data["protein"] == "0.26 g"
        assert data["healthBenefits"] == [
            "Rich in Vitamin C, supports immune system",
            "High in Potassium, supports heart health",
            "Contains Calcium, supports bone health",
        ]

    @pytest.mark.asyncio
    async def test_history_replays_messages_then_agent_answer(self, apple_client, make_handler):
        handler = make_handler(apple_client)
        messages = [
            {"role": "user", "parts": [{"kind": "text", "text": "apple"}], "messageId": "m-1"},
            {"role": "user", "parts": [{"kind": "data", "data": {"portion": "1 cup"}}], "taskId": "own-task"},
        ]

        status, envelope = await handler.handle(
            AGENT_ID, jsonrpc_request(messages=messages, taskId="task-1")
        )

        assert status == 200
        history = envelope["result"]["history"]
        assert len(history) == 3
        for sent, replayed in zip(messages, history):
            assert replayed["role"] == sent["role"]
            assert replayed["parts"] == sent["parts"]
            assert replayed["kind"] == "message"
        assert history[0]["messageId"] == "m-1"
        assert history[0]["taskId"] == "task-1"
        assert history[1]["taskId"] == "own-task"
        assert history[2]["role"] == "agent"

    @pytest.mark.asyncio
    async def test_agent_receives_flattened_messages(self, apple_client, make_handler):
        agent = StaticAgent({
            "foodName": "Kiwi",
            "calories": 61,
            "protein": "1.1 g",
            "fat": "0.5 g",
            "carbs": "14.7 g",
            "healthBenefits": ["General source of nutrients and minerals"],
        })
        handler = make_handler(apple_client, agent=agent)
        messages = [{"role": "user", "parts": [
            {"kind": "text", "text": "kiwi"},
            {"kind": "data", "data": {"n": 1}},
        ]}]

        status, envelope = await handler.handle(AGENT_ID, jsonrpc_request(messages=messages))

        assert status == 200
        assert agent.calls == [[{"role": "user", "content": 'kiwi\n{"n":1}'}]]
        assert envelope["result"]["artifacts"][1]["parts"][0]["data"]["foodName"] == "Kiwi"

    @pytest.mark.asyncio
    async def test_empty_params_uses_default_query(self, apple_client, make_handler):
        handler = make_handler(apple_client)

        status, envelope = await handler.handle(AGENT_ID, {"jsonrpc": "2.0", "id": "req-1"})

        assert status == 200
        assert apple_client.seen_requests[0].url.params["query"] == "apple"
        assert len(envelope["result"]["history"]) == 1


class TestFailureBoundary:

    @pytest.mark.asyncio
    async def test_no_results_becomes_internal_error_with_query(self, make_usda_client, make_handler):
        handler = make_handler(make_usda_client({"foods": []}))

        status, envelope = await handler.handle(AGENT_ID, jsonrpc_request("dragonfruit sorbet"))

        assert status == 500
        assert envelope["id"] == "req-1"
        assert envelope["error"]["code"] == -32603
        assert envelope["error"]["message"] == "Internal error"
        assert "dragonfruit sorbet" in envelope["error"]["data"]["details"]

    @pytest.mark.asyncio
    async def test_upstream_http_failure(self, make_usda_client, make_handler):
        handler = make_handler(make_usda_client({}, status_code=502))

        status, envelope = await handler.handle(AGENT_ID, jsonrpc_request())

        assert status == 500
        assert envelope["error"]["code"] == -32603
        assert "502" in envelope["error"]["data"]["details"]

    @pytest.mark.asyncio
    async def test_agent_exception(self, apple_client, make_handler):
        agent = AsyncMock()
        agent.generate.side_effect = RuntimeError("model backend unavailable")
        handler = make_handler(apple_client, agent=agent)

        status, envelope = await handler.handle(AGENT_ID, jsonrpc_request())

        assert status == 500
        assert envelope["error"]["data"] == {"details": "model backend unavailable"}

    @pytest.mark.asyncio
    async def test_malformed_agent_response(self, apple_client, make_handler):
        handler = make_handler(apple_client, agent=StaticAgent("just some prose"))

        status, envelope = await handler.handle(AGENT_ID, jsonrpc_request())

        assert status == 500
        assert envelope["error"]["code"] == -32603
        assert "Invalid agent response" in envelope["error"]["data"]["details"]


class TestSummaryFromResponse:

    def test_summary_instance_passes_through(self):
        summary = extract_nutrition("x", [])
        assert summary_from_response(AgentResponse(text=summary)) is summary

    def test_dict_is_validated(self):
        summary = summary_from_response(AgentResponse(text={
            "foodName": "Oats",
            "calories": 389,
            "protein": "16.9 g",
            "fat": "6.9 g",
            "carbs": "66.3 g",
            "healthBenefits": ["General source of nutrients and minerals"],
        }))
        assert summary.food_name == "Oats"

    @pytest.mark.parametrize("text", [None, "prose", {"foodName": "x"}, 42])
    def test_invalid_text_raises(self, text):
        with pytest.raises(InvalidAgentResponseError):
            summary_from_response(AgentResponse(text=text))

    def test_response_without_text_attribute(self):
        with pytest.raises(InvalidAgentResponseError):
            summary_from_response(object())
