import asyncio
import logging
from types import SimpleNamespace

from openai.types.chat import ChatCompletion

from travel_ai.core.llm import OpenAIChatEndpoint
from travel_ai.models.chat_models import ChatMessage, ChatRequest
from travel_ai.models.itinerary_schema import build_itinerary_schema_format


def _completion(content, refusal=None):
    return ChatCompletion.model_validate({
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1735689600,
        "model": "gpt-4o-2024-08-06",
        "choices": [{
            "index": 0,
            "finish_reason": "stop",
            "logprobs": None,
            "message": {"role": "assistant", "content": content, "refusal": refusal},
        }],
    })


class FakeCompletions:
    def __init__(self, completion):
        self.completion = completion
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.completion


class FakeClient:
    def __init__(self, completion):
        self.completions = FakeCompletions(completion)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self):
        self.closed = True


def _request(json_schema=None):
    return ChatRequest(
        messages=[
            ChatMessage(role="system", content="Respond with JSON."),
            ChatMessage(role="user", content="Plan a trip."),
        ],
        model="gpt-4o",
        temperature=0.7,
        max_tokens=500,
        json_schema=json_schema,
    )


def test_request_parameters_are_forwarded(config):
    client = FakeClient(_completion('{"Destination": "Tokyo"}'))
    endpoint = OpenAIChatEndpoint(config, client=client)

    asyncio.run(endpoint.get_completion(_request(build_itinerary_schema_format())))

    sent = client.completions.calls[0]
    assert sent["model"] == "gpt-4o"
    assert sent["temperature"] == 0.7
    assert sent["max_tokens"] == 500
    assert sent["messages"] == [
        {"role": "system", "content": "Respond with JSON."},
        {"role": "user", "content": "Plan a trip."},
    ]
    assert sent["response_format"]["type"] == "json_schema"
    assert sent["response_format"]["json_schema"]["strict"] is True


def test_no_response_format_without_schema(config):
    client = FakeClient(_completion("{}"))

    asyncio.run(OpenAIChatEndpoint(config, client=client).get_completion(_request()))

    assert "response_format" not in client.completions.calls[0]


def test_choices_are_mapped(config):
    client = FakeClient(_completion('{"Destination": "Tokyo"}'))

    response = asyncio.run(OpenAIChatEndpoint(config, client=client).get_completion(_request()))

    assert response.model == "gpt-4o-2024-08-06"
    assert len(response.choices) == 1
    assert response.choices[0].message.role == "assistant"
    assert response.choices[0].message.content == '{"Destination": "Tokyo"}'
    assert response.choices[0].finish_reason == "stop"


def test_refusal_is_logged(config, caplog):
    client = FakeClient(_completion(None, refusal="I can't help with that."))

    with caplog.at_level(logging.WARNING):
        response = asyncio.run(OpenAIChatEndpoint(config, client=client).get_completion(_request()))

    assert response.choices[0].message.content is None
    assert any("refused" in r.getMessage() for r in caplog.records)


def test_close_releases_client(config):
    client = FakeClient(_completion("{}"))
    endpoint = OpenAIChatEndpoint(config, client=client)

    asyncio.run(endpoint.close())

    assert client.closed is True
