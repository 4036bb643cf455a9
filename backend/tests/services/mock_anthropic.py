"""Mock Anthropic Client — stands in for AnthropicMessagesClient in service and route tests.

Invariants:
    - MockAnthropicClient sequences responses (one per create_message call)
    - An Exception in the sequence is raised instead of returned
    - Builder helpers produce realistic Messages API response structures

Design Decisions:
    - Flat mock classes (no inheritance): simple, explicit, easy to debug
"""

import json


class _Block:
    """Mock content block (text, tool_use, ...)."""

    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)


class _Usage:
    def __init__(self, input_tokens=100, output_tokens=50):
        self.input_tokens = input_tokens
        self.output_tokens = output_tokens


class _Message:
    """Mock Message returned by messages.create()."""

    def __init__(self, content, stop_reason="end_turn"):
        self.content = content
        self.stop_reason = stop_reason
        self.usage = _Usage()


class MockAnthropicClient:
    """Replaces AnthropicMessagesClient. Sequences pre-configured responses."""

    def __init__(self, responses):
        self._responses = responses
        self._idx = 0
        self.calls = []

    async def create_message(self, **kwargs):
        self.calls.append(kwargs)
        if self._idx >= len(self._responses):
            raise RuntimeError(
                f"MockAnthropicClient: no response at index {self._idx} "
                f"(configured {len(self._responses)})",
            )
        resp = self._responses[self._idx]
        self._idx += 1
        if isinstance(resp, Exception):
            raise resp
        return resp


# -- Builder helpers -----------------------------------------------------------


def text_response(*texts):
    """Message with one text block per argument."""
    return _Message([_Block(type="text", text=t) for t in texts])


def json_response(payload):
    return text_response(json.dumps(payload, ensure_ascii=False))


def development_payload(**overrides):
    payload = {
        "icon": "🍌",
        "length": "25.6 cm",
        "weight": "300 g",
        "comparison": "🍌 About the size of a banana",
        "title": "Week 20: Halfway there",
        "description": "Your baby can hear sounds now.",
        "developments": [
            "Hearing develops",
            "Vernix forms on the skin",
            "Movements become stronger",
            "Sleep cycles begin",
        ],
    }
    payload.update(overrides)
    return payload


def exercise_payload(**overrides):
    payload = {
        "intro": "Light activity is good at this stage.",
        "exercises": [
            {
                "name": "Walking",
                "emoji": "🚶",
                "description": "Walk for 20 minutes.",
                "benefits": "Better circulation.",
            },
            {
                "name": "Cat-cow stretch",
                "emoji": "🐈",
                "description": "Alternate arching and rounding your back.",
                "benefits": "Eases back pain.",
            },
        ],
    }
    payload.update(overrides)
    return payload
