"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: ChatConfig pointed at the in-process completion stub
    - storage: Fresh per-browser key-value store (a plain dict)
    - completion_app: FastAPI stub of the text-generation endpoint
    - completion_client: Real CompletionClient wired to the stub via ASGI
    - gated_client: Fake client whose replies are released by the test
"""

import asyncio
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from freegpt.chat.client import CompletionClient, CompletionResult
from freegpt.config import ChatConfig
from freegpt.models.schemas import CompletionRequest

STUB_BASE_URL = "http://completion.test"


class GatedClient:
    """Completion client fake that blocks until the test releases it."""

    def __init__(self, result: CompletionResult | None = None) -> None:
        self.result = result or CompletionResult.success("Hello back")
        self.prompts: list[str] = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def complete(self, prompt: str) -> CompletionResult:
        self.prompts.append(prompt)
        self.started.set()
        await self.release.wait()
        return self.result


class InstantClient:
    """Completion client fake that answers immediately."""

    def __init__(self, reply: str = "ok") -> None:
        self.reply = reply
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> CompletionResult:
        self.prompts.append(prompt)
        return CompletionResult.success(f"{self.reply}: {prompt}")


def build_completion_app() -> FastAPI:
    """Create a stub text-generation endpoint with one route per behavior."""
    stub = FastAPI()
    stub.state.received = []

    @stub.post("/generate")
    async def generate(payload: CompletionRequest, request: Request) -> dict[str, str]:
        stub.state.received.append(
            (payload.prompt, request.headers.get("content-type", ""))
        )
        return {"response": f"echo: {payload.prompt}", "model": "stub"}

    @stub.post("/empty")
    async def empty(payload: CompletionRequest) -> dict[str, Any]:
        return {"model": "stub"}

    @stub.post("/null")
    async def null(payload: CompletionRequest) -> dict[str, Any]:
        return {"response": None}

    @stub.post("/blank")
    async def blank(payload: CompletionRequest) -> dict[str, Any]:
        return {"response": "   "}

    @stub.post("/error")
    async def error(payload: CompletionRequest) -> dict[str, Any]:
        raise HTTPException(status_code=500, detail="model crashed")

    @stub.post("/malformed")
    async def malformed(payload: CompletionRequest) -> PlainTextResponse:
        return PlainTextResponse("not valid json")

    @stub.post("/list")
    async def as_list(payload: CompletionRequest) -> list[str]:
        return ["echo"]

    @stub.post("/wrong-type")
    async def wrong_type(payload: CompletionRequest) -> dict[str, Any]:
        return {"response": 42}

    return stub


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return configuration pointed at the completion stub.

    Returns:
        ChatConfig with explicit values for every reply string.
    """
    return ChatConfig(
        endpoint_url=f"{STUB_BASE_URL}/generate",
        request_timeout=5.0,
        greeting="Hello! How can I help you today?",
        fallback_reply="Sorry, I couldn't generate a response.",
        error_reply="Sorry, something went wrong. Please try again.",
    )


@pytest.fixture
def storage() -> dict[str, Any]:
    """Return an empty per-browser key-value store."""
    return {}


@pytest.fixture
def completion_app() -> FastAPI:
    return build_completion_app()


@pytest.fixture
def completion_client(chat_config: ChatConfig, completion_app: FastAPI) -> CompletionClient:
    """Create a real completion client talking to the stub over ASGI.

    Returns:
        CompletionClient posting to the stub's /generate route.
    """
    transport = httpx.ASGITransport(app=completion_app)
    return CompletionClient(chat_config, transport=transport)


@pytest.fixture
def gated_client() -> GatedClient:
    return GatedClient()
