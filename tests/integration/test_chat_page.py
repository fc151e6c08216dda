"""Integration tests for the NiceGUI chat page.

Drives the real page with NiceGUI's simulated ``user`` fixture; only the
completion client is a fake, so each reply is released by the test.
"""

import asyncio
from collections.abc import Callable

import pytest
import pytest_check as check
from nicegui import app, ui
from nicegui.testing import User

from freegpt.chat.widget import ChatWidget
from freegpt.config import ChatConfig
from freegpt.models.schemas import PanelState
from freegpt.ui.chat_page import render_chat_page
from tests.conftest import GatedClient


async def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    async with asyncio.timeout(timeout):
        while not predicate():
            await asyncio.sleep(0.01)


@pytest.fixture
def widgets(user: User, chat_config: ChatConfig, gated_client: GatedClient) -> list[ChatWidget]:
    """Register the chat page at / and collect the widget of every page load.

    Returns:
        Widgets in the order the page was opened.
    """
    mounted: list[ChatWidget] = []

    @ui.page("/")
    def page() -> None:
        widget = ChatWidget.mount(app.storage.user, chat_config, client=gated_client)
        mounted.append(widget)
        render_chat_page(widget, chat_config)

    return mounted


class TestClientLifecycle:
    """The panel lives exactly as long as its browser client."""

    async def test_reconnect_keeps_panel_usable(
        self, user: User, widgets: list[ChatWidget], gated_client: GatedClient
    ) -> None:
        await user.open("/")
        widget = widgets[-1]
        gated_client.release.set()

        # What a socket drop followed by a reconnect runs
        for handler in list(user.client.disconnect_handlers):
            user.client.safe_invoke(handler)

        check.is_false(widget.conversation.closed)
        user.find(marker="input").type("hi after reconnect")
        user.find(marker="send").click()
        await wait_until(lambda: len(widget.messages) == 3)

        check.equal(widget.messages[1].content, "hi after reconnect")
        check.equal(widget.messages[2].content, "Hello back")
        check.is_false(widget.pending)

    async def test_client_delete_closes_widget(
        self, user: User, widgets: list[ChatWidget]
    ) -> None:
        await user.open("/")
        widget = widgets[-1]

        user.client.delete()

        assert widget.conversation.closed


class TestPendingState:
    """Typing indicator and send button follow the pending flag."""

    async def test_submit_shows_typing_until_reply(
        self, user: User, widgets: list[ChatWidget], gated_client: GatedClient
    ) -> None:
        await user.open("/")
        widget = widgets[-1]
        await user.should_not_see(marker="typing")

        user.find(marker="input").type("hi")
        user.find(marker="send").click()
        await asyncio.wait_for(gated_client.started.wait(), timeout=2.0)

        send_btn = next(iter(user.find(marker="send").elements))
        input_field = next(iter(user.find(marker="input").elements))
        await user.should_see(marker="typing")
        check.is_false(send_btn.enabled)
        check.equal(input_field.value, "")

        gated_client.release.set()
        await wait_until(lambda: not widget.pending)

        await user.should_not_see(marker="typing")
        check.is_true(send_btn.enabled)
        check.equal([m.content for m in widget.messages][1:], ["hi", "Hello back"])


class TestPanelToggles:
    """Panel flags are rendered and restored on reload."""

    async def test_hide_then_reload_shows_only_launcher(
        self, user: User, widgets: list[ChatWidget]
    ) -> None:
        await user.open("/")
        await user.should_see(marker="panel")
        await user.should_not_see(marker="launcher")

        user.find(marker="hide").click()
        await user.should_see(marker="launcher")
        await user.should_not_see(marker="panel")

        await user.open("/")

        check.equal(widgets[-1].panel_state, PanelState(visible=False, expanded=False))
        await user.should_see(marker="launcher")
        await user.should_not_see(marker="panel")
