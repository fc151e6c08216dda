"""NiceGUI chat panel page."""

import logging

from nicegui import app, events, ui

from freegpt.chat.widget import ChatWidget
from freegpt.config import ChatConfig, get_chat_config
from freegpt.models.schemas import Message
from freegpt.ui.capabilities import fullscreen_element
from freegpt.ui.resources import PanelResources

logger = logging.getLogger(__name__)

PANEL_NORMAL = "max-w-3xl"
PANEL_EXPANDED = "max-w-none"

CUSTOM_CSS = """
<style>
    .chat-panel {
        background: white;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        overflow: hidden;
    }
    .body--dark .chat-panel { background: #1f2937; border-color: #374151; }

    .chat-header { border-bottom: 1px solid #e5e7eb; }
    .body--dark .chat-header { border-color: #374151; }

    .bubble-user {
        background: #4f46e5;
        color: white;
        border-radius: 12px 0 12px 12px;
        white-space: pre-wrap;
    }
    .bubble-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 0 12px 12px 12px;
    }
    .body--dark .bubble-assistant { background: #374151; color: #f9fafb; }
    .bubble-assistant p { margin: 0; }

    .avatar-user { background: #6b7280; }
    .avatar-assistant { background: #4f46e5; }

    .typing-dot {
        width: 6px; height: 6px;
        background: #9ca3af;
        border-radius: 50%;
        animation: typing-bounce 1.2s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes typing-bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-5px); }
    }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Page shell hosting a single chat panel."""
    config = get_chat_config()
    render_chat_page(ChatWidget.mount(app.storage.user, config), config)


def render_chat_page(widget: ChatWidget, config: ChatConfig) -> None:
    """Build the panel for ``widget`` in the current page.

    The widget is closed once the browser client is deleted. Transient
    disconnects within the reconnect window keep it alive.
    """
    ui.add_head_html(CUSTOM_CSS)

    resources = PanelResources()
    resources.add(widget.close)
    ui.context.client.on_delete(resources.release)

    dark = ui.dark_mode()

    panel: ui.column
    messages_container: ui.column
    typing_row: ui.row
    scroll: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button
    new_chat_btn: ui.button
    expand_btn: ui.button
    launcher: ui.button

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "avatar-assistant"
        icon = "person" if is_user else "smart_toy"
        with ui.element("div").classes(
            f"w-8 h-8 shrink-0 rounded-full flex items-center justify-center {css}"
        ):
            ui.icon(icon).classes("text-white text-base")

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.is_user else "justify-start"
        with ui.row().classes(f"w-full {align} gap-3 items-start no-wrap"):
            if not msg.is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[80%] gap-1"):
                if msg.is_user:
                    ui.label(msg.content).classes("bubble-user px-4 py-2 text-sm")
                else:
                    with ui.element("div").classes("bubble-assistant px-4 py-2 text-sm"):
                        ui.markdown(msg.content)
                ui.label(msg.created_at.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if msg.is_user else 'self-start'}"
                )
            if msg.is_user:
                render_avatar(True)

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in widget.messages:
                render_message(msg)
        typing_row.set_visibility(widget.pending)
        for button in (send_btn, new_chat_btn):
            button.set_enabled(not widget.pending)
        if (input_field.value or "") != widget.draft:
            input_field.value = widget.draft
        scroll.scroll_to(percent=1.0)

    def apply_panel_state() -> None:
        state = widget.panel_state
        panel.set_visibility(state.visible)
        launcher.set_visibility(not state.visible)
        if state.expanded:
            panel.classes(add=PANEL_EXPANDED, remove=PANEL_NORMAL)
            panel.style("height: calc(100vh - 2rem)")
        else:
            panel.classes(add=PANEL_NORMAL, remove=PANEL_EXPANDED)
            panel.style("height: 600px")
        expand_btn.props(f"icon={'close_fullscreen' if state.expanded else 'open_in_full'}")

    fullscreen = None
    fullscreen_factory = fullscreen_element()
    if fullscreen_factory is None:
        logger.info("Expanded layout will stay within the page")
    else:

        def on_fullscreen_change(e: events.ValueChangeEventArguments) -> None:
            # Leaving browser fullscreen (e.g. Esc) collapses the panel as well
            if resources.released:
                return
            if not e.value and widget.panel_state.expanded:
                widget.toggle_expanded()
                apply_panel_state()

        fullscreen = fullscreen_factory(on_value_change=on_fullscreen_change)

    async def send_message() -> None:
        widget.set_draft(input_field.value or "")
        await widget.submit()

    def new_chat() -> None:
        widget.reset()

    def toggle_visible() -> None:
        widget.toggle_visible()
        apply_panel_state()

    def toggle_expanded() -> None:
        state = widget.toggle_expanded()
        if fullscreen is not None:
            fullscreen.value = state.expanded
        apply_panel_state()

    # === Page shell ===
    ui.button(icon="dark_mode", on_click=dark.toggle).props("flat round").classes(
        "absolute top-4 right-4"
    )

    with ui.column().classes("w-full min-h-screen items-center p-4 md:p-8 gap-8"):
        with ui.column().classes("items-center gap-2 pt-4"):
            ui.label("FreeGPT").classes("text-4xl md:text-6xl font-bold tracking-tight")
            ui.label("Your personal AI assistant powered by open-source LLMs").classes(
                "text-lg md:text-xl text-gray-500"
            )

        with ui.column().classes("w-full mx-auto chat-panel gap-0").mark("panel") as panel:
            # Header
            with ui.row().classes("w-full chat-header px-5 py-3 items-center justify-between"):
                ui.label(config.title).classes("text-lg font-semibold")
                with ui.row().classes("items-center gap-1"):
                    new_chat_btn = (
                        ui.button(icon="add", on_click=new_chat)
                        .mark("new-chat")
                        .props("flat round dense")
                    )
                    expand_btn = (
                        ui.button(icon="open_in_full", on_click=toggle_expanded)
                        .mark("expand")
                        .props("flat round dense")
                    )
                    ui.button(icon="close", on_click=toggle_visible).mark("hide").props(
                        "flat round dense"
                    )

            # Messages
            with (
                ui.scroll_area().classes("flex-grow w-full") as scroll,
                ui.column().classes("w-full p-5 gap-4"),
            ):
                messages_container = ui.column().classes("w-full gap-4")
                typing_classes = "w-full justify-start gap-3 items-center"
                with ui.row().classes(typing_classes).mark("typing") as typing_row:
                    render_avatar(False)
                    with ui.row().classes("bubble-assistant px-4 py-3 gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")

            # Input
            with ui.row().classes("w-full p-4 gap-3 items-end border-t no-wrap"):
                input_field = (
                    ui.textarea(
                        placeholder="Type your message...",
                        value=widget.draft,
                        on_change=lambda e: widget.set_draft(e.value or ""),
                    )
                    .props("autogrow outlined dense rows=1")
                    .classes("flex-grow")
                    .mark("input")
                    .on("keydown.enter.prevent", send_message)
                )
                send_btn = ui.button(icon="send", on_click=send_message).mark("send").props(
                    "round unelevated color=primary"
                )

    with ui.page_sticky(position="bottom-right", x_offset=20, y_offset=20):
        launcher = ui.button(icon="chat", on_click=toggle_visible).mark("launcher").props(
            "fab color=primary"
        )

    resources.add(widget.subscribe(refresh_messages))
    refresh_messages()
    apply_panel_state()
