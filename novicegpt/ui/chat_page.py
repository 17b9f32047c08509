"""NiceGUI chat interface with PDF context upload."""

from nicegui import events, ui

from novicegpt.llm.gemini_client import get_gemini_client
from novicegpt.models.schemas import Message, MessageRole
from novicegpt.session.chat_session import ChatSession

INPUT_MIN_HEIGHT = "44px"
INPUT_MAX_HEIGHT = "160px"

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: rgba(240, 240, 246, 0.85);
        border-radius: 24px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 16px;
    }

    .message-assistant {
        background: #a1a1aa;
        color: black;
        border: 1px solid #4c1d95;
        border-radius: 16px;
    }

    .message-pending {
        background: #a1a1aa;
        color: black;
        font-style: italic;
        border-radius: 16px;
    }

    .message-body { white-space: pre-wrap; word-break: break-word; }
</style>
"""

_BUBBLE_CLASSES = {
    MessageRole.USER: "message-user",
    MessageRole.ASSISTANT: "message-assistant",
    MessageRole.PENDING: "message-pending",
}


def file_label(name: str | None) -> str:
    return f"📄 File uploaded: {name}" if name else ""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession(get_gemini_client())

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button

    def render_message(msg: Message) -> None:
        align = "justify-end" if msg.role is MessageRole.USER else "justify-start"
        with (
            ui.row().classes(f"w-full {align}"),
            ui.element("div").classes(f"px-4 py-3 max-w-[75%] {_BUBBLE_CLASSES[msg.role]}"),
        ):
            ui.label(msg.content).classes("text-sm message-body")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.transcript:
                render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or session.is_dispatching:
            return

        input_field.value = ""
        send_btn.disable()
        try:
            await session.dispatch(text)
        finally:
            # A newer send may own the button after a reset
            if not session.is_dispatching:
                send_btn.enable()

    def new_chat() -> None:
        session.new_chat()
        send_btn.enable()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        result = await session.ingest_document(e.file.name, e.file.content_type, await e.file.read())
        e.sender.reset()
        if result.error:
            ui.notify(result.error, type="warning")
        elif result.ok:
            ui.notify(f"Loaded {result.pages} page(s) from {result.file_name}", type="positive")

    # === UI Layout ===
    with ui.column().classes("w-full min-h-screen p-4 items-center gap-6"):
        ui.label("NoviceGPT").classes("text-3xl font-bold text-black")

        with ui.column().classes("w-full max-w-2xl mx-auto app-container p-4 gap-4").style("height: 70vh"):
            with ui.row().classes("w-full justify-end"):
                ui.button(icon="add", on_click=new_chat).props("flat round dense").tooltip("New chat")

            scroll_area = ui.scroll_area().classes("flex-grow w-full")
            with scroll_area:
                messages_container = ui.column().classes("w-full gap-2")

            ui.label().bind_text_from(session, "uploaded_file_name", file_label).classes(
                "text-sm text-black"
            ).bind_visibility_from(session, "uploaded_file_name", backward=bool)

            ui.upload(
                label="Upload PDF",
                on_upload=handle_upload,
                auto_upload=True,
                max_files=1,
            ).props('accept="application/pdf" flat bordered').classes("w-full")

            with ui.row().classes("w-full items-end gap-2 no-wrap"):
                input_field = (
                    ui.textarea(placeholder="Type your message...")
                    .props(
                        "autogrow outlined dense rows=1 "
                        f'input-style="min-height: {INPUT_MIN_HEIGHT}; '
                        f'max-height: {INPUT_MAX_HEIGHT}; overflow-y: auto"'
                    )
                    .classes("flex-grow")
                    # Shift+Enter falls through and inserts a newline
                    .on("keydown.enter.exact.prevent", send_message)
                )
                send_btn = ui.button("Send", icon="send", on_click=send_message).props("unelevated color=primary")

    session.add_listener(refresh_messages)
    refresh_messages()
