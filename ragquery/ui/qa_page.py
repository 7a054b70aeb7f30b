"""NiceGUI page with a PDF upload form and a question form."""

from nicegui import events, ui

from ragquery.client.session import QASession, SessionState
from ragquery.models.schemas import DocumentFile

PAGE_TITLE = "RagQueryAPI"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(180deg, #eff6ff 0%, #faf5ff 100%); min-height: 100vh; }

    .title-gradient {
        background: linear-gradient(90deg, #2563eb 0%, #9333ea 100%);
        -webkit-background-clip: text;
        background-clip: text;
        color: transparent;
    }

    .card {
        background: white;
        border-radius: 16px;
        box-shadow: 0 10px 25px rgba(0, 0, 0, 0.08);
    }

    .action-btn { background: linear-gradient(90deg, #2563eb 0%, #9333ea 100%) !important; }

    .error-banner {
        background: #fef2f2;
        border-left: 4px solid #ef4444;
        border-radius: 12px;
    }

    .response-box {
        background: linear-gradient(90deg, #eff6ff 0%, #faf5ff 100%);
        border: 1px solid #e5e7eb;
        border-radius: 12px;
    }
</style>
"""


@ui.page("/")
def qa_page() -> None:
    """Document upload and question page."""
    ui.add_head_html(CUSTOM_CSS)
    session = QASession()
    selected: DocumentFile | None = None

    upload_btn: ui.button
    query_btn: ui.button
    query_input: ui.textarea

    @ui.refreshable
    def render_upload_status() -> None:
        if session.state.upload_status:
            with ui.row().classes("items-center gap-2 text-green-600"):
                ui.icon("check_circle").classes("text-xl")
                ui.label(session.state.upload_status).classes("font-medium")

    @ui.refreshable
    def render_results() -> None:
        state = session.state
        if state.error:
            with ui.row().classes("w-full error-banner p-4 items-center gap-3"):
                ui.icon("error_outline").classes("text-2xl text-red-500")
                ui.label(state.error).classes("text-red-700 whitespace-pre-wrap")
        if state.response:
            with ui.column().classes("w-full card p-6 gap-4"):
                ui.label("Response").classes("text-2xl font-bold text-gray-800")
                with ui.element("div").classes("w-full response-box p-6"):
                    ui.label(state.response).classes("text-gray-700 whitespace-pre-wrap")

    def on_state_change(state: SessionState) -> None:
        upload_btn.set_text("Uploading..." if state.upload_busy else "Upload PDF")
        upload_btn.set_enabled(not state.upload_busy)
        query_btn.set_text("Processing..." if state.query_busy else "Submit Query")
        query_btn.set_enabled(not state.query_busy)
        render_upload_status.refresh()
        render_results.refresh()

    session.subscribe(on_state_change)

    async def handle_file_selected(e: events.UploadEventArguments) -> None:
        nonlocal selected
        selected = DocumentFile(
            filename=e.file.name,
            content=await e.file.read(),
            content_type=e.file.content_type or "application/pdf",
        )

    def handle_file_removed() -> None:
        nonlocal selected
        selected = None

    async def upload_document() -> None:
        await session.upload_document(selected)

    async def submit_query() -> None:
        await session.submit_query(query_input.value)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto py-12 px-4 gap-8"):
        # Header
        with ui.column().classes("w-full items-center gap-4 pb-2"):
            ui.label(PAGE_TITLE).classes("text-5xl font-extrabold title-gradient pb-2")
            ui.label(
                "Unlock insights from your documents with AI-powered queries"
            ).classes("text-lg text-gray-600")

        with ui.grid(columns=2).classes("w-full gap-6"):
            # Upload
            with ui.column().classes("card p-6 gap-4"):
                with ui.row().classes("items-center gap-3"):
                    ui.icon("upload_file").classes("text-2xl text-blue-600")
                    ui.label("Upload Document").classes("text-2xl font-bold text-gray-800")
                ui.upload(
                    on_upload=handle_file_selected,
                    auto_upload=True,
                    max_files=1,
                ).props("accept=.pdf flat bordered").classes("w-full").on(
                    "removed", handle_file_removed
                )
                upload_btn = (
                    ui.button("Upload PDF", on_click=upload_document)
                    .props("unelevated")
                    .classes("w-full action-btn text-white")
                )
                render_upload_status()

            # Query
            with ui.column().classes("card p-6 gap-4"):
                with ui.row().classes("items-center gap-3"):
                    ui.icon("chat").classes("text-2xl text-purple-600")
                    ui.label("Ask a Question").classes("text-2xl font-bold text-gray-800")
                query_input = (
                    ui.textarea(
                        placeholder="What would you like to know about your documents?"
                    )
                    .props("outlined rows=4")
                    .classes("w-full")
                )
                query_btn = (
                    ui.button("Submit Query", on_click=submit_query)
                    .props("unelevated")
                    .classes("w-full action-btn text-white")
                )

        render_results()


def main() -> None:
    ui.run(title=PAGE_TITLE, port=8080, reload=False)


if __name__ == "__main__":
    main()
