"""
Textual Application - Chat TUI
==============================

This module implements a Textual chat interface for Sentibot: a chat
log, an input box, and a side panel with the analysis of the last turn
and the current input history.
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Footer, Static, Input, RichLog

from core.config import Config, load_config
from core.logging import get_logger
from services.chatbot import Chatbot, ChatResult

logger = get_logger("tui.app")


class AnalysisPanel(Vertical):
    """Side panel showing the last turn's analysis and the history."""

    def compose(self) -> ComposeResult:
        yield Static("📊 Last Turn", classes="section-title")
        yield Static("No messages yet.", id="analysis-content", classes="stats-box", markup=False)
        yield Static("🕘 History", classes="section-title")
        yield Static("", id="history-content", classes="stats-box", markup=False)

    def show_result(self, result: ChatResult, chatbot: Chatbot) -> None:
        keyword = result.matched_keyword or "—"
        self.query_one("#analysis-content", Static).update(
            f"Category:  {result.category}\n"
            f"Sentiment: {result.sentiment:+.2f}\n"
            f"Keyword:   {keyword}\n"
            f"Tokens:    {' '.join(result.tokens) or '—'}\n"
            f"Latency:   {result.latency_ms}ms"
        )

        stats = chatbot.stats()
        lines = [f"{i + 1:>2}. {entry}" for i, entry in enumerate(chatbot.history)]
        lines.append(f"\n{stats['history_length']}/{stats['history_size']} kept, "
                     f"{stats['turns']} turns")
        self.query_one("#history-content", Static).update("\n".join(lines))


class ChatApp(App):
    """
    Sentibot Terminal UI Application.

    Submitting the quit command (exact match) exits, like the console loop.
    """

    CSS = """
    Screen {
        background: $surface;
    }

    #chat-column {
        width: 2fr;
    }

    #chat-log {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    AnalysisPanel {
        width: 1fr;
        padding: 0 1;
    }

    .section-title {
        text-style: bold;
        color: $primary;
        margin: 1 0;
    }

    .stats-box {
        background: $panel;
        border: solid $border;
        padding: 1;
        color: $text;
    }

    Input {
        margin: 1 0 0 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+l", "clear_log", "Clear"),
    ]

    def __init__(self, config: Optional[Config] = None, chatbot: Optional[Chatbot] = None):
        super().__init__()
        self.config = config or load_config()
        self.chatbot = chatbot or Chatbot.from_config(self.config)
        self.title = self.config.app_name
        self.sub_title = f"type '{self.config.ui.quit_command}' to exit"

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="chat-column"):
                yield RichLog(id="chat-log", wrap=True, markup=False)
                yield Input(placeholder="Type your message here...", id="chat-input")
            yield AnalysisPanel()
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#chat-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        message = event.value
        event.input.value = ""

        if message == self.config.ui.quit_command:
            self.exit()
            return

        result = self.chatbot.respond(message)

        chat_log = self.query_one("#chat-log", RichLog)
        chat_log.write(f"{self.config.ui.user_prompt}{message}")
        chat_log.write(f"{self.config.ui.bot_label}{result.response}")

        self.query_one(AnalysisPanel).show_result(result, self.chatbot)

    def action_clear_log(self) -> None:
        self.query_one("#chat-log", RichLog).clear()


def run_tui(config: Optional[Config] = None) -> None:
    app = ChatApp(config=config)
    app.run()
