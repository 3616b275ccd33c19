"""Chunk Deck - a TUI for running and watching chunkpack runs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Static,
)

from chunkpack.config import DEFAULT_CHUNK_SIZE_KB, ChunkOptions, parse_patterns
from chunkpack.exceptions import ChunkPackError
from chunkpack.models import FileEvent
from chunkpack.pipeline import chunk_directory


@dataclass
class DeckStats:
    """Statistics tracked during a run."""

    files_seen: int = 0
    files_written: int = 0
    binary_files: int = 0
    filtered_files: int = 0
    chunks_created: int = 0
    total_bytes: int = 0
    current_file: str = ""
    status: str = "idle"
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "00:00"
        end = self.end_time or datetime.now()
        delta = end - self.start_time
        minutes, seconds = divmod(int(delta.total_seconds()), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def record(self, event: FileEvent) -> None:
        """Fold one file outcome into the counters."""
        self.files_seen += 1
        self.current_file = event.rel_path
        if event.status == "binary":
            self.binary_files += 1
        elif event.status == "filtered":
            self.filtered_files += 1
        else:
            self.files_written += 1
            self.total_bytes += event.size_bytes
            if event.last_chunk is not None:
                self.chunks_created = max(self.chunks_created, event.last_chunk + 1)

    def copy(self) -> "DeckStats":
        return replace(self)


def format_size(size: int) -> str:
    return f"{size / 1024:.1f}KB" if size >= 1024 else f"{size}B"


def format_span(event: FileEvent) -> str:
    if event.first_chunk is None or event.last_chunk is None:
        return "--"
    if event.first_chunk == event.last_chunk:
        return str(event.first_chunk)
    return f"{event.first_chunk}-{event.last_chunk}"


class StatsPanel(Static):
    """Real-time statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(DeckStats())

    def update_display(self, stats: DeckStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]TIME[/b]    {stats.elapsed}

[b]FILES[/b]
  Seen        [cyan]{stats.files_seen:,}[/]
  Written     [green]{stats.files_written:,}[/]
  Binary      [dim]{stats.binary_files:,}[/]
  Filtered    [dim]{stats.filtered_files:,}[/]

[b]OUTPUT[/b]
  Chunks      [magenta]{stats.chunks_created:,}[/]
  Bytes       [cyan]{stats.total_bytes / 1024:.1f} KB[/]""")


class CurrentFileDisplay(Static):
    """Display for the file being chunked."""

    def compose(self) -> ComposeResult:
        yield Static("[dim]Waiting for source...[/]", id="current-file-content")

    def update_file(self, file: str) -> None:
        content = self.query_one("#current-file-content", Static)
        if file:
            display = file if len(file) < 50 else "..." + file[-47:]
            content.update(f"[bold cyan]>[/] {display}")
        else:
            content.update("[dim]Waiting for source...[/]")


class FileLogTable(DataTable):
    """Live per-file outcome table."""

    def on_mount(self) -> None:
        self.add_columns("File", "Status", "Chunks", "Size")
        self.cursor_type = "row"

    def add_event(self, event: FileEvent) -> None:
        status = {
            "written": "[blue]text[/]",
            "binary": "[dim]binary[/]",
            "filtered": "[dim]filtered[/]",
        }.get(event.status, event.status)
        display_name = event.rel_path
        if len(display_name) > 40:
            display_name = "..." + display_name[-37:]
        self.add_row(display_name, status, format_span(event), format_size(event.size_bytes))
        self.scroll_end()


class ChunkDeck(App):
    """The chunkpack deck - run a chunking pass and watch it happen."""

    # Messages for thread-safe communication
    class StatsUpdated(Message):
        def __init__(self, stats: DeckStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    class FileChunked(Message):
        def __init__(self, event: FileEvent) -> None:
            self.event = event
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 38;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 30;
        background: $surface-darken-1;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    CurrentFileDisplay {
        height: 3;
        padding: 1;
        background: $boost;
        border: round $secondary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-top: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    FileLogTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #log-panel {
        height: 12;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
        background: $surface-darken-2;
    }
    """

    BINDINGS = [
        Binding("r", "run", "Run", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    TITLE = "chunkpack deck"
    SUB_TITLE = "Chunking Console"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            # Left panel - stats & controls
            with Vertical(id="left-panel"):
                yield StatsPanel()
                yield CurrentFileDisplay()
                yield Rule()
                yield Label("Source folder")
                yield Input(placeholder="Folder to chunk...", id="source-input")
                yield Label("Output folder")
                yield Input(value="chunks", id="output-input")
                yield Label("Chunk size (KB)")
                yield Input(value=str(DEFAULT_CHUNK_SIZE_KB), type="integer", id="size-input")
                yield Label("Include globs")
                yield Input(placeholder="**/*.py,**/*.md", id="include-input")
                yield Label("Exclude globs")
                yield Input(placeholder="**/node_modules/**", id="exclude-input")
                with Horizontal(id="action-buttons"):
                    yield Button("RUN", id="run-btn", variant="success")
                    yield Button("Clear", id="clear-btn", variant="warning")

            # Center panel - per-file log
            with Vertical(id="center-panel"):
                yield Label("FILES", classes="section-title")
                yield FileLogTable(id="file-log")
                yield Rule()
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            # Right panel - directory browser
            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(Path.cwd(), id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self.write_log("Deck ready")
        self.write_log("Pick a source folder and press RUN")

    def write_log(self, message: str) -> None:
        """Add a message to the system log."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    # Message handlers for thread-safe updates
    def on_chunk_deck_stats_updated(self, event: StatsUpdated) -> None:
        stats = event.stats
        self.query_one(StatsPanel).update_display(stats)
        self.query_one(CurrentFileDisplay).update_file(stats.current_file)

    def on_chunk_deck_log_message(self, event: LogMessage) -> None:
        self.write_log(event.message)

    def on_chunk_deck_file_chunked(self, event: FileChunked) -> None:
        self.query_one("#file-log", FileLogTable).add_event(event.event)

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "run-btn":
            self.action_run()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_clear(self) -> None:
        """Clear the log and reset stats."""
        self.query_one(StatsPanel).update_display(DeckStats())
        self.query_one(CurrentFileDisplay).update_file("")
        self.query_one("#file-log", FileLogTable).clear()
        self.query_one("#log-panel", Log).clear()
        self.write_log("Cleared - ready for new run")

    def read_options(self) -> ChunkOptions:
        """Build run options from the input fields.

        Raises:
            ChunkPackError: A field is missing or invalid
        """
        source = self.query_one("#source-input", Input).value.strip()
        output = self.query_one("#output-input", Input).value.strip()
        size = self.query_one("#size-input", Input).value.strip()
        if not source:
            raise ChunkPackError("No source folder specified")
        if not output:
            raise ChunkPackError("No output folder specified")
        try:
            chunk_size_kb = int(size) if size else DEFAULT_CHUNK_SIZE_KB
        except ValueError:
            raise ChunkPackError(f"Chunk size must be an integer, got {size!r}")

        options = ChunkOptions(
            source=Path(source),
            output=Path(output),
            chunk_size_kb=chunk_size_kb,
            include_patterns=parse_patterns(self.query_one("#include-input", Input).value),
            exclude_patterns=parse_patterns(self.query_one("#exclude-input", Input).value),
        )
        options.validate()
        return options

    def action_run(self) -> None:
        """Start a chunking run."""
        try:
            options = self.read_options()
        except ChunkPackError as e:
            self.write_log(f"[red]ERROR: {e}[/]")
            return
        self.query_one("#file-log", FileLogTable).clear()
        self.run_chunking(options)

    @work(exclusive=True, thread=True)
    def run_chunking(self, options: ChunkOptions) -> None:
        """Run the pipeline in a background thread."""
        stats = DeckStats(status="running", start_time=datetime.now())
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(f"Chunking {options.source} -> {options.output} ({options.capacity:,} bytes/chunk)")
        )

        def on_file(event: FileEvent) -> None:
            stats.record(event)
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(self.FileChunked(event))

        try:
            result = chunk_directory(options, on_file=on_file)
        except (ChunkPackError, OSError) as e:
            stats.status = "error"
            stats.end_time = datetime.now()
            self.post_message(self.StatsUpdated(stats.copy()))
            self.post_message(self.LogMessage(f"[red]ERROR: {e}[/]"))
            return

        stats.status = "complete"
        stats.current_file = ""
        stats.chunks_created = result.chunks_created
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {result.files_written} files, "
                f"{result.chunks_created} chunks -> {options.output}[/]"
            )
        )


def main() -> None:
    """Run the chunkpack deck TUI."""
    app = ChunkDeck()
    app.run()


if __name__ == "__main__":
    main()
