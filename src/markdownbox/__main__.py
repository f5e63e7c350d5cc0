"""Main entry point for the markdown viewer."""

import argparse
from datetime import datetime, timezone
import glob
import logging
from logging.handlers import RotatingFileHandler
import os
from pathlib import Path
import sys
from types import TracebackType
from typing import List

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from mdast import MarkdownASTBuilder, MarkdownASTPrinter
from mdrender import DocumentDumper, MarkdownRenderError

from markdownbox.link_activator import ignore_link, open_external_link
from markdownbox.markdown_box import MarkdownBox
from markdownbox.markdown_box_settings import MarkdownBoxSettings


WATCH_INTERVAL_MS = 1000


def setup_logging(settings: MarkdownBoxSettings) -> None:
    """Configure application logging with timestamped files and rotation."""
    log_dir = os.path.expanduser(settings.log_directory)
    os.makedirs(log_dir, exist_ok=True)

    # Generate timestamp for log filename
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,  # 1MB
        backupCount=max(settings.max_log_files - 1, 0),
        encoding='utf-8'
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    cleanup_old_logs(log_dir, max_logs=settings.max_log_files)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)  # Sort by creation time

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Ignore errors removing old logs


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def parse_args(argv: List[str]) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="markdownbox", description="Display a markdown file.")
    parser.add_argument("file", nargs="?", help="markdown file to display, '-' for stdin")
    parser.add_argument(
        "--settings",
        default=os.path.expanduser("~/.markdownbox/settings.json"),
        help="path of the settings file"
    )
    parser.add_argument("--watch", action="store_true", help="re-render when the file changes")
    parser.add_argument("--dump-ast", action="store_true", help="print the parsed markdown AST and exit")
    parser.add_argument("--dump-tree", metavar="PATH", help="write the rendered document tree as JSON and exit")
    return parser.parse_args(argv)


def read_source(file: str | None) -> str:
    """Read the markdown source named on the command line."""
    if file is None:
        return ""

    if file == "-":
        return sys.stdin.read()

    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


def main() -> int:
    """Main function to run the application."""
    args = parse_args(sys.argv[1:])
    settings = MarkdownBoxSettings.load(args.settings)
    setup_logging(settings)
    install_global_exception_handler()
    logger = logging.getLogger("markdownbox")

    try:
        text = read_source(args.file)

    except (OSError, UnicodeDecodeError) as e:
        print(f"markdownbox: {e}", file=sys.stderr)
        return 1

    if args.dump_ast:
        MarkdownASTPrinter().visit(MarkdownASTBuilder().build_ast(text))
        return 0

    app = QApplication(sys.argv)

    link_activator = open_external_link if settings.open_links_externally else ignore_link
    box = MarkdownBox(link_activator=link_activator)
    box.resize(settings.window_width, settings.window_height)
    if args.file and args.file != "-":
        box.setWindowTitle(os.path.basename(args.file))

    try:
        box.set_text(text)

    except MarkdownRenderError as e:
        print(f"markdownbox: {e}", file=sys.stderr)
        return 1

    if args.dump_tree:
        tree = box.document_tree()
        if tree is not None:
            DocumentDumper().dump(tree, Path(args.dump_tree))

        return 0

    # Watch by polling the file's modification time
    timer = QTimer()
    if args.watch and args.file and args.file != "-":
        path = args.file
        last_mtime = os.path.getmtime(path)

        def poll() -> None:
            nonlocal last_mtime
            try:
                mtime = os.path.getmtime(path)
                if mtime == last_mtime:
                    return

                last_mtime = mtime
                box.set_text(read_source(path))

            except (OSError, UnicodeDecodeError, MarkdownRenderError):
                logger.exception("failed to reload %s", path)

        timer.timeout.connect(poll)
        timer.start(WATCH_INTERVAL_MS)

    box.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
