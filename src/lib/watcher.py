"""
Source watcher for live mode

Re-runs the conversion whenever the markup source changes and raises the
shared ReloadSignal once the new document has been written.

The observer watches the source's parent directory (non-recursive) and keeps
only events for the source file itself. Opened/closed events are ignored, so
reading the source during conversion never triggers another conversion.
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .log import LOG, state_connectToLogger
from .server import ReloadSignal


class SourceChangeHandler(FileSystemEventHandler):
    """
    Converts and signals on changes to one source file

    Events arrive serially on the observer thread, so conversions never
    overlap. A failed conversion is reported and the watch carries on; the
    signal is only raised after a successful write.
    """

    def __init__(
        self,
        source_path: Union[str, Path],
        convert: Callable[[], Dict[str, Any]],
        signal: ReloadSignal,
        state: Any = None,
    ) -> None:
        self.source_path = Path(source_path).resolve()
        self.convert = convert
        self.signal = signal
        self.state = state

    def source_is(self, path: Union[str, bytes]) -> bool:
        if isinstance(path, bytes):
            path = path.decode(sys.getfilesystemencoding())
        return bool(path) and Path(path).resolve() == self.source_path

    def handle(self, path: Union[str, bytes], is_directory: bool) -> None:
        if is_directory or not self.source_is(path):
            return

        state_connectToLogger(self.state)
        LOG("File changed, reconverting...", level=1)
        try:
            self.convert()
        except Exception as e:
            print(f"Watch error: {e}", file=sys.stderr)
            return
        self.signal.set()

    def on_modified(self, event: FileSystemEvent) -> None:
        self.handle(event.src_path, event.is_directory)

    def on_created(self, event: FileSystemEvent) -> None:
        self.handle(event.src_path, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save via rename-over land here
        self.handle(event.dest_path, event.is_directory)


def watcher_start(
    source_path: Union[str, Path],
    convert: Callable[[], Dict[str, Any]],
    signal: ReloadSignal,
    state: Any = None,
) -> Any:
    """
    Start watching the source file

    Args:
        source_path: Markup source to watch
        convert: Callable re-running the full conversion
        signal: ReloadSignal raised after every successful conversion
        state: ProgramState for logging on the observer thread

    Returns:
        The started watchdog Observer; call stop() and join() to end it

    Raises:
        OSError: If the watch cannot be set up (missing directory, OS limits)
    """
    handler = SourceChangeHandler(source_path, convert, signal, state=state)
    watch_dir = handler.source_path.parent

    observer = Observer()
    observer.schedule(handler, str(watch_dir), recursive=False)
    observer.start()
    LOG(f"Watching for changes in: {watch_dir}", level=2)
    return observer
