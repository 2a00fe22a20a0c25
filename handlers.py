import os
import threading
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from logger import log, log_err, log_info
from path_utilities import ReadError, read_file
from result import Err, Result

ResultCallback = Callable[[Result[str, ReadError]], None]


class ReloadHandler(FileSystemEventHandler):
    """Re-reads one file whenever it changes and hands the result on."""

    def __init__(self, path, on_result: ResultCallback):
        super().__init__()
        self.path = normalize(path)
        self.on_result_cb = on_result

    def on_created(self, event: FileSystemEvent) -> None:
        if self._is_target(event, event.src_path):
            self._reload()

    def on_modified(self, event: FileSystemEvent) -> None:
        if self._is_target(event, event.src_path):
            self._reload()

    def on_deleted(self, event: FileSystemEvent) -> None:
        if self._is_target(event, event.src_path):
            self._gone()

    def on_moved(self, event: FileSystemEvent) -> None:
        if self._is_target(event, event.dest_path):
            self._reload()
        elif self._is_target(event, event.src_path):
            self._gone()

    def _is_target(self, event: FileSystemEvent, path) -> bool:
        if event.is_directory or not path:
            return False
        return normalize(path) == self.path

    def _reload(self) -> None:
        log(f"Reloading [{self.path}]")
        self.on_result_cb(read_file(self.path))

    def _gone(self) -> None:
        log(f"File [{self.path}] is gone")
        self.on_result_cb(Err(FileNotFoundError(2, "No such file or directory", self.path)))


def normalize(path) -> str:
    return os.path.abspath(os.fsdecode(path))


def watch(path, on_result: ResultCallback, stop: Optional[threading.Event] = None) -> None:
    """Watch a single file and report a fresh result on every change.

    Blocks until ``stop`` is set, the user interrupts or the observer
    thread dies.
    """
    target = normalize(path)
    handler = ReloadHandler(target, on_result)
    observer = Observer()
    observer.schedule(handler, os.path.dirname(target), recursive=False)
    observer.start()
    log_info(f"Watching [{target}]")

    try:
        while observer.is_alive() and (stop is None or not stop.is_set()):
            if stop is None:
                observer.join(1)
            else:
                stop.wait(1)
        if not observer.is_alive():
            log_err(f"Watcher for [{target}] stopped unexpectedly")
    except KeyboardInterrupt:
        log_info("Watch stopped")
    finally:
        observer.stop()
        observer.join()
