"""Tests for handlers.py - the file reload handler."""

import threading
from unittest.mock import patch

from watchdog.events import (
    DirModifiedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from handlers import ReloadHandler, watch


def make_handler(path):
    received = []
    return ReloadHandler(path, received.append), received


class TestReloadHandler:
    """Tests for ReloadHandler."""

    def test_modified_rereads_file(self, tmp_path):
        target = tmp_path / "watched.txt"
        target.write_text("v2", encoding="utf-8")
        handler, received = make_handler(target)

        handler.on_modified(FileModifiedEvent(str(target)))

        assert len(received) == 1
        assert received[0].unwrap() == "v2"

    def test_created_rereads_file(self, tmp_path):
        target = tmp_path / "watched.txt"
        target.write_text("new", encoding="utf-8")
        handler, received = make_handler(target)

        handler.on_created(FileCreatedEvent(str(target)))

        assert [r.val for r in received] == ["new"]

    def test_deleted_reports_error(self, tmp_path):
        target = tmp_path / "watched.txt"
        handler, received = make_handler(target)

        handler.on_deleted(FileDeletedEvent(str(target)))

        assert len(received) == 1
        assert received[0].is_err_and(lambda e: isinstance(e, FileNotFoundError))

    def test_moved_away_and_onto(self, tmp_path):
        target = tmp_path / "watched.txt"
        other = tmp_path / "other.txt"
        handler, received = make_handler(target)

        handler.on_moved(FileMovedEvent(str(target), str(other)))
        target.write_text("replaced", encoding="utf-8")
        handler.on_moved(FileMovedEvent(str(other), str(target)))

        assert received[0].is_err()
        assert received[1].val == "replaced"

    def test_undecodable_change_is_reported(self, tmp_path):
        """Test that invalid UTF-8 written to the file reaches the callback as Err."""
        target = tmp_path / "watched.txt"
        target.write_bytes(b"\xff\xfe\x80abc")
        handler, received = make_handler(target)

        handler.on_modified(FileModifiedEvent(str(target)))

        assert received[0].is_err_and(lambda e: isinstance(e, UnicodeDecodeError))

    def test_ignores_other_paths_and_directories(self, tmp_path):
        target = tmp_path / "watched.txt"
        handler, received = make_handler(target)

        handler.on_modified(FileModifiedEvent(str(tmp_path / "other.txt")))
        handler.on_modified(DirModifiedEvent(str(tmp_path)))

        assert received == []


class TestWatch:
    """Tests for watch."""

    def test_returns_when_stopped(self, tmp_path):
        target = tmp_path / "watched.txt"
        target.write_text("x", encoding="utf-8")
        stop = threading.Event()
        stop.set()

        watch(target, lambda _: None, stop=stop)

    def test_returns_when_observer_dies(self, tmp_path, capsys):
        """Test that watch gives up instead of spinning once the observer thread is gone."""

        class DeadObserver:
            def __init__(self):
                self.stopped = False

            def schedule(self, handler, path, recursive=False):
                pass

            def start(self):
                pass

            def is_alive(self):
                return False

            def join(self, timeout=None):
                pass

            def stop(self):
                self.stopped = True

        observer = DeadObserver()
        target = tmp_path / "watched.txt"

        with patch("handlers.Observer", return_value=observer):
            watch(target, lambda _: None)

        assert observer.stopped
        assert "stopped unexpectedly" in capsys.readouterr().out
