"""Tests for the run event bus."""

import threading

from scss_dts.events import EventBus, FileProcessed, RunStarted
from scss_dts.model import FileOutcome, FileStatus


class TestEventBus:
    def test_typed_subscription(self):
        bus = EventBus()
        started = []
        bus.subscribe(RunStarted, started.append)
        bus.emit(RunStarted(file_count=2, threads=1))
        bus.emit(FileProcessed(outcome=FileOutcome(path="a", status=FileStatus.SKIPPED)))
        assert started == [RunStarted(file_count=2, threads=1)]

    def test_global_listener_sees_everything(self):
        bus = EventBus()
        seen = []
        bus.on_all(seen.append)
        bus.emit(RunStarted(file_count=0, threads=1))
        bus.emit("anything")
        assert len(seen) == 2

    def test_emit_from_threads(self):
        bus = EventBus()
        seen = []
        bus.subscribe(RunStarted, seen.append)
        threads = [
            threading.Thread(target=bus.emit, args=(RunStarted(file_count=i, threads=1),))
            for i in range(20)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sorted(e.file_count for e in seen) == list(range(20))

    def test_listener_can_emit(self):
        bus = EventBus()
        seen = []
        bus.subscribe(RunStarted, lambda e: bus.emit(FileProcessed(
            outcome=FileOutcome(path="a", status=FileStatus.SKIPPED)
        )))
        bus.subscribe(FileProcessed, seen.append)
        bus.emit(RunStarted(file_count=1, threads=1))
        assert [e.outcome.path for e in seen] == ["a"]
