from scss_dts.events.bus import EventBus
from scss_dts.events.types import FileProcessed, RunCompleted, RunStarted

__all__ = ["EventBus", "RunStarted", "FileProcessed", "RunCompleted"]
