import gi
from gi.repository import GLib

TICK_INTERVAL = 5  # ms between animation frames


class Tween:
    """
    Linear tween from start to end, ticked by the GLib main loop.

    on_tick(value) runs on every frame, the last one always receiving end.
    on_cancel(value) runs once if the tween is stopped before reaching end.
    """

    def __init__(self, start, end, duration, on_tick, on_cancel=None, on_done=None):
        self.start_value = start
        self.end_value = end
        self.duration = duration
        self.on_tick = on_tick
        self.on_cancel = on_cancel
        self.on_done = on_done

        self.value = start
        self._timeout_id = None
        self._start_time = None

    @property
    def is_running(self):
        return self._timeout_id is not None

    def start(self):
        if self.is_running:
            return self
        self._start_time = GLib.get_monotonic_time()
        self._timeout_id = GLib.timeout_add(TICK_INTERVAL, self._on_timeout)
        return self

    def cancel(self):
        if not self.is_running:
            return
        GLib.source_remove(self._timeout_id)
        self._timeout_id = None
        if self.on_cancel:
            self.on_cancel(self.value)

    def progress(self):
        if self.duration <= 0 or self._start_time is None:
            return 1.0
        elapsed = (GLib.get_monotonic_time() - self._start_time) / 1000  # us -> ms
        return min(1.0, max(0.0, elapsed / self.duration))

    def _on_timeout(self):
        progress = self.progress()
        if progress >= 1.0:
            self.value = self.end_value
        else:
            self.value = self.start_value + (self.end_value - self.start_value) * progress
        self.on_tick(self.value)

        if progress < 1.0:
            return GLib.SOURCE_CONTINUE

        self._timeout_id = None
        if self.on_done:
            self.on_done()
        return GLib.SOURCE_REMOVE
