import time
import unittest
from unittest.mock import Mock
from gi.repository import GLib
from sliderbar.tween import Tween


def run_until(predicate, timeout=2.0):
    """Iterate the default main context until predicate() or timeout"""
    context = GLib.MainContext.default()
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        context.iteration(False)


class TestTween(unittest.TestCase):
    def setUp(self):
        self.ticks = []

    def tearDown(self):
        if hasattr(self, 'tween'):
            self.tween.cancel()

    def test_reaches_end_value(self):
        """Last tick delivers the exact end value"""
        on_done = Mock()
        self.tween = Tween(106.0, 110.0, 20, self.ticks.append, on_done=on_done).start()
        self.assertTrue(self.tween.is_running)

        run_until(lambda: not self.tween.is_running)

        self.assertFalse(self.tween.is_running)
        self.assertEqual(self.ticks[-1], 110.0)
        self.assertEqual(self.tween.value, 110.0)
        on_done.assert_called_once_with()

    def test_linear_and_monotonic(self):
        self.tween = Tween(200.0, 0.0, 30, self.ticks.append).start()
        run_until(lambda: not self.tween.is_running)

        for value in self.ticks:
            self.assertGreaterEqual(value, 0.0)
            self.assertLessEqual(value, 200.0)
        self.assertEqual(self.ticks, sorted(self.ticks, reverse=True))

    def test_zero_duration(self):
        self.tween = Tween(5.0, 50.0, 0, self.ticks.append).start()
        run_until(lambda: not self.tween.is_running)
        self.assertEqual(self.ticks, [50.0])

    def test_cancel(self):
        """Cancelling stops ticks and reports the current value once"""
        on_cancel = Mock()
        on_done = Mock()
        self.tween = Tween(0.0, 100.0, 10000, self.ticks.append,
                           on_cancel=on_cancel, on_done=on_done).start()
        run_until(lambda: len(self.ticks) > 0)

        self.tween.cancel()
        self.assertFalse(self.tween.is_running)
        on_cancel.assert_called_once_with(self.tween.value)

        count = len(self.ticks)
        context = GLib.MainContext.default()
        while context.pending():
            context.iteration(False)
        self.assertEqual(len(self.ticks), count)

        self.tween.cancel()
        on_cancel.assert_called_once()
        on_done.assert_not_called()

    def test_cancel_after_finish_is_noop(self):
        on_cancel = Mock()
        self.tween = Tween(0.0, 1.0, 0, self.ticks.append, on_cancel=on_cancel).start()
        run_until(lambda: not self.tween.is_running)
        self.tween.cancel()
        on_cancel.assert_not_called()

    def test_start_twice(self):
        self.tween = Tween(0.0, 1.0, 0, self.ticks.append)
        self.assertIs(self.tween.start(), self.tween)
        self.tween.start()
        run_until(lambda: not self.tween.is_running)
        self.assertEqual(self.ticks, [1.0])


if __name__ == '__main__':
    unittest.main()
