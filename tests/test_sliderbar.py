import unittest
from unittest.mock import Mock
import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Gdk', '4.0')
from gi.repository import Gtk, Gdk, GLib
from sliderbar.controller import THUMB_MIN, THUMB_MAX, THUMB_SIZE
from sliderbar.snapper import InvalidConfiguration
from sliderbar.sliderbar import SliderBar
from sliderbar.tween import Tween

HAS_DISPLAY = Gdk.Display.get_default() is not None


@unittest.skipUnless(HAS_DISPLAY, "needs a display")
class TestSliderBar(unittest.TestCase):
    def setUp(self):
        self.slider = SliderBar()
        self.changed = Mock()
        self.slider.connect('slider-changed', lambda _, min_value, max_value:
                            self.changed(min_value, max_value))
        # 200px track
        self.slider.controller.layout(200 + THUMB_SIZE)

    def tearDown(self):
        for thumb in (THUMB_MIN, THUMB_MAX):
            self.slider.controller.cancel_tween(thumb)

    def test_widget_initialization(self):
        self.assertEqual(self.slider.thumb_positions, {THUMB_MIN: 0.0, THUMB_MAX: 200.0})
        self.assertEqual(self.slider.front_thumb, THUMB_MAX)
        self.assertEqual(self.slider.get_values(), (0, 100))

    def test_invalid_ranges(self):
        with self.assertRaises(InvalidConfiguration):
            SliderBar(ranges=[])

    def test_custom_ranges(self):
        slider = SliderBar(ranges=[10, 20, 30])
        slider.controller.layout(200 + THUMB_SIZE)
        self.assertEqual(slider.get_values(), (10, 30))

    def test_measure(self):
        minimum, natural, _, _ = self.slider.do_measure(Gtk.Orientation.VERTICAL, -1)
        self.assertEqual(minimum, natural)
        self.assertGreaterEqual(minimum, THUMB_SIZE)

    def test_drag_emits_signal_and_listener(self):
        listener = Mock()
        self.slider.set_on_slider_changed_listener(listener)

        controller = self.slider.controller
        self.assertTrue(controller.press(200 + THUMB_SIZE / 2, self.slider.front_thumb))
        controller.move(106 + THUMB_SIZE / 2)

        self.assertEqual(self.slider.thumb_positions[THUMB_MAX], 106)
        listener.assert_called_once_with(0, 55)
        self.changed.assert_called_once_with(0, 55)

    def test_release_schedules_tween(self):
        controller = self.slider.controller
        controller.press(200 + THUMB_SIZE / 2, self.slider.front_thumb)
        controller.move(106 + THUMB_SIZE / 2)
        controller.release()

        self.assertTrue(controller.is_settling(THUMB_MAX))
        self.assertIsInstance(controller._tweens[THUMB_MAX], Tween)
        self.assertEqual(controller._tweens[THUMB_MAX].end_value, 110)

    def test_emit_values(self):
        """Starting pair reported after the first allocation"""
        self.assertEqual(self.slider.emit_values(), GLib.SOURCE_REMOVE)
        self.changed.assert_called_once_with(0, 100)

    def test_update_theme(self):
        self.slider.update_theme(True)
        self.assertIn('sliderbar-dark', self.slider.get_css_classes())
        self.slider.update_theme(False)
        self.assertIn('sliderbar-light', self.slider.get_css_classes())
        self.assertNotIn('sliderbar-dark', self.slider.get_css_classes())


if __name__ == '__main__':
    unittest.main()
