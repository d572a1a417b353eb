import math
import cairo
import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Graphene', '1.0')
from gi.repository import Gtk, GObject, GLib, Graphene
from sliderbar.controller import SliderController, SliderHost, THUMB_MIN, THUMB_MAX, THUMB_SIZE
from sliderbar.tween import Tween
from sliderbar.utils import clear_css

BAR_HEIGHT = 4
PADDING = 8
MIN_WIDTH = 120
NATURAL_WIDTH = 300

# holo blue dark
BAR_COLOR = (0x00/255, 0x99/255, 0xcc/255, 1)


class SliderBar(Gtk.Widget, SliderHost):
    __gtype_name__ = 'SliderBar'

    __gsignals__ = {
        'slider-changed': (GObject.SignalFlags.RUN_LAST, None, (int, int)),
    }

    def __init__(self, ranges=None):
        super().__init__()

        self.thumb_positions = {THUMB_MIN: 0.0, THUMB_MAX: 0.0}
        self.front_thumb = THUMB_MAX
        self.listener = None

        # Raises InvalidConfiguration for an unusable range
        self.controller = SliderController(self, ranges=ranges, thumb_size=THUMB_SIZE)
        self.controller.set_listener(self.on_changed)

        self.bar_color = BAR_COLOR
        self.thumb_color = BAR_COLOR

        self.set_can_target(True)
        self.set_focusable(True)

        self.drag_gesture = Gtk.GestureDrag.new()
        self.drag_gesture.connect('drag-begin', self.on_drag_begin)
        self.drag_gesture.connect('drag-update', self.on_drag_update)
        self.drag_gesture.connect('drag-end', self.on_drag_end)
        self.drag_gesture.connect('cancel', self.on_drag_cancel)
        self.add_controller(self.drag_gesture)

    def set_on_slider_changed_listener(self, listener):
        self.listener = listener

    def on_changed(self, min_value, max_value):
        if self.listener:
            self.listener(min_value, max_value)
        self.emit('slider-changed', min_value, max_value)

    def get_values(self):
        return self.controller.snapped_values()

    # Host side of the controller

    def position_of(self, thumb):
        return self.thumb_positions[thumb]

    def set_position(self, thumb, x):
        self.thumb_positions[thumb] = x

    def bring_to_front(self, thumb):
        self.front_thumb = thumb

    def request_redraw(self):
        self.queue_draw()

    def schedule_tween(self, thumb, start, end, duration, on_tick, on_cancel):
        return Tween(start, end, duration, on_tick, on_cancel).start()

    # Called internally by Gtk Layout System
    def do_measure(self, orientation, for_size):
        if orientation == Gtk.Orientation.VERTICAL:
            height = THUMB_SIZE + 2 * PADDING
            return height, height, -1, -1
        return MIN_WIDTH, NATURAL_WIDTH, -1, -1

    def do_size_allocate(self, width, height, baseline):
        was_laid_out = self.controller.is_laid_out
        self.controller.layout(width)
        if self.controller.is_laid_out and not was_laid_out:
            # Report the starting pair once allocation is over
            GLib.idle_add(self.emit_values)

    def emit_values(self):
        self.on_changed(*self.get_values())
        return GLib.SOURCE_REMOVE

    def do_snapshot(self, snapshot):
        width = self.get_width()
        height = self.get_height()
        cr = snapshot.append_cairo(Graphene.Rect().init(0, 0, width, height))

        y = height / 2
        start_x, end_x = self.controller.progress_range()
        cr.set_source_rgba(*self.bar_color)
        cr.set_line_width(BAR_HEIGHT)
        cr.set_line_cap(cairo.LINE_CAP_ROUND)
        cr.move_to(start_x, y)
        cr.line_to(end_x, y)
        cr.stroke()

        back_thumb = THUMB_MIN if self.front_thumb == THUMB_MAX else THUMB_MAX
        cr.set_source_rgba(*self.thumb_color)
        for thumb in (back_thumb, self.front_thumb):
            self.draw_thumb(cr, self.thumb_positions[thumb], y)

    def draw_thumb(self, cr, x, y):
        radius = THUMB_SIZE / 2
        cr.new_path()
        cr.arc(x + radius, y, radius, 0, 2 * math.pi)
        cr.fill()

    # Gestures

    def on_drag_begin(self, gesture, start_x, start_y):
        if self.controller.press(start_x, self.front_thumb):
            gesture.set_state(Gtk.EventSequenceState.CLAIMED)
        else:
            gesture.set_state(Gtk.EventSequenceState.DENIED)

    def on_drag_update(self, gesture, offset_x, offset_y):
        ok, start_x, start_y = gesture.get_start_point()
        if ok:
            self.controller.move(start_x + offset_x)

    def on_drag_end(self, gesture, offset_x, offset_y):
        self.controller.release()

    def on_drag_cancel(self, gesture, sequence):
        self.controller.cancel_drag()

    def update_theme(self, is_dark):
        clear_css(self)
        self.add_css_class("sliderbar-dark" if is_dark else "sliderbar-light")
        if is_dark:
            # holo blue light
            self.bar_color = (0x33/255, 0xb5/255, 0xe5/255, 1)
            self.thumb_color = (1, 1, 1, 1)
        else:
            self.bar_color = BAR_COLOR
            self.thumb_color = BAR_COLOR
        self.queue_draw()
