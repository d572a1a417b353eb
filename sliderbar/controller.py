from sliderbar.snapper import RangeSnapper, default_range

THUMB_MIN = 'min'
THUMB_MAX = 'max'

THUMB_SIZE = 24
ANIMATION_DURATION = 10  # ms, settle tween after release


class SliderHost:
    """
    What the controller needs from the toolkit side.

    Positions are pixel offsets of a thumb's leading edge along the track.
    """

    def position_of(self, thumb):
        raise NotImplementedError

    def set_position(self, thumb, x):
        raise NotImplementedError

    def bring_to_front(self, thumb):
        raise NotImplementedError

    def request_redraw(self):
        raise NotImplementedError

    def schedule_tween(self, thumb, start, end, duration, on_tick, on_cancel):
        """Start animating and return a handle with cancel() and is_running"""
        raise NotImplementedError


class DragSession:
    def __init__(self, thumb, offset, last_x, last_value):
        self.thumb = thumb
        self.offset = offset  # thumb position minus pointer position at press
        self.last_x = last_x
        self.last_value = last_value


class SliderController:
    """Interaction logic of a two-thumb slider, independent of any toolkit"""

    def __init__(self, host, ranges=None, thumb_size=THUMB_SIZE):
        self.host = host
        self.thumb_size = thumb_size
        self.snapper = RangeSnapper(default_range() if ranges is None else ranges)

        self.width = 0
        self.listener = None
        self.session = None
        self._tweens = {}
        # track length the current thumb positions were laid out for
        self._layout_track = 0

    def set_listener(self, listener):
        """Only the most recently set listener gets (min, max) updates"""
        self.listener = listener

    def notify(self, min_value, max_value):
        if self.listener:
            self.listener(min_value, max_value)

    # Geometry

    @property
    def track_max(self):
        return max(0, self.width - self.thumb_size)

    @property
    def is_laid_out(self):
        return self.track_max > 0

    def layout(self, width):
        """Record the allocated width, keeping both thumbs at the same percentage"""
        self.width = width
        track = self.track_max
        if track <= 0:
            return

        if self._layout_track <= 0:
            self.host.set_position(THUMB_MIN, 0.0)
            self.host.set_position(THUMB_MAX, float(track))
        elif track != self._layout_track:
            scale = track / self._layout_track
            if self.session:
                self.session.last_x *= scale
                self.session.offset *= scale
            for thumb in (THUMB_MIN, THUMB_MAX):
                self.cancel_tween(thumb)
                x = self.host.position_of(thumb) * scale
                self.host.set_position(thumb, min(float(track), max(0.0, x)))
        self._layout_track = track
        self.host.request_redraw()

    def value_range(self):
        """Both thumb positions as percentages of the track"""
        track = self.track_max
        if track <= 0:
            return 0.0, 0.0
        return (self.host.position_of(THUMB_MIN) * 100 / track,
                self.host.position_of(THUMB_MAX) * 100 / track)

    def snapped_values(self):
        return self.snapper.snap_pair(*self.value_range())

    def progress_range(self):
        """Centres of the min and max thumbs"""
        half = self.thumb_size / 2
        return (self.host.position_of(THUMB_MIN) + half,
                self.host.position_of(THUMB_MAX) + half)

    def value_to_position(self, value):
        return value * self.track_max / 100

    def thumb_at(self, x, front=THUMB_MAX):
        min_x = self.host.position_of(THUMB_MIN)
        max_x = self.host.position_of(THUMB_MAX)
        if min_x == max_x:
            if not min_x <= x <= min_x + self.thumb_size:
                return None
            return THUMB_MIN if x < min_x + self.thumb_size / 2 else THUMB_MAX

        back = THUMB_MIN if front == THUMB_MAX else THUMB_MAX
        for thumb in (front, back):
            left = self.host.position_of(thumb)
            if left <= x <= left + self.thumb_size:
                return thumb
        return None

    def validate_x(self, thumb, x):
        track = self.track_max
        x = min(float(track), max(0.0, x))
        if thumb == THUMB_MIN:
            return min(x, self.host.position_of(THUMB_MAX))
        return max(x, self.host.position_of(THUMB_MIN))

    # Drag session

    @property
    def is_dragging(self):
        return self.session is not None

    @property
    def dragged_thumb(self):
        return self.session.thumb if self.session else None

    def press(self, x, front=THUMB_MAX):
        """Start dragging the thumb under x. Returns False if there is none"""
        if not self.is_laid_out:
            return False
        thumb = self.thumb_at(x, front)
        if thumb is None:
            return False

        self.cancel_tween(thumb)
        if self.host.position_of(THUMB_MIN) == self.host.position_of(THUMB_MAX):
            self.host.bring_to_front(thumb)

        thumb_x = self.host.position_of(thumb)
        min_value, max_value = self.snapped_values()
        last_value = min_value if thumb == THUMB_MIN else max_value
        self.session = DragSession(thumb, thumb_x - x, thumb_x, last_value)
        return True

    def move(self, x):
        if not self.session:
            return
        thumb = self.session.thumb
        self.host.set_position(thumb, self.validate_x(thumb, x + self.session.offset))
        self.host.request_redraw()
        self.notify(*self.snapped_values())

    def release(self):
        if not self.session:
            return
        session = self.session
        self.session = None

        min_value, max_value = self.snapped_values()
        if min_value == max_value:
            # Overlap: put the dragged thumb back where the gesture started
            self.animate(session.thumb, session.last_x)
            self.notify(*self._reverted_pair(session, min_value, max_value))
        elif session.thumb == THUMB_MIN:
            self.animate(THUMB_MIN, self.value_to_position(min_value))
        else:
            self.animate(THUMB_MAX, self.value_to_position(max_value))

    def cancel_drag(self):
        """Abandon the gesture, returning the thumb to its starting point"""
        if not self.session:
            return
        session = self.session
        self.session = None
        self.animate(session.thumb, session.last_x)
        self.notify(*self._reverted_pair(session, *self.snapped_values()))

    def _reverted_pair(self, session, min_value, max_value):
        if session.thumb == THUMB_MIN:
            return session.last_value, max_value
        return min_value, session.last_value

    # Settle animation

    def animate(self, thumb, destination):
        self.cancel_tween(thumb)
        # Allowed values outside 0..100 still settle on the track
        destination = min(float(self.track_max), max(0.0, destination))

        def on_tick(value):
            self.host.set_position(thumb, value)
            self.host.request_redraw()

        def on_cancel(value):
            self._tweens.pop(thumb, None)

        self._tweens[thumb] = self.host.schedule_tween(
            thumb, self.host.position_of(thumb), destination,
            ANIMATION_DURATION, on_tick, on_cancel)

    def is_settling(self, thumb):
        tween = self._tweens.get(thumb)
        return tween is not None and tween.is_running

    def cancel_tween(self, thumb):
        tween = self._tweens.pop(thumb, None)
        if tween is not None:
            tween.cancel()
