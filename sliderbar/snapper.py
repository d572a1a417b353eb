from bisect import bisect_left


class InvalidConfiguration(ValueError):
    """Raised when a slider is built from an unusable range"""


def default_range():
    """0, 5, 10, ... 100"""
    return tuple(range(0, 101, 5))


class RangeSnapper:
    """
    Snap arbitrary values to the closest member of an ascending
    sequence of integers.

    When a value lies exactly between two members the lower one wins.
    """

    def __init__(self, ranges):
        ranges = tuple(ranges)
        if not ranges:
            raise InvalidConfiguration("range must contain at least one value")
        for value in ranges:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"range values must be integers, got {value!r}")
        for previous, current in zip(ranges, ranges[1:]):
            if current <= previous:
                raise InvalidConfiguration(
                    f"range must be strictly ascending ({previous} before {current})")
        self._ranges = ranges

    @property
    def ranges(self):
        return self._ranges

    def snap(self, value):
        index = bisect_left(self._ranges, value)
        if index == 0:
            return self._ranges[0]
        if index == len(self._ranges):
            return self._ranges[-1]
        lower = self._ranges[index - 1]
        upper = self._ranges[index]
        # Ties go to the lower value
        if value - lower <= upper - value:
            return lower
        return upper

    def snap_pair(self, min_value, max_value):
        return self.snap(min_value), self.snap(max_value)
