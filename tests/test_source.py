# =============================================================================
# test_source.py - Character Source and Position Tracker Unit Tests
# =============================================================================

from rox.source import CharSource, PositionTracker
from rox.errors import Position


class TestCharSource:
    """Test the peekable character cursor."""

    def test_advance_in_order(self):
        chars = CharSource("ab")
        assert chars.advance() == "a"
        assert chars.advance() == "b"
        assert chars.advance() == ""
        assert chars.at_end()

    def test_peek_does_not_consume(self):
        chars = CharSource("xy")
        assert chars.peek() == "x"
        assert chars.peek() == "x"
        assert chars.consumed == 0

    def test_two_character_lookahead(self):
        chars = CharSource("1.5")
        chars.advance()
        assert chars.peek() == "."
        assert chars.peek(1) == "5"
        assert chars.peek(2) == ""

    def test_empty_source(self):
        chars = CharSource("")
        assert chars.at_end()
        assert chars.peek() == ""
        assert chars.advance() == ""

    def test_consumed_count(self):
        chars = CharSource("hello")
        while not chars.at_end():
            chars.advance()
        assert chars.consumed == 5


class TestPositionTracker:
    """Test line and column tracking."""

    def test_starts_at_origin(self):
        assert PositionTracker().position == Position(0, 0)

    def test_forward(self):
        tracker = PositionTracker()
        tracker.forward()
        tracker.forward()
        assert tracker.position == Position(0, 2)

    def test_down_resets_column(self):
        tracker = PositionTracker()
        tracker.forward()
        tracker.down()
        assert tracker.position == Position(1, 0)

    def test_track(self):
        tracker = PositionTracker()
        for char in "ab\ncd\n\ne":
            tracker.track(char)
        assert tracker.position == Position(3, 1)
