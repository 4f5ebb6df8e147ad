from unittest import TestCase, main

from tilemerge.core.geometry import Direction
from tilemerge.utils.controls import direction_from_key, direction_from_swipe


class TestKeys(TestCase):
    def test_arrow_key_codes(self):
        """
        Browser arrow key codes map to directions.
        """
        self.assertIs(direction_from_key(37), Direction.LEFT)
        self.assertIs(direction_from_key(38), Direction.UP)
        self.assertIs(direction_from_key(39), Direction.RIGHT)
        self.assertIs(direction_from_key(40), Direction.DOWN)
        self.assertIsNone(direction_from_key(13))

    def test_key_names(self):
        self.assertIs(direction_from_key('left'), Direction.LEFT)
        self.assertIs(direction_from_key('W'), Direction.UP)
        self.assertIs(direction_from_key('d'), Direction.RIGHT)
        self.assertIsNone(direction_from_key('escape'))
        self.assertIsNone(direction_from_key(None))


class TestSwipe(TestCase):
    def test_swipe_directions(self):
        """
        Screen y grows downwards, so a swipe towards the bottom moves down.
        """
        self.assertIs(direction_from_swipe((100, 100), (160, 110)), Direction.RIGHT)
        self.assertIs(direction_from_swipe((100, 100), (40, 90)), Direction.LEFT)
        self.assertIs(direction_from_swipe((100, 100), (110, 180)), Direction.DOWN)
        self.assertIs(direction_from_swipe((100, 100), (95, 20)), Direction.UP)

    def test_missing_touch(self):
        self.assertIsNone(direction_from_swipe(None, (1, 1)))
        self.assertIsNone(direction_from_swipe((1, 1), None))


if __name__ == '__main__':
    main()
