import unittest

from skinscan.models.geometry import Rectangle


class RectangleTests(unittest.TestCase):
    """Half-open rectangle arithmetic."""

    def test_size_and_area(self):
        r = Rectangle(1, 2, 4, 7)
        self.assertEqual(r.dx, 3)
        self.assertEqual(r.dy, 5)
        self.assertEqual(r.area, 15)

    def test_from_size_with_origin(self):
        self.assertEqual(Rectangle.from_size(3, 2, origin=(5, -1)), Rectangle(5, -1, 8, 1))

    def test_max_is_exclusive(self):
        r = Rectangle(0, 0, 2, 2)
        self.assertTrue(r.contains(1, 1))
        self.assertFalse(r.contains(2, 1))
        self.assertFalse(r.contains(1, 2))

    def test_inverted_rectangle_is_empty(self):
        r = Rectangle(5, 5, 2, 2)
        self.assertTrue(r.empty())
        self.assertEqual(r.area, 0)
        self.assertFalse(r.contains(3, 3))

    def test_intersect(self):
        a = Rectangle(0, 0, 4, 4)
        self.assertEqual(a.intersect(Rectangle(2, -1, 6, 3)), Rectangle(2, 0, 4, 3))
        self.assertTrue(a.intersect(Rectangle(10, 10, 12, 12)).empty())

    def test_contains_rect(self):
        a = Rectangle(0, 0, 4, 4)
        self.assertTrue(a.contains_rect(Rectangle(1, 1, 4, 4)))
        self.assertFalse(a.contains_rect(Rectangle(1, 1, 5, 4)))
        self.assertTrue(a.contains_rect(Rectangle(9, 9, 9, 9)))

    def test_translate(self):
        self.assertEqual(Rectangle(0, 0, 2, 3).translate(1, -1), Rectangle(1, -1, 3, 2))


if __name__ == '__main__':
    unittest.main()
