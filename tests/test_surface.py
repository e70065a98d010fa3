import os
import tempfile
import unittest

import pygame

from emotropy.render.surface import CompositeMode, PygameSurface, gradient_at


class TestGradientAt(unittest.TestCase):

    STOPS = [(0.0, (0, 0, 0, 1.0)), (0.5, (100, 100, 100, 0.5)), (1.0, (200, 200, 200, 0.0))]

    def test_ends(self):
        self.assertEqual(gradient_at(self.STOPS, 0.0), (0, 0, 0, 1.0))
        self.assertEqual(gradient_at(self.STOPS, 1.0), (200, 200, 200, 0.0))
        self.assertEqual(gradient_at(self.STOPS, 2.0), (200, 200, 200, 0.0))

    def test_interpolates_between_stops(self):
        r, g, b, a = gradient_at(self.STOPS, 0.75)
        self.assertAlmostEqual(r, 150)
        self.assertAlmostEqual(a, 0.25)


class TestPygameSurface(unittest.TestCase):

    def setUp(self):
        self.target = pygame.Surface((20, 20))
        self.target.fill((0, 0, 0))
        self.surface = PygameSurface(self.target)

    def rgb(self, x, y):
        return tuple(self.target.get_at((x, y)))[:3]

    def test_size(self):
        self.assertEqual((self.surface.width, self.surface.height), (20, 20))

    def test_set_composite_accepts_strings(self):
        self.surface.set_composite("lighter")
        self.assertIs(self.surface.composite_mode, CompositeMode.LIGHTER)
        with self.assertRaises(ValueError):
            self.surface.set_composite("multiply")

    def test_lighter_adds_overlapping_colors(self):
        self.surface.set_composite(CompositeMode.LIGHTER)
        self.surface.fill_circle(10, 10, 3, (255, 0, 0, 0.5))
        self.surface.fill_circle(10, 10, 3, (255, 0, 0, 0.5))
        self.assertEqual(self.rgb(10, 10), (254, 0, 0))
        self.surface.fill_circle(10, 10, 3, (0, 255, 0, 1.0))
        self.assertEqual(self.rgb(10, 10), (254, 255, 0))
        self.assertEqual(self.rgb(0, 0), (0, 0, 0))

    def test_source_over_paints_opaque_colors(self):
        self.target.fill((255, 255, 255))
        self.surface.fill_rect((8, 8, 20, 1.0))
        self.assertEqual(self.rgb(3, 3), (8, 8, 20))

    def test_translucent_fill_fades_the_frame(self):
        self.target.fill((255, 255, 255))
        self.surface.fill_rect((8, 8, 20, 0.22))
        r, g, b = self.rgb(3, 3)
        self.assertLess(r, 255)
        self.assertGreater(r, 100)

    def test_fill_overlay_is_reused_until_resize(self):
        self.surface.fill_rect((8, 8, 20, 0.22))
        overlay = self.surface._overlay
        self.surface.fill_rect((8, 8, 20, 0.22))
        self.assertIs(self.surface._overlay, overlay)

        self.surface.target = pygame.Surface((30, 10))
        self.surface.fill_rect((8, 8, 20, 1.0))
        self.assertIsNot(self.surface._overlay, overlay)
        self.assertEqual(self.surface._overlay.get_size(), (30, 10))
        self.assertEqual(tuple(self.surface.target.get_at((29, 9)))[:3], (8, 8, 20))

    def test_radial_gradient_is_brightest_at_center(self):
        self.surface.set_composite(CompositeMode.LIGHTER)
        self.surface.fill_radial_gradient(10, 10, 8, [(0.0, (255, 255, 255, 1.0)), (1.0, (255, 255, 255, 0.0))])
        self.assertGreater(self.rgb(10, 10)[0], self.rgb(10, 16)[0])
        self.assertEqual(self.rgb(0, 0), (0, 0, 0))

    def test_stroke_circle_leaves_center_empty(self):
        self.surface.stroke_circle(10, 10, 6, (100, 255, 200, 1.0), 1.5)
        self.assertEqual(self.rgb(10, 10), (0, 0, 0))
        ring = [self.rgb(x, 10) for x in range(13, 20)]
        self.assertTrue(any(pixel != (0, 0, 0) for pixel in ring))

    def test_zero_radius_draws_nothing(self):
        self.surface.fill_circle(10, 10, 0, (255, 255, 255, 1.0))
        self.surface.fill_radial_gradient(10, 10, 0, [(0.0, (255, 255, 255, 1.0))])
        self.assertEqual(self.rgb(10, 10), (0, 0, 0))

    def test_save(self):
        self.surface.fill_circle(10, 10, 4, (255, 0, 0, 1.0))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "frame.png")
            self.surface.save(path)
            self.assertTrue(os.path.exists(path))


if __name__ == '__main__':
    unittest.main()
