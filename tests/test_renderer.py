import random
import unittest
from unittest.mock import MagicMock

from emotropy.config import SimulationSettings
from emotropy.emotions.contracts import BlendEntry
from emotropy.emotions.profiles import PROFILES
from emotropy.emotions.tags import EmotionTag
from emotropy.particles.fields import FieldKind
from emotropy.particles.world import SimulationWorld
from emotropy.render.renderer import ATTRACT_COLOR, MOTION_BLUR, REPEL_COLOR, FrameRenderer
from emotropy.render.surface import CompositeMode


def make_surface():
    surface = MagicMock()
    surface.width = 400
    surface.height = 300
    return surface


def make_world():
    world = SimulationWorld(400, 300, SimulationSettings(), random.Random(1))
    world.spawn_blend([BlendEntry(tag=EmotionTag.JOY, weight=1.0)], 3)
    return world


class TestFrameRenderer(unittest.TestCase):

    def test_compositing_order(self):
        world = make_world()
        world.fields.place(50, 50, FieldKind.ATTRACT)
        surface = make_surface()

        FrameRenderer().render(world, surface)

        calls = surface.mock_calls
        modes = [(i, c.args[0]) for i, c in enumerate(calls) if c[0] == "set_composite"]
        self.assertEqual([mode for _, mode in modes], [CompositeMode.SOURCE_OVER, CompositeMode.LIGHTER, CompositeMode.SOURCE_OVER])
        lighter_at, restored_at = modes[1][0], modes[2][0]

        self.assertEqual(calls[1][0], "fill_rect")
        self.assertEqual(calls[1].args[0], MOTION_BLUR)

        particle_draws = [i for i, c in enumerate(calls) if c[0] == "fill_radial_gradient" and i > lighter_at]
        self.assertEqual(len(particle_draws), 3)
        self.assertTrue(all(i < restored_at for i in particle_draws))

        strokes = [i for i, c in enumerate(calls) if c[0] == "stroke_circle"]
        self.assertEqual(len(strokes), 1)
        self.assertGreater(strokes[0], restored_at)

    def test_background_glow_layers(self):
        world = make_world()
        world.particles = []
        surface = make_surface()
        FrameRenderer().render(world, surface)
        self.assertEqual(surface.fill_radial_gradient.call_count, 1)
        x, y, radius, stops = surface.fill_radial_gradient.call_args.args
        self.assertEqual((x, y), (200, 150))
        self.assertAlmostEqual(radius, 400 * 0.55)
        self.assertEqual(stops[0][1], (100, 100, 150, 0.02))

        world.bg_glow = PROFILES[EmotionTag.JOY].bg_glow
        world.bg_glow_secondary = PROFILES[EmotionTag.GRATITUDE].bg_glow
        surface = make_surface()
        FrameRenderer().render(world, surface)
        self.assertEqual(surface.fill_radial_gradient.call_count, 2)
        x, y, radius, stops = surface.fill_radial_gradient.call_args.args
        self.assertAlmostEqual(x, 200 * 1.1)
        self.assertAlmostEqual(y, 150 * 0.9)
        self.assertAlmostEqual(radius, 400 * 0.4)
        self.assertEqual(stops[0][1], (220, 200, 50, 0.03))

    def test_field_indicator_colors(self):
        world = make_world()
        world.particles = []
        world.fields.place(10, 10, FieldKind.ATTRACT)
        world.fields.place(90, 90, FieldKind.REPEL)
        surface = make_surface()
        FrameRenderer().render(world, surface)

        colors = [c.args[3][:3] for c in surface.stroke_circle.call_args_list]
        self.assertEqual(colors, [ATTRACT_COLOR, REPEL_COLOR])
        dot_alpha = surface.fill_circle.call_args_list[0].args[3][3]
        self.assertAlmostEqual(dot_alpha, 1.0)

    def test_composite_is_restored_when_a_particle_fails(self):
        world = make_world()
        broken = MagicMock()
        broken.render.side_effect = RuntimeError("boom")
        world.particles = [broken]
        surface = make_surface()

        with self.assertRaises(RuntimeError):
            FrameRenderer().render(world, surface)
        surface.set_composite.assert_called_with(CompositeMode.SOURCE_OVER)

    def test_renderer_owns_its_color_cache(self):
        renderer = FrameRenderer(cache_size=5)
        self.assertEqual(renderer.colors.max_size, 5)
        renderer.render(make_world(), make_surface())
        self.assertLessEqual(len(renderer.colors), 5)


if __name__ == '__main__':
    unittest.main()
