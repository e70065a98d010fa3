import random
import unittest
from unittest.mock import MagicMock

from emotropy.config import SimulationSettings
from emotropy.emotions.classifier import classify
from emotropy.emotions.contracts import BlendEntry
from emotropy.emotions.profiles import IDLE_PROFILE, PROFILES
from emotropy.emotions.tags import EmotionTag
from emotropy.particles.fields import FieldKind
from emotropy.particles.world import DEFAULT_BG_GLOW, SimulationWorld


def make_world(**settings):
    return SimulationWorld(400, 300, SimulationSettings(**settings), random.Random(42))


def blend(*entries):
    return [BlendEntry(tag=tag, weight=weight) for tag, weight in entries]


class TestSpawning(unittest.TestCase):

    def test_spawn_splits_count_by_weight(self):
        world = make_world()
        spawned = world.spawn_blend(blend((EmotionTag.JOY, 0.75), (EmotionTag.CALM, 0.25)), 20)
        self.assertEqual(spawned, 20)
        behaviors = [p.behavior for p in world.particles]
        self.assertEqual(behaviors.count("joy"), 15)
        self.assertEqual(behaviors.count("calm"), 5)

    def test_every_entry_gets_at_least_one_particle(self):
        world = make_world()
        spawned = world.spawn_blend(blend((EmotionTag.JOY, 0.99), (EmotionTag.CALM, 0.01)), 10)
        self.assertEqual(spawned, 11)
        self.assertIn("calm", [p.behavior for p in world.particles])

    def test_spawn_is_clustered_around_center(self):
        world = make_world()
        world.spawn_blend(blend((EmotionTag.ANGER, 1.0)), 50)
        half_spread = min(world.width, world.height) * world.settings.spawn_spread / 2
        cx, cy = world.center
        for particle in world.particles:
            self.assertLessEqual(abs(particle.x - cx), half_spread)
            self.assertLessEqual(abs(particle.y - cy), half_spread)

    def test_batch_jitter_stays_near_profile(self):
        world = make_world()
        world.spawn_blend(blend((EmotionTag.SADNESS, 1.0)), 50)
        base = PROFILES[EmotionTag.SADNESS]
        for particle in world.particles:
            self.assertGreaterEqual(particle.lifespan, round(base.lifespan * 0.8))
            self.assertLessEqual(particle.lifespan, round(base.lifespan * 1.2))
            self.assertGreaterEqual(particle.speed, base.speed * 0.7)
            self.assertLessEqual(particle.speed, base.speed * 1.3)

    def test_bodily_is_passed_to_particles(self):
        world = make_world()
        world.spawn_blend(blend((EmotionTag.JOY, 1.0)), 3, bodily=1.7)
        self.assertTrue(all(p.bodily == 1.7 for p in world.particles))

    def test_spawn_idle(self):
        world = make_world()
        self.assertEqual(world.spawn_idle(), IDLE_PROFILE.count)
        self.assertEqual(len(world), IDLE_PROFILE.count)

    def test_tag_and_weight_pairs_are_accepted(self):
        world = make_world()
        spawned = world.spawn_blend([(EmotionTag.ANGER, 0.5), ("calm", 0.5)], 10)
        self.assertEqual(spawned, 10)
        behaviors = [p.behavior for p in world.particles]
        self.assertEqual(behaviors.count("anger"), 5)
        self.assertEqual(behaviors.count("calm"), 5)

    def test_unknown_tag_spawns_idle_particles(self):
        world = make_world()
        self.assertEqual(world.spawn_blend([("future", 1.0)], 5), 5)
        self.assertTrue(all(p.color == IDLE_PROFILE.color for p in world.particles))
        self.assertTrue(all(p.behavior == IDLE_PROFILE.behavior for p in world.particles))


class TestCapacity(unittest.TestCase):

    def test_oldest_particles_are_evicted(self):
        world = make_world(max_particles=50)
        world.spawn_blend(blend((EmotionTag.JOY, 1.0)), 40)
        first = list(world.particles)
        world.spawn_blend(blend((EmotionTag.CALM, 1.0)), 40)
        second = world.particles[-40:]

        self.assertEqual(len(world), 50)
        self.assertEqual(world.particles[:10], first[30:])
        self.assertTrue(all(p.behavior == "calm" for p in second))

    def test_oversized_batch_is_truncated(self):
        world = make_world(max_particles=50)
        world.spawn_blend(blend((EmotionTag.JOY, 1.0)), 10)
        spawned = world.spawn_blend(blend((EmotionTag.CALM, 1.0)), 80)
        self.assertEqual(spawned, 50)
        self.assertEqual(len(world), 50)
        self.assertTrue(all(p.behavior == "calm" for p in world.particles))

    def test_eviction_log_counts_removed_particles(self):
        world = make_world(max_particles=50)
        world.spawn_blend(blend((EmotionTag.JOY, 1.0)), 10)
        with self.assertLogs("emotropy.particles.world", level="DEBUG") as logs:
            world.spawn_blend(blend((EmotionTag.CALM, 1.0)), 80)
        output = "\n".join(logs.output)
        self.assertIn("evicted 10 oldest particle(s)", output)
        self.assertIn("kept its newest 50 particle(s)", output)

    def test_capacity_holds_over_many_submissions(self):
        world = make_world(max_particles=100)
        for text in ("I am furious", "I feel calm", "happy and grateful", "so scared"):
            world.submit(classify(text))
            world.tick()
            self.assertLessEqual(len(world), 100)


class TestSubmit(unittest.TestCase):

    def test_no_signal_spawns_nothing(self):
        world = make_world()
        self.assertEqual(world.submit(classify("12345")), 0)
        self.assertEqual(world.submit(classify("")), 0)
        self.assertTrue(world.is_idle())
        self.assertEqual(world.bg_glow, DEFAULT_BG_GLOW)

    def test_single_emotion_uses_single_count(self):
        world = make_world()
        result = classify("I am happy")
        self.assertEqual(world.submit(result), 120)
        self.assertEqual(world.bg_glow, PROFILES[EmotionTag.JOY].bg_glow)
        self.assertIsNone(world.bg_glow_secondary)

    def test_blend_uses_blend_count_and_secondary_tint(self):
        world = make_world()
        result = classify("I am so incredibly happy and grateful today")
        self.assertEqual(world.submit(result), 160)
        self.assertEqual(world.bg_glow, PROFILES[EmotionTag.JOY].bg_glow)
        self.assertEqual(world.bg_glow_secondary, PROFILES[EmotionTag.GRATITUDE].bg_glow)

    def test_explicit_count(self):
        world = make_world()
        self.assertEqual(world.submit(classify("I am happy"), count=7), 7)


class TestTick(unittest.TestCase):

    def test_global_forces_run_before_particles_integrate(self):
        world = make_world()
        calls = MagicMock()
        particle = calls.particle
        particle.alive = True
        world.fields = calls.fields
        world.particles = [particle]

        world.tick()

        names = [name for name, _, _ in calls.mock_calls]
        self.assertEqual(names, ["fields.tick", "fields.apply_repulsion", "particle.tick"])
        particle.tick.assert_called_once_with(400, 300)

    def test_dead_particles_are_culled(self):
        world = make_world()
        dying = MagicMock(alive=True)
        dying.tick.side_effect = lambda w, h: setattr(dying, "alive", False)
        living = MagicMock(alive=True)
        world.particles = [dying, living]

        world.tick()

        self.assertEqual(world.particles, [living])
        self.assertEqual(world.frame, 1)

    def test_population_stays_alive_and_empties(self):
        world = make_world()
        world.submit(classify("I am furious but grateful"))
        for _ in range(600):
            world.tick()
            for particle in world.particles:
                self.assertTrue(particle.alive)
                self.assertLess(particle.age, particle.lifespan)
        self.assertTrue(world.is_idle())

    def test_fields_act_on_particles(self):
        world = make_world()
        world.spawn_blend(blend((EmotionTag.CALM, 1.0)), 1)
        particle = world.particles[0]
        particle.vx = particle.vy = 0.0
        world.fields.place(particle.x + 20, particle.y, FieldKind.ATTRACT)
        world.tick()
        self.assertGreater(particle.vx, 0)

    def test_same_seed_same_simulation(self):
        def run():
            world = make_world()
            world.submit(classify("I am so scared and anxious"))
            for _ in range(10):
                world.tick()
            return [(p.x, p.y) for p in world.particles]

        self.assertEqual(run(), run())

    def test_resize(self):
        world = make_world()
        world.resize(800, 600)
        self.assertEqual(world.center, (400, 300))


if __name__ == '__main__':
    unittest.main()
