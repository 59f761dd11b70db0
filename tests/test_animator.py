import gc
import unittest

from windmill.controller.animator import Animator
from windmill.model.state import WindmillState, next_angle

from fake_clock import FakeClock


class Owner:
    def __init__(self) -> None:
        self.state = WindmillState()
        self.redraws = 0

    def request_redraw(self) -> None:
        self.redraws += 1


class NextAngleTests(unittest.TestCase):
    def test_cycle_skips_zero(self):
        angle = 0
        for k in range(1, 1500):
            angle = next_angle(angle)
            self.assertEqual(angle, (k - 1) % 359 + 1)

    def test_wraps_to_one(self):
        self.assertEqual(next_angle(358), 359)
        self.assertEqual(next_angle(359), 1)

    def test_out_of_range_restarts(self):
        self.assertEqual(next_angle(360), 1)
        self.assertEqual(next_angle(-5), 1)


class AnimatorTests(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.owner = Owner()
        self.animator = Animator(self.owner, self.clock, interval_ms=10)

    def test_idle_until_started(self):
        self.clock.advance(1000)
        self.assertFalse(self.animator.is_running)
        self.assertEqual(self.owner.state.rotation_angle, 0)
        self.assertEqual(self.owner.redraws, 0)

    def test_tick_after_fixed_delay(self):
        self.animator.start()
        self.assertTrue(self.animator.is_running)
        self.clock.advance(9)
        self.assertEqual(self.owner.state.rotation_angle, 0)
        self.clock.advance(1)
        self.assertEqual(self.owner.state.rotation_angle, 1)
        self.assertEqual(self.owner.redraws, 1)
        self.assertTrue(self.animator.is_running)

    def test_angle_sequence(self):
        self.animator.start()
        self.clock.advance(359 * 10)
        self.assertEqual(self.owner.state.rotation_angle, 359)
        self.clock.advance(10)
        self.assertEqual(self.owner.state.rotation_angle, 1)
        self.clock.advance(10)
        self.assertEqual(self.owner.state.rotation_angle, 2)
        self.assertEqual(self.owner.redraws, 361)

    def test_start_restarts_instead_of_adding(self):
        self.animator.start()
        self.clock.advance(5)
        self.animator.start()
        self.animator.start()
        self.assertEqual(len(self.clock.pending), 1)
        self.clock.advance(5)
        self.assertEqual(self.owner.state.rotation_angle, 0)
        self.clock.advance(5)
        self.assertEqual(self.owner.state.rotation_angle, 1)
        self.clock.advance(100)
        self.assertEqual(self.owner.state.rotation_angle, 11)

    def test_stop_halts_everything(self):
        self.animator.start()
        self.clock.advance(55)
        self.animator.stop()
        angle, redraws = self.owner.state.rotation_angle, self.owner.redraws
        self.clock.advance(10 ** 6)
        self.assertFalse(self.animator.is_running)
        self.assertEqual(self.owner.state.rotation_angle, angle)
        self.assertEqual(self.owner.redraws, redraws)
        self.assertEqual(self.clock.pending, [])

    def test_manual_tick_replaces_pending_tick(self):
        self.animator.start()
        self.animator.tick()
        self.assertEqual(len(self.clock.pending), 1)
        self.animator.stop()
        self.clock.advance(1000)
        self.assertEqual(self.owner.state.rotation_angle, 1)
        self.assertEqual(self.owner.redraws, 1)
        self.assertEqual(self.clock.pending, [])

    def test_stop_while_idle_is_noop(self):
        self.animator.stop()
        self.animator.stop()
        self.assertFalse(self.animator.is_running)

    def test_restart_after_stop(self):
        self.animator.start()
        self.clock.advance(30)
        self.animator.stop()
        self.animator.start()
        self.clock.advance(20)
        self.assertEqual(self.owner.state.rotation_angle, 5)

    def test_dead_owner_drops_tick(self):
        self.animator.start()
        del self.owner
        gc.collect()
        self.clock.advance(100)
        self.assertFalse(self.animator.is_running)
        self.assertEqual(self.clock.pending, [])

    def test_dispose_cancels_and_blocks_restart(self):
        self.animator.start()
        self.animator.dispose()
        self.assertTrue(self.animator.is_disposed)
        self.animator.start()
        self.clock.advance(1000)
        self.assertFalse(self.animator.is_running)
        self.assertEqual(self.owner.state.rotation_angle, 0)

    def test_animator_does_not_keep_owner_alive(self):
        owner = Owner()
        Animator(owner, self.clock).start()
        del owner
        gc.collect()
        self.clock.advance(10)
        self.assertEqual(self.clock.pending, [])


if __name__ == "__main__":
    unittest.main()
