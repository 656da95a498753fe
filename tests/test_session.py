"""
Tests for the surface lifecycle host.
"""

import threading
import time
from dataclasses import replace

import pytest

from rollerball.config_loader import load_config
from rollerball.session import RollerSession

from conftest import GatedTarget, RecordingTarget


@pytest.fixture
def session():
    session = RollerSession(config=load_config(), seed=5)
    yield session
    session.surface_destroyed()


class TestRollerSession:

    def test_events_without_surface_are_dropped(self, session):
        assert session.loop is None
        session.change_acceleration(1.0, 2.0)
        session.shake()
        assert session.loop is None

    def test_surface_created_starts_loop(self, session):
        loop = session.surface_created(RecordingTarget())

        assert session.loop is loop
        assert loop.is_running

    def test_tilt_is_routed_to_loop(self, session):
        loop = session.surface_created(RecordingTarget())
        session.change_acceleration(-3.0, 4.0)

        assert loop.velocity.snapshot() == (-3.0, 4.0)

    def test_shake_resets_round(self, session):
        loop = session.surface_created(RecordingTarget())
        session.change_acceleration(0.0, 40.0)

        deadline = time.time() + 5.0
        while loop.game.ball.center[1] == 110.0 and time.time() < deadline:
            time.sleep(0.005)

        session.change_acceleration(0.0, 0.0)
        # The loop may run one more tick with the old reading
        time.sleep(0.05)
        session.shake()
        time.sleep(0.05)

        assert loop.game.ball.center == (400.0, 110.0)

    def test_surface_destroyed_stops_loop(self, session):
        loop = session.surface_created(RecordingTarget())
        session.surface_destroyed()

        assert session.loop is None
        assert not loop.is_running

    def test_new_surface_replaces_loop(self, session):
        first = session.surface_created(RecordingTarget())
        second = session.surface_created(RecordingTarget(640, 960))

        assert not first.is_running
        assert second.is_running
        assert second.game.surface_width == 640

    def test_surface_destroyed_waits_out_slow_frame(self):
        config = load_config()
        config = replace(config, loop=replace(config.loop, join_timeout=0.01))
        session = RollerSession(config=config, seed=5)
        target = GatedTarget()
        loop = session.surface_created(target)
        assert target.entered.wait(5.0)

        releaser = threading.Timer(0.1, target.release.set)
        releaser.start()
        session.surface_destroyed()

        # Returned only after the stalled frame was released
        assert target.release.is_set()
        assert not loop.is_running
        assert session.loop is None
        releaser.join()
