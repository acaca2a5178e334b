"""
状态机测试

用手动驱动器喂入帧值和完成信号，验证：
- 阶段顺序 ROTATE -> MERGE -> EXPAND -> 终态
- 每个阶段只写入自己负责的数值
- 只在完成信号时切换阶段
"""

import math

import pytest

from splash_reveal.components.splash.driver import EasingKind
from splash_reveal.components.splash.state_machine import SplashPhase, SplashStateMachine
from splash_reveal.utils.exceptions import SplashStateError


@pytest.fixture
def redraws():
    return []


@pytest.fixture
def phases():
    return []


@pytest.fixture
def machine(driver, settings, context, redraws, phases):
    return SplashStateMachine(
        driver,
        settings,
        context,
        request_redraw=lambda: redraws.append(True),
        on_phase_changed=phases.append,
    )


class TestLifecycle:
    """启动与阶段切换"""

    def test_no_phase_before_start(self, machine, driver):
        assert machine.phase is None
        assert not machine.started
        assert driver.handles == []

    def test_start_enters_rotate(self, machine, driver):
        machine.start()
        assert machine.phase == SplashPhase.ROTATE
        assert machine.active_handle is driver.latest
        assert len(driver.handles) == 1

    def test_start_twice_rejected(self, machine):
        machine.start()
        with pytest.raises(SplashStateError):
            machine.start()

    def test_full_sequence(self, driver, settings, context, phases):
        finished = []
        machine = SplashStateMachine(
            driver,
            settings,
            context,
            request_redraw=lambda: None,
            on_phase_changed=phases.append,
            on_finished=lambda: finished.append(True),
        )

        machine.start()
        driver.latest.play()
        driver.latest.play()
        driver.latest.play()

        assert phases == [SplashPhase.ROTATE, SplashPhase.MERGE, SplashPhase.EXPAND]
        assert machine.phase == SplashPhase.EXPAND
        assert machine.finished
        assert finished == [True]
        assert len(driver.handles) == 3

    def test_ticks_never_transition(self, machine, driver):
        machine.start()
        handle = driver.latest
        handle.tick(0.0)
        handle.tick(math.pi * 2)
        handle.tick(math.pi * 2)
        assert machine.phase == SplashPhase.ROTATE
        assert len(driver.handles) == 1

    def test_completion_fires_once(self, machine, driver, phases):
        machine.start()
        rotate = driver.latest
        rotate.complete()
        rotate.complete()
        assert phases == [SplashPhase.ROTATE, SplashPhase.MERGE]
        assert len(driver.handles) == 2

    def test_expand_is_terminal(self, machine, driver, phases):
        machine.start()
        for _ in range(3):
            driver.latest.complete()
        assert machine.finished
        assert phases[-1] == SplashPhase.EXPAND
        assert len(driver.handles) == 3

    def test_synchronous_completion(self, immediate_driver, settings, context):
        machine = SplashStateMachine(immediate_driver, settings, context, request_redraw=lambda: None)
        machine.start()
        assert machine.finished
        assert machine.phase == SplashPhase.EXPAND
        assert machine.active_handle.spec == immediate_driver.specs[-1]
        assert context.hole_radius == pytest.approx(context.geometry.max_radius)


class TestRotate:
    """旋转阶段"""

    def test_driver_spec(self, machine, driver, settings):
        machine.start()
        spec = driver.latest.spec
        assert spec.start == 0.0
        assert spec.end == pytest.approx(2 * math.pi)
        assert spec.duration_ms == 1200
        assert spec.loops == 3
        assert spec.easing.kind == EasingKind.LINEAR
        assert not spec.reverse

    def test_tick_writes_angle_and_redraws(self, machine, driver, context, redraws):
        machine.start()
        driver.latest.tick(1.25)
        assert context.rotate_angle == 1.25
        assert context.rotate_radius == 90.0
        assert context.hole_radius == 0.0
        assert redraws == [True]

    def test_three_full_sweeps(self, machine, driver, context):
        angles = []
        machine.start()
        handle = driver.latest
        original_tick = handle._on_tick

        def record(value):
            original_tick(value)
            angles.append(context.rotate_angle)

        handle._on_tick = record
        handle.play(steps=12)

        sweeps = 1 + sum(1 for prev, cur in zip(angles, angles[1:]) if cur < prev)
        assert sweeps == 3
        assert min(angles) == 0.0
        assert max(angles) == pytest.approx(2 * math.pi)


class TestMerge:
    """聚合阶段"""

    def test_driver_spec_is_reversed_overshoot(self, machine, driver):
        machine.start()
        driver.latest.complete()
        spec = driver.latest.spec
        assert spec.start == 18.0
        assert spec.end == 90.0
        assert spec.reverse
        assert spec.loops == 1
        assert spec.easing.kind == EasingKind.OVERSHOOT
        assert spec.easing.overshoot == 10.0

    def test_radius_runs_from_orbit_to_dot(self, machine, driver, context):
        radii = []
        machine.start()
        driver.latest.complete()
        handle = driver.latest
        original_tick = handle._on_tick
        handle._on_tick = lambda value: (original_tick(value), radii.append(context.rotate_radius))
        handle.play(steps=40)

        assert radii[0] == pytest.approx(90.0)
        assert radii[-1] == 18.0
        # 回弹出现在收缩开始阶段
        assert max(radii) > 90.0

    def test_angle_frozen_during_merge(self, machine, driver, context):
        machine.start()
        driver.latest.tick(2.5)
        driver.latest.complete()
        driver.latest.play()
        assert context.rotate_angle == 2.5


class TestExpand:
    """扩散阶段"""

    def test_driver_spec_uses_max_radius(self, machine, driver, context):
        machine.start()
        driver.latest.complete()
        driver.latest.complete()
        spec = driver.latest.spec
        assert spec.start == 18.0
        assert spec.end == pytest.approx(context.geometry.max_radius)
        assert spec.easing.kind == EasingKind.LINEAR
        assert not spec.reverse

    def test_hole_radius_grows_to_max(self, machine, driver, context):
        holes = []
        machine.start()
        driver.latest.complete()
        driver.latest.complete()
        handle = driver.latest
        original_tick = handle._on_tick
        handle._on_tick = lambda value: (original_tick(value), holes.append(context.hole_radius))
        handle.play(steps=30)

        assert holes[0] == 18.0
        assert holes[-1] == pytest.approx(context.geometry.max_radius)
        assert all(b > a for a, b in zip(holes, holes[1:]))

    def test_earlier_scalars_untouched(self, machine, driver, context):
        machine.start()
        driver.latest.tick(1.0)
        driver.latest.complete()
        driver.latest.tick(30.0)
        driver.latest.complete()
        driver.latest.play()
        assert context.rotate_angle == 1.0
        assert context.rotate_radius == 30.0
