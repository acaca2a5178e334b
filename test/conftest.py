"""
测试公共夹具

Qt 相关测试使用 offscreen 平台，无需显示器。
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from splash_reveal.components.splash.driver import AnimationDriver, DriverHandle
from splash_reveal.components.splash.geometry import ViewGeometry
from splash_reveal.components.splash.state_machine import SplashContext
from splash_reveal.utils.config_manager import SplashSettings

PALETTE = ("#FF9600", "#02D1AC", "#FFD200", "#00C6FF", "#00E099", "#FF3892")


class ManualHandle(DriverHandle):
    """手动推进的动画句柄"""

    def tick(self, value: float):
        self._emit_tick(value)

    def complete(self):
        self._emit_complete()

    def play(self, steps: int = 20):
        """按真实驱动器的方式推进所有帧后完成

        反向播放时进度从1走到0，插值器作用在反向后的进度上。
        """
        spec = self.spec
        for _ in range(spec.loops):
            for k in range(steps + 1):
                progress = k / steps
                if spec.reverse:
                    progress = 1.0 - progress
                eased = spec.easing.value_at(progress)
                self.tick(spec.start + (spec.end - spec.start) * eased)
        self.complete()


class ManualDriver(AnimationDriver):
    """记录所有启动的动画，由测试手动喂入帧值"""

    def __init__(self):
        self.handles = []

    def start(self, spec, on_tick, on_complete):
        handle = ManualHandle(spec, on_tick, on_complete)
        self.handles.append(handle)
        return handle

    @property
    def latest(self) -> ManualHandle:
        return self.handles[-1]


class ImmediateDriver(AnimationDriver):
    """在 start() 内同步跑完动画（模拟零时长动画）"""

    def __init__(self):
        self.specs = []

    def start(self, spec, on_tick, on_complete):
        self.specs.append(spec)
        handle = DriverHandle(spec, on_tick, on_complete)
        on_tick(spec.start if spec.reverse else spec.end)
        handle._emit_complete()
        return handle


@pytest.fixture
def settings():
    return SplashSettings(palette=PALETTE)


@pytest.fixture
def context(settings):
    ctx = SplashContext.from_settings(settings)
    ctx.geometry = ViewGeometry.from_size(1000, 2000)
    return ctx


@pytest.fixture
def driver():
    return ManualDriver()


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def immediate_driver():
    return ImmediateDriver()
