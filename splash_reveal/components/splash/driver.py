"""
动画驱动器

把"起始值、结束值、时长、插值器、循环次数、是否反向播放"
转换为一串按时间递增的中间值，并在结束时通知一次。

状态机只依赖 AnimationDriver 接口，测试时可以用手动驱动器
喂入模拟的帧值，而不依赖真实的时钟。
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from PyQt6.QtCore import QAbstractAnimation, QEasingCurve, QObject, QVariantAnimation

logger = logging.getLogger(__name__)

TickCallback = Callable[[float], None]
CompleteCallback = Callable[[], None]


class EasingKind(Enum):
    """插值器类型"""
    LINEAR = "linear"
    # 回弹插值：t -= 1; t * t * ((s + 1) * t + s) + 1
    OVERSHOOT = "overshoot"


@dataclass(frozen=True)
class Easing:
    """插值器

    Attributes:
        kind: 插值器类型
        overshoot: 回弹张力（仅 OVERSHOOT 使用）
    """
    kind: EasingKind = EasingKind.LINEAR
    overshoot: float = 0.0

    @classmethod
    def linear(cls) -> "Easing":
        return cls(EasingKind.LINEAR)

    @classmethod
    def overshoot_with(cls, tension: float) -> "Easing":
        return cls(EasingKind.OVERSHOOT, tension)

    def value_at(self, progress: float) -> float:
        """计算插值后的进度（与 to_qt_easing 的曲线一致）"""
        if self.kind == EasingKind.OVERSHOOT:
            t = progress - 1.0
            s = self.overshoot
            return t * t * ((s + 1) * t + s) + 1.0
        return progress


@dataclass(frozen=True)
class DriverSpec:
    """一次动画的参数

    Attributes:
        start: 名义起始值
        end: 名义结束值
        duration_ms: 单次播放时长（毫秒）
        easing: 插值器
        loops: 总播放次数（1 表示不重复）
        reverse: 是否反向播放（从 end 播放到 start）
    """
    start: float
    end: float
    duration_ms: int
    easing: Easing = field(default_factory=Easing.linear)
    loops: int = 1
    reverse: bool = False


class DriverHandle:
    """已启动动画的句柄

    保证完成回调对每个句柄只触发一次。
    """

    def __init__(self, spec: DriverSpec, on_tick: TickCallback, on_complete: CompleteCallback):
        self.spec = spec
        self._on_tick = on_tick
        self._on_complete = on_complete
        self.completed = False

    @property
    def is_running(self) -> bool:
        return not self.completed

    def _emit_tick(self, value: float):
        self._on_tick(float(value))

    def _emit_complete(self):
        if self.completed:
            return
        self.completed = True
        self._on_complete()


class AnimationDriver(ABC):
    """动画驱动器接口"""

    @abstractmethod
    def start(self, spec: DriverSpec, on_tick: TickCallback,
              on_complete: CompleteCallback) -> DriverHandle:
        """启动一次动画

        回调在启动时绑定，确保启动时同步发出的第一帧不会丢失。

        Args:
            spec: 动画参数
            on_tick: 每帧回调，参数为当前值
            on_complete: 完成回调，所有帧之后触发且只触发一次

        Returns:
            DriverHandle: 动画句柄
        """
        raise NotImplementedError


def to_qt_easing(easing: Easing) -> QEasingCurve:
    """转换为Qt插值曲线

    Qt 的 OutBack 与回弹插值公式一致，overshoot 即张力。
    """
    if easing.kind == EasingKind.OVERSHOOT:
        curve = QEasingCurve(QEasingCurve.Type.OutBack)
        curve.setOvershoot(easing.overshoot)
        return curve
    return QEasingCurve(QEasingCurve.Type.Linear)


class QtDriverHandle(DriverHandle):
    """基于 QVariantAnimation 的动画句柄"""

    def __init__(self, spec: DriverSpec, animation: QVariantAnimation,
                 on_tick: TickCallback, on_complete: CompleteCallback):
        super().__init__(spec, on_tick, on_complete)
        self.animation = animation

    @property
    def is_running(self) -> bool:
        return self.animation.state() == QAbstractAnimation.State.Running


class QtAnimationDriver(AnimationDriver):
    """使用 QVariantAnimation 驱动动画

    帧回调和完成回调都在GUI线程上同步触发。
    """

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent

    def start(self, spec: DriverSpec, on_tick: TickCallback,
              on_complete: CompleteCallback) -> QtDriverHandle:
        animation = QVariantAnimation(self._parent)
        animation.setStartValue(float(spec.start))
        animation.setEndValue(float(spec.end))
        animation.setDuration(spec.duration_ms)
        animation.setLoopCount(spec.loops)
        animation.setEasingCurve(to_qt_easing(spec.easing))
        if spec.reverse:
            animation.setDirection(QAbstractAnimation.Direction.Backward)

        handle = QtDriverHandle(spec, animation, on_tick, on_complete)
        animation.valueChanged.connect(handle._emit_tick)
        animation.finished.connect(handle._emit_complete)

        logger.debug(
            f"启动动画: {spec.start} -> {spec.end}, {spec.duration_ms}ms x{spec.loops}, "
            f"easing={spec.easing.kind.value}, reverse={spec.reverse}"
        )
        animation.start()
        return handle
