"""
启动页动画状态机

三个阶段依次执行，只能前进不能后退：

    ROTATE（小球旋转） -> MERGE（小球聚合） -> EXPAND（扩散显示内容）

每个阶段拥有一个动画驱动器：
- 进入阶段时启动驱动器
- 每帧回调写入该阶段负责的共享数值，并请求重绘
- 完成回调切换到下一阶段（EXPAND 为终态）
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from splash_reveal.utils.config_manager import SplashSettings
from splash_reveal.utils.exceptions import SplashStateError
from .driver import AnimationDriver, DriverHandle, DriverSpec, Easing
from .geometry import ViewGeometry

logger = logging.getLogger(__name__)


class SplashPhase(Enum):
    """动画阶段"""
    ROTATE = "rotate"
    MERGE = "merge"
    EXPAND = "expand"


# 阶段顺序，None 表示终态
NEXT_PHASE: Dict[SplashPhase, Optional[SplashPhase]] = {
    SplashPhase.ROTATE: SplashPhase.MERGE,
    SplashPhase.MERGE: SplashPhase.EXPAND,
    SplashPhase.EXPAND: None,
}


@dataclass
class SplashContext:
    """绘制读取、动画写入的共享数值

    同一时刻每个数值只由当前阶段写入。

    Attributes:
        rotate_angle: 当前旋转角度（弧度），由 ROTATE 写入
        rotate_radius: 当前旋转大圆半径，由 MERGE 写入
        hole_radius: 扩散圆空心部分半径，由 EXPAND 写入
        geometry: 绘制区域几何信息，由宿主在尺寸变化时更新
    """
    rotate_angle: float = 0.0
    rotate_radius: float = 0.0
    hole_radius: float = 0.0
    geometry: ViewGeometry = field(default_factory=ViewGeometry)

    @classmethod
    def from_settings(cls, settings: SplashSettings) -> "SplashContext":
        return cls(rotate_radius=settings.orbit_radius)


@dataclass
class ActiveState:
    """当前阶段及其驱动器句柄"""
    phase: SplashPhase
    handle: Optional[DriverHandle] = None


class SplashStateMachine:
    """启动页动画状态机

    使用方式：
        machine = SplashStateMachine(driver, settings, context, request_redraw=view.update)
        machine.start()
    """

    def __init__(self, driver: AnimationDriver, settings: SplashSettings,
                 context: SplashContext, request_redraw: Callable[[], None],
                 on_phase_changed: Optional[Callable[[SplashPhase], None]] = None,
                 on_finished: Optional[Callable[[], None]] = None):
        """初始化状态机

        Args:
            driver: 动画驱动器
            settings: 动画参数
            context: 共享数值
            request_redraw: 请求宿主重绘
            on_phase_changed: 进入新阶段时的回调（可选）
            on_finished: 最后一个阶段完成时的回调（可选）
        """
        self._driver = driver
        self._settings = settings
        self.context = context
        self._request_redraw = request_redraw
        self._on_phase_changed = on_phase_changed
        self._on_finished = on_finished
        self._state: Optional[ActiveState] = None
        self.finished = False

        self._tick_handlers: Dict[SplashPhase, Callable[[float], None]] = {
            SplashPhase.ROTATE: self._on_rotate_tick,
            SplashPhase.MERGE: self._on_merge_tick,
            SplashPhase.EXPAND: self._on_expand_tick,
        }

    @property
    def phase(self) -> Optional[SplashPhase]:
        """当前阶段，start() 之前为 None"""
        return self._state.phase if self._state else None

    @property
    def active_handle(self) -> Optional[DriverHandle]:
        return self._state.handle if self._state else None

    @property
    def started(self) -> bool:
        return self._state is not None

    def start(self):
        """启动动画序列（进入旋转阶段）

        Raises:
            SplashStateError: 重复启动
        """
        if self._state is not None:
            raise SplashStateError("启动页动画已经启动，不能重复启动")
        logger.info("启动页动画开始")
        self._enter(SplashPhase.ROTATE)

    def driver_spec(self, phase: SplashPhase) -> DriverSpec:
        """构造指定阶段的动画参数"""
        settings = self._settings
        if phase == SplashPhase.ROTATE:
            # 旋转一周360度
            return DriverSpec(
                start=0.0,
                end=math.pi * 2,
                duration_ms=settings.duration_ms,
                easing=Easing.linear(),
                loops=settings.rotate_sweeps,
            )
        if phase == SplashPhase.MERGE:
            # 名义区间为 小球半径 -> 大圆半径，反向播放，
            # 使回弹出现在半径收缩的开始阶段
            return DriverSpec(
                start=settings.dot_radius,
                end=settings.orbit_radius,
                duration_ms=settings.duration_ms,
                easing=Easing.overshoot_with(settings.merge_overshoot),
                reverse=True,
            )
        if phase == SplashPhase.EXPAND:
            return DriverSpec(
                start=settings.dot_radius,
                end=self.context.geometry.max_radius,
                duration_ms=settings.duration_ms,
                easing=Easing.linear(),
            )
        raise ValueError(f"未知的动画阶段: {phase}")

    def _enter(self, phase: SplashPhase):
        """进入阶段并启动其驱动器"""
        state = ActiveState(phase)
        self._state = state
        logger.info(f"启动页进入阶段: {phase.value}")
        if self._on_phase_changed:
            self._on_phase_changed(phase)

        handle = self._driver.start(
            self.driver_spec(phase),
            self._tick_handlers[phase],
            lambda: self._on_phase_complete(phase),
        )
        # 零时长动画可能在 start() 内同步完成并已切换阶段
        state.handle = handle

    def _on_rotate_tick(self, value: float):
        self.context.rotate_angle = value
        self._request_redraw()

    def _on_merge_tick(self, value: float):
        self.context.rotate_radius = value
        self._request_redraw()

    def _on_expand_tick(self, value: float):
        self.context.hole_radius = value
        self._request_redraw()

    def _on_phase_complete(self, phase: SplashPhase):
        """阶段动画完成，切换到下一阶段"""
        next_phase = NEXT_PHASE[phase]
        if next_phase is not None:
            self._enter(next_phase)
            return

        self.finished = True
        logger.info("启动页动画结束")
        if self._on_finished:
            self._on_finished()
