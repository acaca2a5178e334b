"""
启动页动画组件模块
"""

from .driver import AnimationDriver, DriverHandle, DriverSpec, Easing, EasingKind, QtAnimationDriver
from .geometry import RingStroke, ViewGeometry, angle_step, dot_position, dot_positions, ring_stroke_params
from .renderer import QPainterSurface, SplashRenderer
from .splash_view import SplashView
from .state_machine import SplashContext, SplashPhase, SplashStateMachine

__all__ = [
    # 视图
    'SplashView',
    # 状态机
    'SplashContext',
    'SplashPhase',
    'SplashStateMachine',
    # 渲染
    'QPainterSurface',
    'SplashRenderer',
    # 动画驱动
    'AnimationDriver',
    'DriverHandle',
    'DriverSpec',
    'Easing',
    'EasingKind',
    'QtAnimationDriver',
    # 几何计算
    'RingStroke',
    'ViewGeometry',
    'angle_step',
    'dot_position',
    'dot_positions',
    'ring_stroke_params',
]
