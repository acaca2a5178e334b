"""
启动页渲染

按当前阶段分派绘制：
- ROTATE: 纯色背景 + 旋转的小球
- MERGE:  纯色背景 + 收缩的小球（角度停留在旋转结束时）
- EXPAND: 空心圆环背景（小球已聚合，不再绘制）
"""

from typing import Any, Optional, Protocol, Sequence

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QPainter, QPen

from splash_reveal.utils.config_manager import SplashSettings
from splash_reveal.utils.exceptions import EmptyPaletteError
from .geometry import dot_positions, ring_stroke_params
from .state_machine import SplashContext, SplashPhase


class SplashSurface(Protocol):
    """绘制目标

    颜色对渲染器是不透明的值，由具体的绘制目标解释。
    """

    def fill(self, color: Any) -> None:
        ...

    def draw_circle(self, x: float, y: float, radius: float, color: Any) -> None:
        ...

    def draw_ring(self, cx: float, cy: float, radius: float, stroke_width: float, color: Any) -> None:
        ...


class QPainterSurface:
    """把绘制指令转换为 QPainter 调用"""

    def __init__(self, painter: QPainter, rect: QRectF, ring_pen: Optional[QPen] = None):
        """
        Args:
            painter: 已开始绘制的 QPainter
            rect: 纯色背景填充的区域
            ring_pen: 扩散圆环画笔，宽度每帧原地修改（可选）
        """
        self.painter = painter
        self.rect = QRectF(rect)
        self.ring_pen = ring_pen if ring_pen is not None else QPen()
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing)

    def fill(self, color):
        self.painter.fillRect(self.rect, QColor(color))

    def draw_circle(self, x, y, radius, color):
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QColor(color))
        self.painter.drawEllipse(QPointF(x, y), radius, radius)

    def draw_ring(self, cx, cy, radius, stroke_width, color):
        # Qt 把宽度0的画笔当作1像素细线，这里直接跳过
        if stroke_width <= 0:
            return
        self.ring_pen.setColor(QColor(color))
        self.ring_pen.setWidthF(stroke_width)
        self.painter.setPen(self.ring_pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawEllipse(QPointF(cx, cy), radius, radius)


class SplashRenderer:
    """启动页渲染器

    只读取 SplashContext，不修改任何状态。
    """

    def __init__(self, palette: Sequence[Any], background_color: Any,
                 settings: SplashSettings, context: SplashContext):
        """
        Args:
            palette: 小球颜色，数量即小球数量
            background_color: 背景色
            settings: 动画参数
            context: 共享数值

        Raises:
            EmptyPaletteError: 颜色数组为空
        """
        if len(palette) < 1:
            raise EmptyPaletteError()
        self.palette = list(palette)
        self.background_color = background_color
        self.settings = settings
        self.context = context

        self._draw_routines = {
            None: self._draw_rotate,
            SplashPhase.ROTATE: self._draw_rotate,
            SplashPhase.MERGE: self._draw_merge,
            SplashPhase.EXPAND: self._draw_expand,
        }

    def render(self, surface: SplashSurface, phase: Optional[SplashPhase]):
        """绘制一帧

        Args:
            surface: 绘制目标
            phase: 当前阶段，动画启动前为 None
        """
        self._draw_routines[phase](surface)

    def _draw_rotate(self, surface: SplashSurface):
        self.draw_background(surface)
        self.draw_dots(surface, self.context.rotate_angle, self.settings.orbit_radius)

    def _draw_merge(self, surface: SplashSurface):
        self.draw_background(surface)
        self.draw_dots(surface, self.context.rotate_angle, self.context.rotate_radius)

    def _draw_expand(self, surface: SplashSurface):
        self.draw_background(surface)

    def draw_background(self, surface: SplashSurface):
        """绘制背景：扩散开始前为纯色，之后为空心圆环"""
        geometry = self.context.geometry
        ring = ring_stroke_params(self.context.hole_radius, geometry.max_radius)
        if ring is None:
            surface.fill(self.background_color)
            return
        surface.draw_ring(
            geometry.center_x,
            geometry.center_y,
            ring.draw_radius,
            ring.stroke_width,
            self.background_color,
        )

    def draw_dots(self, surface: SplashSurface, angle_offset: float, radius: float):
        """绘制小球"""
        geometry = self.context.geometry
        positions = dot_positions(
            len(self.palette), angle_offset, radius, geometry.center_x, geometry.center_y
        )
        for (cx, cy), color in zip(positions, self.palette):
            surface.draw_circle(cx, cy, self.settings.dot_radius, color)
