"""
启动页动画组件

小球旋转 -> 聚合 -> 扩散显示下方内容。

使用方式：
    # 作为父组件的覆盖层
    self.splash = SplashView(parent=self)
    self.splash.finished.connect(self._on_splash_finished)
    self.splash.show()  # 首次显示时自动启动动画
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import QEvent, QObject, QRectF, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from splash_reveal.utils.config_manager import ConfigManager, SplashSettings
from splash_reveal.utils.exceptions import InvalidColorError
from .driver import AnimationDriver, QtAnimationDriver
from .geometry import ViewGeometry
from .renderer import QPainterSurface, SplashRenderer
from .state_machine import SplashContext, SplashPhase, SplashStateMachine

logger = logging.getLogger(__name__)


def to_qcolor(value) -> QColor:
    """把配置中的颜色值转换为 QColor

    Raises:
        InvalidColorError: 颜色无法解析
    """
    color = QColor(value)
    if not color.isValid():
        raise InvalidColorError(value)
    return color


class SplashView(QWidget):
    """启动页动画覆盖层

    没有绘制的区域保持透明，扩散圆环的空心部分会露出父组件的内容。
    """

    # 进入新阶段信号（参数为阶段名）
    phase_changed = pyqtSignal(str)
    # 动画结束信号
    finished = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None,
                 settings: Optional[SplashSettings] = None,
                 driver: Optional[AnimationDriver] = None):
        """初始化启动页

        Args:
            parent: 父组件（覆盖层会跟随父组件大小）
            settings: 动画参数，默认从 ConfigManager 读取
            driver: 动画驱动器，默认使用 QtAnimationDriver

        Raises:
            EmptyPaletteError: 颜色数组为空
            InvalidColorError: 颜色无法解析
        """
        super().__init__(parent)
        self.settings = settings if settings is not None else ConfigManager().get_splash_settings()

        # 颜色只在构造时加载一次
        palette: List[QColor] = [to_qcolor(value) for value in self.settings.palette]
        self._background_color = to_qcolor(self.settings.background_color)

        # 扩散圆环画笔，宽度每帧修改
        self._ring_pen = QPen(self._background_color)

        self.context = SplashContext.from_settings(self.settings)
        self.renderer = SplashRenderer(palette, self._background_color, self.settings, self.context)
        self.machine = SplashStateMachine(
            driver if driver is not None else QtAnimationDriver(self),
            self.settings,
            self.context,
            request_redraw=self.update,
            on_phase_changed=self._on_phase_changed,
            on_finished=self._on_finished,
        )

        if parent is not None:
            parent.installEventFilter(self)
            self.setGeometry(parent.rect())

    @property
    def phase(self) -> Optional[SplashPhase]:
        return self.machine.phase

    @property
    def geometry_info(self) -> ViewGeometry:
        return self.context.geometry

    def start(self):
        """启动动画序列"""
        self.machine.start()

    def on_area_established(self, width: int, height: int):
        """绘制区域尺寸确定，重新计算中心和扩散圆最大半径

        扩散阶段开始后尺寸再变化时，扩散终点不会重新计算。
        """
        self.context.geometry = ViewGeometry.from_size(width, height)
        logger.debug(f"启动页尺寸: {width}x{height}, 几何信息: {self.context.geometry}")

    def resizeEvent(self, event):
        """尺寸改变时重新计算几何信息"""
        super().resizeEvent(event)
        size = event.size()
        self.on_area_established(size.width(), size.height())

    def showEvent(self, event):
        """首次显示时启动动画"""
        super().showEvent(event)
        if self.parent() is not None:
            self.setGeometry(self.parent().rect())
            self.raise_()
        if not self.machine.started:
            self.start()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """父组件大小改变时调整自身大小"""
        if watched is self.parent() and event.type() == QEvent.Type.Resize:
            self.setGeometry(watched.rect())
        return super().eventFilter(watched, event)

    def paintEvent(self, event):
        """绘制当前阶段"""
        painter = QPainter(self)
        try:
            surface = QPainterSurface(painter, QRectF(self.rect()), self._ring_pen)
            self.renderer.render(surface, self.machine.phase)
        finally:
            painter.end()

    def _on_phase_changed(self, phase: SplashPhase):
        self.phase_changed.emit(phase.value)

    def _on_finished(self):
        self.finished.emit()
        if self.settings.hide_on_finish:
            self.hide()
