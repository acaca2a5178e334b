"""
配置管理工具

用于加载启动页动画参数（时长、尺寸、颜色等），
未配置的项使用 SplashConstants 中的默认值。
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from PyQt6.QtCore import QSettings

from .constants import SettingsKeys, SplashConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplashSettings:
    """启动页动画参数

    Attributes:
        duration_ms: 每个阶段的动画时长（毫秒）
        dot_radius: 小球半径，也是聚合的终点和扩散的起点
        orbit_radius: 旋转大圆半径
        rotate_sweeps: 旋转阶段总圈数
        merge_overshoot: 聚合阶段回弹张力
        background_color: 背景色
        palette: 小球颜色，数量即小球数量
        hide_on_finish: 动画结束后是否隐藏遮罩
    """
    duration_ms: int = SplashConstants.ANIMATION_DURATION_MS
    dot_radius: float = SplashConstants.DOT_RADIUS
    orbit_radius: float = SplashConstants.ORBIT_RADIUS
    rotate_sweeps: int = SplashConstants.ROTATE_SWEEPS
    merge_overshoot: float = SplashConstants.MERGE_OVERSHOOT_TENSION
    background_color: str = SplashConstants.BACKGROUND_COLOR
    palette: Tuple[str, ...] = SplashConstants.PALETTE
    hide_on_finish: bool = SplashConstants.HIDE_ON_FINISH


class ConfigManager:
    """启动页配置管理器

    使用QSettings保存配置到本地INI文件
    """

    def __init__(self, organization="SplashReveal", application="SplashReveal",
                 settings: Optional[QSettings] = None):
        """初始化配置管理器

        Args:
            organization: 组织名称
            application: 应用名称
            settings: 已创建的QSettings（可选，测试时传入INI文件）
        """
        self.settings = settings if settings is not None else QSettings(organization, application)

    def _read(self, key: str, default, value_type):
        """读取单个配置项，值无法转换时回退到默认值"""
        try:
            value = self.settings.value(key, default, type=value_type)
        except (TypeError, ValueError) as e:
            logger.warning(f"配置项 {key} 无效，使用默认值 {default!r}: {e}")
            return default
        if value is None:
            return default
        return value

    def get_duration_ms(self) -> int:
        """获取每个阶段的动画时长（毫秒）"""
        duration = self._read(SettingsKeys.DURATION_MS, SplashConstants.ANIMATION_DURATION_MS, int)
        if duration <= 0:
            logger.warning(f"动画时长必须为正数，收到 {duration}，使用默认值")
            return SplashConstants.ANIMATION_DURATION_MS
        return duration

    def set_duration_ms(self, duration_ms: int):
        """保存动画时长

        Args:
            duration_ms: 每个阶段的动画时长（毫秒）
        """
        self.settings.setValue(SettingsKeys.DURATION_MS, int(duration_ms))

    def get_dot_radius(self) -> float:
        """获取小球半径"""
        return self._read(SettingsKeys.DOT_RADIUS, SplashConstants.DOT_RADIUS, float)

    def get_orbit_radius(self) -> float:
        """获取旋转大圆半径"""
        return self._read(SettingsKeys.ORBIT_RADIUS, SplashConstants.ORBIT_RADIUS, float)

    def get_rotate_sweeps(self) -> int:
        """获取旋转阶段总圈数（至少1圈）"""
        sweeps = self._read(SettingsKeys.ROTATE_SWEEPS, SplashConstants.ROTATE_SWEEPS, int)
        return max(1, sweeps)

    def get_merge_overshoot(self) -> float:
        """获取聚合阶段回弹张力"""
        return self._read(SettingsKeys.MERGE_OVERSHOOT, SplashConstants.MERGE_OVERSHOOT_TENSION, float)

    def get_background_color(self) -> str:
        """获取背景色，默认为白色"""
        return self._read(SettingsKeys.BACKGROUND_COLOR, SplashConstants.BACKGROUND_COLOR, str)

    def get_palette(self) -> Tuple[str, ...]:
        """获取小球颜色数组

        未配置时返回默认的6色数组。显式配置为空时返回空元组，
        由渲染器在构造时报错。

        Returns:
            tuple[str, ...]: 颜色字符串
        """
        if not self.settings.contains(SettingsKeys.PALETTE):
            return SplashConstants.PALETTE

        raw = self.settings.value(SettingsKeys.PALETTE)
        # INI格式中未加引号的逗号分隔值会被读成列表
        if isinstance(raw, str):
            entries = raw.split(",")
        elif isinstance(raw, (list, tuple)):
            entries = [str(item) for item in raw]
        else:
            entries = []
        return tuple(entry.strip() for entry in entries if entry and entry.strip())

    def set_palette(self, colors: Sequence[str]):
        """保存小球颜色数组

        Args:
            colors: 颜色字符串序列（如 "#FF3892"）
        """
        self.settings.setValue(SettingsKeys.PALETTE, ",".join(colors))

    def get_hide_on_finish(self) -> bool:
        """获取动画结束后是否隐藏遮罩"""
        return self._read(SettingsKeys.HIDE_ON_FINISH, SplashConstants.HIDE_ON_FINISH, bool)

    def get_splash_settings(self) -> SplashSettings:
        """组装完整的启动页参数

        Returns:
            SplashSettings: 启动页动画参数
        """
        settings = SplashSettings(
            duration_ms=self.get_duration_ms(),
            dot_radius=self.get_dot_radius(),
            orbit_radius=self.get_orbit_radius(),
            rotate_sweeps=self.get_rotate_sweeps(),
            merge_overshoot=self.get_merge_overshoot(),
            background_color=self.get_background_color(),
            palette=self.get_palette(),
            hide_on_finish=self.get_hide_on_finish(),
        )
        logger.debug(f"[ConfigManager] 启动页参数: {settings}")
        return settings

    def reset_splash_config(self):
        """清除所有启动页配置，恢复默认值"""
        self.settings.remove("splash")
        self.settings.sync()
