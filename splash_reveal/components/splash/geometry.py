"""
启动页几何计算

根据动画进度计算小球位置和扩散圆环参数，纯函数，无状态。
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from splash_reveal.utils.exceptions import EmptyPaletteError


@dataclass(frozen=True)
class ViewGeometry:
    """绘制区域几何信息

    Attributes:
        center_x: 中心X坐标（宽度的一半）
        center_y: 中心Y坐标（高度的一半）
        max_radius: 斜对角线的一半，即扩散圆的最大半径
    """
    center_x: float = 0.0
    center_y: float = 0.0
    max_radius: float = 0.0

    @classmethod
    def from_size(cls, width: float, height: float) -> "ViewGeometry":
        """根据绘制区域尺寸计算几何信息"""
        return cls(
            center_x=width / 2,
            center_y=height / 2,
            max_radius=math.hypot(width, height) / 2,
        )


@dataclass(frozen=True)
class RingStroke:
    """空心圆环的描边参数

    圆环内边缘在 hole_radius，外边缘固定在 max_radius。
    """
    stroke_width: float
    draw_radius: float


def angle_step(count: int) -> float:
    """相邻小球之间的角度间隔

    Raises:
        EmptyPaletteError: 小球数量小于1
    """
    if count < 1:
        raise EmptyPaletteError()
    return math.pi * 2 / count


def dot_position(index: int, count: int, angle_offset: float, radius: float,
                 center_x: float, center_y: float) -> Tuple[float, float]:
    """计算第 index 个小球的圆心坐标

    x = r * cos(α) + centerX
    y = r * sin(α) + centerY
    """
    angle = index * angle_step(count) + angle_offset
    return (
        math.cos(angle) * radius + center_x,
        math.sin(angle) * radius + center_y,
    )


def dot_positions(count: int, angle_offset: float, radius: float,
                  center_x: float, center_y: float) -> List[Tuple[float, float]]:
    """按颜色顺序计算所有小球的圆心坐标"""
    return [
        dot_position(i, count, angle_offset, radius, center_x, center_y)
        for i in range(count)
    ]


def ring_stroke_params(hole_radius: float, max_radius: float) -> Optional[RingStroke]:
    """计算扩散圆环的描边参数

    Args:
        hole_radius: 空心部分的半径
        max_radius: 圆环外边缘半径

    Returns:
        RingStroke | None: hole_radius <= 0 时返回None，表示绘制纯色背景
    """
    if hole_radius <= 0:
        return None
    stroke_width = max_radius - hole_radius
    return RingStroke(
        stroke_width=stroke_width,
        draw_radius=stroke_width / 2 + hole_radius,
    )
