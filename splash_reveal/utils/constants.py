"""
常量定义模块

集中管理启动页动画使用的常量，避免魔术数字散落在代码各处。

模块包含：
- SplashConstants: 启动页动画的默认参数
- SettingsKeys: QSettings 中使用的配置键
"""


class SplashConstants:
    """启动页动画默认参数

    时长单位为毫秒，长度单位为逻辑像素。
    """
    # ==================== 动画 ====================
    # 每个阶段的动画时长
    ANIMATION_DURATION_MS = 1200

    # 旋转阶段总共转几圈（首次 + 2 次重复）
    ROTATE_SWEEPS = 3

    # 聚合阶段回弹插值器的张力
    MERGE_OVERSHOOT_TENSION = 10.0

    # ==================== 尺寸 ====================
    # 小球半径
    DOT_RADIUS = 18.0

    # 旋转大圆半径
    ORBIT_RADIUS = 90.0

    # ==================== 颜色 ====================
    # 背景色（扩散圆的颜色）
    BACKGROUND_COLOR = "#FFFFFF"

    # 小球颜色（顺序即绘制顺序）
    PALETTE = (
        "#FF9600",
        "#02D1AC",
        "#FFD200",
        "#00C6FF",
        "#00E099",
        "#FF3892",
    )

    # 动画结束后是否自动隐藏遮罩
    HIDE_ON_FINISH = True


class SettingsKeys:
    """QSettings 配置键"""
    DURATION_MS = "splash/duration_ms"
    DOT_RADIUS = "splash/dot_radius"
    ORBIT_RADIUS = "splash/orbit_radius"
    ROTATE_SWEEPS = "splash/rotate_sweeps"
    MERGE_OVERSHOOT = "splash/merge_overshoot"
    BACKGROUND_COLOR = "splash/background_color"
    PALETTE = "splash/palette"
    HIDE_ON_FINISH = "splash/hide_on_finish"
