"""
splash-reveal - 启动页动画

小球旋转、聚合后以扩散圆环的方式显示下方内容。
"""

__version__ = "1.0.0"
