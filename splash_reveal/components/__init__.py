"""
可复用UI组件模块
"""

from .splash import SplashView

__all__ = [
    'SplashView',
]
