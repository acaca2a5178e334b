"""
启动页异常定义

提供分层的异常体系，区分配置错误和状态机使用错误。

异常层次：
- SplashError (基类)
  - ConfigurationError (配置错误，构造时即失败)
    - EmptyPaletteError - 小球颜色数组为空
    - InvalidColorError - 颜色值无法解析
  - SplashStateError (状态机使用错误)

用法示例：
    from splash_reveal.utils.exceptions import EmptyPaletteError, SplashError

    try:
        view = SplashView(settings=settings)
    except EmptyPaletteError:
        logger.error("启动页未配置任何小球颜色")
    except SplashError as e:
        logger.error(f"启动页初始化失败: {e.message}")
"""


class SplashError(Exception):
    """启动页错误基类

    Attributes:
        message: 错误消息
        original_error: 原始异常（如果有）
    """

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self):
        return self.message


# ==================== 配置错误 ====================

class ConfigurationError(SplashError):
    """配置错误基类

    配置错误是致命的，在构造阶段直接抛出，不做恢复。
    """
    pass


class EmptyPaletteError(ConfigurationError):
    """小球颜色数组为空

    颜色数量决定小球之间的角度间隔（2π/N），为空时无法布局。
    """

    def __init__(self, message: str = "小球颜色数组不能为空"):
        super().__init__(message)


class InvalidColorError(ConfigurationError):
    """颜色值无法解析"""

    def __init__(self, value, original_error: Exception = None):
        super().__init__(f"无效的颜色值: {value!r}", original_error)
        self.value = value


# ==================== 状态机错误 ====================

class SplashStateError(SplashError):
    """状态机使用错误

    例如重复调用 start()。动画序列只能启动一次，结束后不可重置。
    """
    pass
