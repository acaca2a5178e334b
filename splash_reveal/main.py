"""
主程序入口

启动一个演示窗口：内容区域上方覆盖启动页动画，
动画结束后露出下方内容。
"""

import sys
import logging
import traceback
import faulthandler
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow, QStyleFactory
from PyQt6.QtCore import Qt

from splash_reveal.components.splash import SplashView
from splash_reveal.utils.config_manager import ConfigManager
from splash_reveal.utils.exceptions import SplashError

# 启用faulthandler来捕获段错误（C层面的崩溃）
faulthandler.enable(file=sys.stderr, all_threads=True)


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """全局异常处理器 - 捕获未处理的异常并记录"""
    logger = logging.getLogger(__name__)

    # 忽略KeyboardInterrupt
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    error_msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logger.critical(f"未捕获的异常导致程序崩溃:\n{error_msg}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


class MainWindow(QMainWindow):
    """演示窗口：内容 + 启动页覆盖层"""

    def __init__(self, config_manager: ConfigManager):
        super().__init__()
        self.setWindowTitle("Splash Reveal")
        self.resize(540, 960)

        content = QLabel("欢迎")
        content.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content.setStyleSheet("font-size: 32px; color: #333333; background-color: #F5F0E6;")
        self.setCentralWidget(content)

        self.splash = SplashView(parent=content, settings=config_manager.get_splash_settings())
        self.splash.phase_changed.connect(
            lambda phase: logging.getLogger(__name__).debug("阶段切换: %s", phase)
        )
        self.splash.finished.connect(self._on_splash_finished)

    def _on_splash_finished(self):
        logging.getLogger(__name__).info("启动页动画结束，显示内容")


def main():
    """主函数"""
    # 配置日志系统 - 同时输出到控制台和文件
    log_file = Path.cwd() / "splash_debug.log"
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding='utf-8', mode='a')
        ]
    )
    logger = logging.getLogger(__name__)

    # 安装全局异常处理器
    sys.excepthook = global_exception_handler

    logger.info("=" * 80)
    logger.info("Splash Reveal 启动")
    logger.info("Python版本: %s", sys.version)
    logger.info("日志文件: %s", log_file)
    logger.info("=" * 80)

    app = QApplication(sys.argv)
    app.setApplicationName("SplashReveal")
    app.setOrganizationName("SplashReveal")
    app.setStyle(QStyleFactory.create('Fusion'))

    config_manager = ConfigManager()

    try:
        window = MainWindow(config_manager)
    except SplashError as e:
        logger.critical(f"启动页配置错误: {e.message}")
        sys.exit(1)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
