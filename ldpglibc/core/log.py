"""
日志配置
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "ldpglibc"

console = Console(stderr=True)

def configure_logging(debug: bool = False) -> logging.Logger:
    """
    初始化插件日志，启动时调用一次

    Args:
        debug: 是否输出调试日志

    Returns:
        logging.Logger: 插件根日志器
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # 只挂载一次handler
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
