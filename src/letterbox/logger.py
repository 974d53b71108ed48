"""
统一的日志处理模块
使用 loguru 提供一致的日志接口，支持日志文件输出
"""
from typing import Optional
from loguru import logger
import sys


CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {thread.name} | {message}"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """
    配置全局 loguru logger

    Args:
        verbose: 控制台是否输出 DEBUG 级别日志
        log_file: 可选的日志文件路径（自动轮转，保留最近7天）
    """
    logger.remove()  # 移除默认处理器

    if sys.stderr is not None:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level="DEBUG" if verbose else "INFO",
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="1 day",      # 每天轮转
            retention="7 days",    # 保留7天
            compression="zip",     # 压缩旧日志
            encoding="utf-8",
            enqueue=True,          # 多线程写入
        )


class LoguruHandler:
    """
    Loguru 日志处理器包装类
    为每个图像任务的日志添加文件前缀
    """

    def __init__(self, file_id: Optional[str] = None):
        self.file_id = file_id

    def _format_message(self, message: str) -> str:
        if self.file_id:
            return f"[{self.file_id}] {message}"
        return message

    def _output(self, message: str, level: str = "INFO"):
        # depth=2 so records point at the caller, not this wrapper
        logger.opt(depth=2).log(level, self._format_message(message))

    def info(self, message: str):
        self._output(message, "INFO")

    def error(self, message: str):
        self._output(message, "ERROR")

    def success(self, message: str):
        self._output(message, "SUCCESS")

    def warning(self, message: str):
        self._output(message, "WARNING")

    def debug(self, message: str):
        self._output(message, "DEBUG")


def create_logger(file_id: Optional[str] = None) -> LoguruHandler:
    """
    工厂函数：创建日志处理器实例

    Args:
        file_id: 文件标识符，用于并发处理时区分日志来源
    """
    return LoguruHandler(file_id)


Logger = LoguruHandler
