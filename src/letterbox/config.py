import os

# 扫描目录时接受的扩展名（小写比较）
SUPPORTED_EXTENSIONS = {'.jpg', '.jpeg'}

# JPEG 输出质量（固定）
JPEG_QUALITY = 90

DEFAULT_OUTPUT_DIR = "processed"
DEFAULT_ASPECT = "16:9"

# Background fills, RGBA
BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def default_concurrency() -> int:
    """Number of parallel conversions when --concurrency is not given."""
    return os.cpu_count() or 1
