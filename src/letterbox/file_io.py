"""
文件输入输出模块
将处理后的图像写入 JPEG
"""
from typing import Optional

from PIL import Image

from letterbox.config import JPEG_QUALITY
from letterbox.errors import EncodeError, LetterboxIOError
from letterbox.logger import Logger


def save_jpeg(img: Image.Image, output_path: str, quality: int = JPEG_QUALITY, logger: Optional[Logger] = None):
    """
    保存为 8-bit JPEG

    Args:
        img: PIL 图像（RGBA 会被转换为 RGB，JPEG 不支持透明通道）
        output_path: 输出路径，父目录必须已存在
        quality: JPEG 质量
        logger: 日志处理器

    Raises:
        LetterboxIOError: 无法创建输出文件
        EncodeError: 编码失败（可能留下不完整的文件）
    """
    try:
        f = open(output_path, "wb")
    except OSError as e:
        raise LetterboxIOError(e, "creating") from e

    with f:
        try:
            if img.mode != "RGB":
                img = img.convert("RGB")
            img.save(f, format="JPEG", quality=quality)
        except (OSError, ValueError) as e:
            raise EncodeError(e) from e

    if logger is not None:
        logger.info(f"✅ Saved: {output_path}")
