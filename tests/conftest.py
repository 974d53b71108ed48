import os

import numpy as np
import pytest
from loguru import logger
from PIL import Image


def create_test_image(size=(64, 36), color=(255, 0, 0)):
    """Create a test PIL Image."""
    return Image.new('RGB', size, color)


def write_jpeg(path, size=(64, 36), color=(255, 0, 0)):
    create_test_image(size, color).save(path, format='JPEG', quality=95)
    return str(path)


def gradient_image(width, height):
    """RGB image whose red channel is the row index, green the column index."""
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :, 0] = (np.arange(height) % 256)[:, None]
    arr[:, :, 1] = (np.arange(width) % 256)[None, :]
    return Image.fromarray(arr)


def set_mtime(path, mtime):
    os.utime(path, (mtime, mtime))


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
