"""
Skip detection based on modification times.

An output is considered up to date when it exists and the source was last
modified strictly before it.
"""
import os

from letterbox.errors import AmbiguousStatError


def destination_path(output_dir: str, path: str) -> str:
    """Output location for ``path``; directory components are kept as-is."""
    return os.path.join(output_dir, path)


def should_skip(path: str, output_dir: str) -> bool:
    dest = destination_path(output_dir, path)

    try:
        dest_stat = os.stat(dest)
    except FileNotFoundError:
        return False
    except OSError as e:
        # 文件可能存在也可能不存在：权限、磁盘错误...
        raise AmbiguousStatError(dest, e) from e

    try:
        src_stat = os.stat(path)
    except OSError as e:
        raise AmbiguousStatError(path, e) from e

    return src_stat.st_mtime_ns < dest_stat.st_mtime_ns
