"""
ELF文件检测
"""
import logging
from pathlib import Path
from typing import Union

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

logger = logging.getLogger(__name__)

ELF_MAGIC = b"\x7fELF"

def is_elf(path: Union[str, Path]) -> bool:
    """
    判断文件是否为ELF文件

    只做最小的文件头解析，不校验完整结构。

    Args:
        path: 文件路径

    Returns:
        bool: 文件头能否解析为ELF

    Raises:
        OSError: 文件无法读取时抛出
    """
    with open(path, "rb") as f:
        if f.read(4) != ELF_MAGIC:
            return False
        f.seek(0)
        try:
            ELFFile(f)
        except ELFError as e:
            logger.debug("%s: invalid ELF header: %s", path, e)
            return False
    return True
