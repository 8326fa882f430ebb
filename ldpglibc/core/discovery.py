"""
AppDir文件发现
"""
import fnmatch
import glob
import logging
import os
from pathlib import Path
from typing import List, Optional, Set, Union

from .errors import ConfigError

logger = logging.getLogger(__name__)

def _check_pattern(pattern: str):
    """模式必须是AppDir内的相对路径"""
    if not pattern or os.path.isabs(pattern):
        raise ConfigError(f"Search pattern must be a relative path: {pattern!r}")
    if ".." in Path(pattern).parts:
        raise ConfigError(f"Search pattern must not leave the AppDir: {pattern!r}")

def _hidden_matches(full_pattern: str) -> List[str]:
    """
    补充匹配以点开头的文件

    glob的通配符不匹配隐藏文件，这里对最后一级模式单独匹配。
    """
    dirname, basename = os.path.split(full_pattern)
    if basename.startswith(".") or not glob.has_magic(basename):
        return []

    matches = []
    for directory in glob.glob(dirname):
        try:
            names = os.listdir(directory)
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            continue
        for name in names:
            if name.startswith(".") and fnmatch.fnmatchcase(name, basename):
                matches.append(os.path.join(directory, name))
    return matches

def glob_files(appdir: Union[str, Path], pattern: str, seen: Optional[Set[str]] = None) -> List[Path]:
    """
    在AppDir下展开glob模式，只保留普通文件

    符号链接会被解析到目标文件，同一个目标只返回一次；指向AppDir外部的
    链接和无法访问的条目会被忽略。结果按匹配路径排序。

    Args:
        appdir: AppDir根目录
        pattern: 相对于AppDir的glob模式，如 usr/lib/*
        seen: 已处理文件的真实路径集合，跨批次去重时传入

    Returns:
        List[Path]: 匹配到的文件真实路径列表

    Raises:
        ConfigError: 模式不是AppDir内的相对路径时抛出
    """
    _check_pattern(pattern)
    if seen is None:
        seen = set()

    root = os.path.realpath(appdir)
    full_pattern = os.path.join(glob.escape(str(appdir)), pattern)
    logger.debug("Searching %s", full_pattern)

    matches = set(glob.glob(full_pattern))
    matches.update(_hidden_matches(full_pattern))

    files = []
    for match in sorted(matches):
        # isfile跟随符号链接，无法stat的条目返回False
        if not os.path.isfile(match):
            continue

        real = os.path.realpath(match)
        if os.path.commonpath([root, real]) != root:
            logger.warning("%s points outside the AppDir, skipping", match)
            continue
        if real in seen:
            logger.debug("%s resolves to already found %s", match, real)
            continue
        if real != match:
            logger.debug("Following %s to %s", match, real)

        seen.add(real)
        files.append(Path(real))

    return files
