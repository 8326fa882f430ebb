"""
polyfill-glibc 调用模块
"""
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_PATCHER

logger = logging.getLogger(__name__)

STATUS_PATCHED = "patched"
STATUS_SKIPPED = "skipped"
STATUS_FAILED = "failed"

@dataclass
class PatchResult:
    """单个文件的处理结果"""
    path: Path
    status: str
    error: Optional[str] = None
    returncode: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.status == STATUS_PATCHED

class PolyfillPatcher:
    """调用外部 polyfill-glibc 工具修改ELF文件的GLIBC版本需求"""
    def __init__(self, glibc_version: str, executable: str = DEFAULT_PATCHER):
        """
        初始化补丁工具

        Args:
            glibc_version: 目标GLIBC版本，原样传给外部工具
            executable: 外部工具名称或路径
        """
        self.glibc_version = glibc_version
        self.executable = executable

    def build_command(self, elf_path: Union[str, Path]) -> List[str]:
        """生成外部工具命令行"""
        return [self.executable, str(elf_path), f"--target-glibc={self.glibc_version}"]

    def patch(self, elf_path: Union[str, Path]) -> PatchResult:
        """
        为ELF文件打补丁

        同步等待外部进程结束，不设超时也不重试。进程无法启动或
        返回非零都只记录日志，不抛出异常。

        Args:
            elf_path: ELF文件路径

        Returns:
            PatchResult: 补丁结果
        """
        elf_path = Path(elf_path)
        cmd = self.build_command(elf_path)
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(cmd)
        except OSError as e:
            logger.error("Could not run %s: %s", self.executable, e)
            return PatchResult(elf_path, STATUS_FAILED, error=str(e))

        if result.returncode != 0:
            logger.warning("%s process failed for %s (exit status %d)",
                           self.executable, elf_path, result.returncode)
            return PatchResult(elf_path, STATUS_FAILED,
                               error=f"exit status {result.returncode}",
                               returncode=result.returncode)

        return PatchResult(elf_path, STATUS_PATCHED, returncode=0)
