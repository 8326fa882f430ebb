"""
AppDir批量处理
"""
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .config import PluginConfig
from .discovery import glob_files
from .elf import is_elf
from .patcher import PolyfillPatcher, PatchResult, STATUS_PATCHED, STATUS_SKIPPED, STATUS_FAILED

logger = logging.getLogger(__name__)

class AppDirProcessor:
    """按顺序处理AppDir中的库和可执行文件"""
    def __init__(self, config: PluginConfig, patcher: Optional[PolyfillPatcher] = None):
        self.config = config
        self.patcher = patcher or PolyfillPatcher(config.glibc_version, config.patcher)

    def process_file(self, path: Path) -> PatchResult:
        """校验单个文件并交给外部工具处理"""
        logger.info("Processing %s", path)

        try:
            elf = is_elf(path)
        except OSError as e:
            logger.error("Failed to read %s, skipping: %s", path, e)
            return PatchResult(path, STATUS_SKIPPED, error=str(e))

        if not elf:
            logger.warning("Failed to parse %s as an ELF file, skipping", path)
            return PatchResult(path, STATUS_SKIPPED, error="not an ELF file")

        return self.patcher.patch(path)

    def process(self, files: Iterable[Path]) -> List[PatchResult]:
        """处理一批文件，单个文件失败不影响后续文件"""
        files = list(files)
        if not files:
            logger.warning("no files found to process")
            return []

        results = [self.process_file(path) for path in files]
        self._log_summary(results)
        return results

    def _log_summary(self, results: List[PatchResult]):
        """记录本批次的处理统计"""
        counts = {}
        for result in results:
            counts[result.status] = counts.get(result.status, 0) + 1
        logger.info("%d patched, %d skipped, %d failed",
                    counts.get(STATUS_PATCHED, 0), counts.get(STATUS_SKIPPED, 0), counts.get(STATUS_FAILED, 0))

    def run(self) -> List[PatchResult]:
        """处理库目录和可执行文件目录"""
        results = []
        # 两个批次共享，同一文件只处理一次
        seen = set()

        logger.info("Processing libs")
        libs = glob_files(self.config.appdir, self.config.lib_pattern, seen)
        results.extend(self.process(libs))

        logger.info("Processing bins")
        bins = glob_files(self.config.appdir, self.config.bin_pattern, seen)
        results.extend(self.process(bins))

        return results
