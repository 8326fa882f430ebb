"""
插件核心功能模块
"""
from .config import PluginConfig, ConfigModel, resolve_config, load_config_file
from .discovery import glob_files
from .elf import is_elf
from .errors import PluginError, ConfigError
from .patcher import PolyfillPatcher, PatchResult
from .processor import AppDirProcessor

__all__ = [
    # 配置
    'PluginConfig',
    'ConfigModel',
    'resolve_config',
    'load_config_file',

    # 文件处理
    'glob_files',
    'is_elf',
    'PolyfillPatcher',
    'PatchResult',
    'AppDirProcessor',

    # 异常
    'PluginError',
    'ConfigError',
]
