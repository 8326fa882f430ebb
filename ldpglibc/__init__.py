"""
linuxdeploy插件：使用 polyfill-glibc 降低AppDir的GLIBC版本需求
"""
from .core.config import PluginConfig, resolve_config
from .core.patcher import PolyfillPatcher, PatchResult
from .core.processor import AppDirProcessor

__version__ = "0.1.0"
__all__ = [
    'PluginConfig',
    'resolve_config',
    'PolyfillPatcher',
    'PatchResult',
    'AppDirProcessor',
]
