"""
配置管理模块
"""
from pathlib import Path
import logging
import os
import re
from typing import Any, Dict, Optional, Union
from dataclasses import dataclass, field, asdict, fields

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PATCHER = "polyfill-glibc"
DEFAULT_LIB_PATTERN = "usr/lib/*"
DEFAULT_BIN_PATTERN = "usr/bin/*"

@dataclass
class PatcherConfig:
    """补丁工具配置模型"""
    executable: str = DEFAULT_PATCHER

@dataclass
class SearchConfig:
    """文件搜索配置模型，模式相对于AppDir"""
    libs: str = DEFAULT_LIB_PATTERN
    bins: str = DEFAULT_BIN_PATTERN

@dataclass
class ConfigModel:
    """配置文件模型"""
    patcher: PatcherConfig = field(default_factory=PatcherConfig)
    search: SearchConfig = field(default_factory=SearchConfig)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "patcher": asdict(self.patcher),
            "search": asdict(self.search)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConfigModel':
        """从字典创建配置模型"""
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the top level")

        unknown = set(data) - {"patcher", "search"}
        if unknown:
            raise ConfigError(f"Unknown config sections: {', '.join(sorted(unknown))}")

        patcher = _build_section(PatcherConfig, "patcher", data.get("patcher") or {})
        search = _build_section(SearchConfig, "search", data.get("search") or {})
        return cls(patcher=patcher, search=search)

def _build_section(section_cls, name: str, values: Any):
    """按dataclass字段校验并创建配置段"""
    if not isinstance(values, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")

    known = {f.name for f in fields(section_cls)}
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"Unknown keys in config section '{name}': {', '.join(sorted(unknown))}")

    for key, value in values.items():
        if not isinstance(value, str):
            raise ConfigError(f"Config value '{name}.{key}' must be a string")

    return section_cls(**values)

@dataclass(frozen=True)
class PluginConfig:
    """运行配置，启动时解析完成后不再修改"""
    appdir: Path
    glibc_version: str
    debug: bool = False
    patcher: str = DEFAULT_PATCHER
    lib_pattern: str = DEFAULT_LIB_PATTERN
    bin_pattern: str = DEFAULT_BIN_PATTERN

def expand_path(path: str) -> str:
    """展开路径中的 ${VAR} 变量和 ~"""
    if not path:
        return path

    def replace_var(match):
        return os.environ.get(match.group(1), match.group(0))

    path = re.sub(r'\${(\w+)}', replace_var, path)
    return os.path.expanduser(path)

def default_config_path() -> Path:
    """获取默认配置文件路径"""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(str(Path.home()), ".config")
    return Path(xdg_config_home) / "ldpglibc" / "config.yaml"

def load_config_file(config_file: Optional[Union[str, Path]] = None) -> ConfigModel:
    """
    加载YAML配置文件

    Args:
        config_file: 显式指定的配置文件，为None时使用默认位置

    Returns:
        ConfigModel: 配置模型，默认位置没有文件时返回默认值

    Raises:
        ConfigError: 配置文件无法读取或格式错误时抛出
    """
    if config_file is None:
        path = default_config_path()
        if not path.is_file():
            logger.debug("No config file at %s, using defaults", path)
            return ConfigModel()
    else:
        path = Path(config_file)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e

    logger.debug("Loaded config file %s", path)
    return ConfigModel.from_dict(data)

def resolve_config(
    appdir: Optional[Path],
    glibc_version: str,
    debug: bool = False,
    patcher: Optional[str] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> PluginConfig:
    """
    合并命令行参数、配置文件和默认值

    命令行参数和环境变量优先于配置文件。

    Raises:
        ConfigError: AppDir未指定或不存在，或配置文件有误时抛出
    """
    if appdir is None:
        raise ConfigError("AppDir not specified")

    appdir = Path(appdir)
    if not appdir.is_dir():
        raise ConfigError(f"AppDir {appdir} does not exist")

    model = load_config_file(config_file)

    return PluginConfig(
        appdir=appdir,
        glibc_version=glibc_version,
        debug=debug,
        patcher=expand_path(patcher or model.patcher.executable),
        lib_pattern=model.search.libs,
        bin_pattern=model.search.bins,
    )
