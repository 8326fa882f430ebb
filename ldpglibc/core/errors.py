"""
插件异常定义
"""


class PluginError(Exception):
    """插件异常基类"""
    pass


class ConfigError(PluginError):
    """配置错误，进程以退出码1结束"""
    pass
