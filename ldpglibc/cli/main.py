#!/usr/bin/env python3
import logging
import os
import sys
from pathlib import Path

import click

from ldpglibc import __version__
from ldpglibc.core.config import resolve_config
from ldpglibc.core.errors import ConfigError
from ldpglibc.core.log import configure_logging
from ldpglibc.core.processor import AppDirProcessor

logger = logging.getLogger(__name__)

PLUGIN_TYPE = "input"
PLUGIN_API_VERSION = "0"

EXIT_CONFIG_ERROR = 1
EXIT_INTERNAL_ERROR = 3

def _print_and_exit(value: str):
    """生成查询参数的回调，输出固定字符串后退出"""
    def callback(ctx: click.Context, param: click.Parameter, flag: bool):
        if not flag or ctx.resilient_parsing:
            return
        click.echo(value)
        ctx.exit(0)
    return callback

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('--appdir', envvar='APPDIR', type=click.Path(path_type=Path),
              help='AppDir根目录')
@click.option('--glibc-version', envvar='GLIBC_VERSION', required=True,
              help='目标GLIBC版本，原样传给polyfill-glibc')
@click.option('--plugin-type', is_flag=True, expose_value=False, is_eager=True,
              callback=_print_and_exit(PLUGIN_TYPE), help='输出插件类型后退出')
@click.option('--plugin-api-version', is_flag=True, expose_value=False, is_eager=True,
              callback=_print_and_exit(PLUGIN_API_VERSION), help='输出插件API版本后退出')
@click.option('--debug', is_flag=True, default=False,
              help='输出调试日志（设置DEBUG环境变量同样生效）')
@click.option('--patcher', envvar='POLYFILL_GLIBC', default=None,
              help='polyfill-glibc 可执行文件')
@click.option('--config', 'config_file', envvar='LDPGLIBC_CONFIG', default=None,
              type=click.Path(dir_okay=False, path_type=Path), help='YAML配置文件')
@click.version_option(__version__, prog_name="linuxdeploy-plugin-polyfill-glibc")
def cli(appdir, glibc_version, debug, patcher, config_file):
    """使用 polyfill-glibc 降低AppDir中ELF文件的GLIBC版本需求"""
    # DEBUG变量只要存在就开启，不论取值
    if os.environ.get("DEBUG") is not None:
        debug = True

    configure_logging(debug)

    try:
        config = resolve_config(appdir, glibc_version, debug=debug,
                                patcher=patcher, config_file=config_file)
        logger.debug("Using %s to target GLIBC %s in %s",
                     config.patcher, config.glibc_version, config.appdir)
        AppDirProcessor(config).run()
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(EXIT_CONFIG_ERROR)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        sys.exit(EXIT_INTERNAL_ERROR)

main = cli

if __name__ == '__main__':
    cli()
