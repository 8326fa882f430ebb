import os
import struct
import subprocess

import pytest


def make_elf_bytes(elf_class=2):
    """构造最小的小端ELF文件：文件头加一个空节头"""
    ident = b"\x7fELF" + bytes([elf_class, 1, 1, 0, 0]) + b"\x00" * 7
    # e_type=ET_DYN, e_machine=EM_X86_64, e_shoff=64, e_shnum=1, e_shstrndx=0
    header = struct.pack("<HHIQQQIHHHHHH", 3, 62, 1, 0, 0, 64, 0, 64, 56, 0, 64, 1, 0)
    return ident + header + b"\x00" * 64


def write_file(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("APPDIR", "GLIBC_VERSION", "DEBUG", "POLYFILL_GLIBC", "LDPGLIBC_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))


@pytest.fixture
def appdir(tmp_path):
    path = tmp_path / "AppDir"
    (path / "usr" / "lib").mkdir(parents=True)
    (path / "usr" / "bin").mkdir(parents=True)
    return path


@pytest.fixture
def elf_bytes():
    return make_elf_bytes()


@pytest.fixture
def fake_run(monkeypatch):
    """替换subprocess.run，记录命令行并返回指定的退出码"""
    calls = []
    returncodes = {}

    def run(cmd, *args, **kwargs):
        calls.append(list(cmd))
        return subprocess.CompletedProcess(cmd, returncodes.get(cmd[1], 0))

    monkeypatch.setattr("ldpglibc.core.patcher.subprocess.run", run)
    run.calls = calls
    run.returncodes = returncodes
    return run


@pytest.fixture
def recording_patcher(tmp_path):
    """一个真实的可执行脚本，把参数追加写入日志文件"""
    log = tmp_path / "patcher.log"
    script = tmp_path / "fake-polyfill-glibc"
    script.write_text('#!/bin/sh\necho "$@" >> "%s"\n' % log)
    os.chmod(script, 0o755)
    return script, log
