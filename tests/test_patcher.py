import shutil

import pytest

from ldpglibc.core.patcher import PolyfillPatcher, STATUS_PATCHED, STATUS_FAILED


def test_build_command():
    patcher = PolyfillPatcher("2.17")
    assert patcher.build_command("/app/usr/lib/libfoo.so") == [
        "polyfill-glibc", "/app/usr/lib/libfoo.so", "--target-glibc=2.17",
    ]


def test_version_passed_through_opaquely(fake_run, tmp_path):
    PolyfillPatcher("not a version!", executable="pg").patch(tmp_path / "lib")
    assert fake_run.calls == [["pg", str(tmp_path / "lib"), "--target-glibc=not a version!"]]


def test_success(fake_run, tmp_path):
    result = PolyfillPatcher("2.17").patch(tmp_path / "lib")
    assert result.status == STATUS_PATCHED
    assert result.success
    assert result.returncode == 0


def test_nonzero_exit(fake_run, tmp_path, caplog):
    path = tmp_path / "lib"
    fake_run.returncodes[str(path)] = 3
    result = PolyfillPatcher("2.17").patch(path)
    assert result.status == STATUS_FAILED
    assert result.returncode == 3
    assert "process failed" in caplog.text


@pytest.mark.skipif(
    shutil.which("ldpglibc-test-notexist"), reason='"ldpglibc-test-notexist" binary exists (somehow?)'
)
def test_not_found(tmp_path, caplog):
    result = PolyfillPatcher("2.17", executable="ldpglibc-test-notexist").patch(tmp_path / "lib")
    assert result.status == STATUS_FAILED
    assert result.returncode is None
    assert "Could not run ldpglibc-test-notexist" in caplog.text


def test_real_process(recording_patcher, tmp_path):
    script, log = recording_patcher
    result = PolyfillPatcher("2.28", executable=str(script)).patch(tmp_path / "libfoo.so")
    assert result.success
    assert log.read_text() == "%s --target-glibc=2.28\n" % (tmp_path / "libfoo.so")
