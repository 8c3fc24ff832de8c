from __future__ import annotations

from pathlib import Path

from verbctl.core.result import Err, Ok
from verbctl.core.virt import running_in_chroot


def test_same_root_as_init_is_not_chroot(tmp_path: Path) -> None:
    assert running_in_chroot({}, root=str(tmp_path), init_root=str(tmp_path)) == Ok(False)


def test_different_root_from_init_is_chroot(tmp_path: Path) -> None:
    inner = tmp_path / "jail"
    inner.mkdir()
    assert running_in_chroot({}, root=str(inner), init_root=str(tmp_path)) == Ok(True)


def test_unreadable_init_root_is_indeterminate(tmp_path: Path) -> None:
    result = running_in_chroot({}, root=str(tmp_path), init_root=str(tmp_path / "missing"))
    assert isinstance(result, Err)
    assert "missing" in result.error


def test_ignore_variable_skips_the_probe(tmp_path: Path) -> None:
    env = {"VERBCTL_IGNORE_CHROOT": "1"}
    assert running_in_chroot(env, root=str(tmp_path), init_root=str(tmp_path / "missing")) == Ok(False)


def test_false_ignore_variable_still_probes(tmp_path: Path) -> None:
    inner = tmp_path / "jail"
    inner.mkdir()
    env = {"VERBCTL_IGNORE_CHROOT": "no"}
    assert running_in_chroot(env, root=str(inner), init_root=str(tmp_path)) == Ok(True)
