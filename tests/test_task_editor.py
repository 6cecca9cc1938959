# tests/test_task_editor.py

from __future__ import annotations

import json
import subprocess
from pathlib import Path

import pytest

from tq.errors import DecodeFailedError, EditorFailedError, EncodeFailedError, TempFileError
from tq.tasks import task_editor
from tq.tasks.task_editor import (
    SubprocessEditorRunner,
    decode_task,
    edit_task,
    encode_task,
    temp_name_suffix,
)
from tq.tasks.task_models import Task

from .fakes import FakeEditorRunner


def _replace_story(new_story: str):
    def rewrite(text: str) -> str:
        data = json.loads(text)
        data["Story"] = new_story
        return json.dumps(data, indent=2)

    return rewrite


def test_encode_decode_round_trip() -> None:
    task = Task(title="CAFÉ \"QUOTES\"", story="line one\nline two\twith tab {braces} \\ back")
    decoded = decode_task(encode_task(task))
    assert decoded == task


def test_encoded_format_is_labeled_and_indented() -> None:
    text = encode_task(Task(title="T", story="S"))
    assert text == '{\n  "Title": "T",\n  "Story": "S"\n}\n'


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        '{"Title": "only title"}',
        '{"Title": 1, "Story": "s"}',
    ],
)
def test_decode_rejects_bad_payloads(text: str) -> None:
    with pytest.raises(DecodeFailedError):
        decode_task(text)


def test_temp_name_suffix_replaces_separators() -> None:
    assert temp_name_suffix("BUY SOME MILK") == "_BUY_SOME_MILK"
    assert temp_name_suffix("A/B: c") == "_A_B_c"


def test_edit_applies_user_changes(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="WRITE REPORT", story="draft")
    runner = FakeEditorRunner(rewrite=_replace_story("final   version"))

    edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert task.title == "WRITE REPORT"
    assert task.story == "final   version"
    assert len(runner.calls) == 1
    call = runner.calls[0]
    assert (call.shell, call.editor) == ("/bin/bash", "nano")
    assert call.path.parent == tmp_path
    assert call.path.name.endswith("_WRITE_REPORT")


def test_edit_without_changes_keeps_fields(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="SAME", story="unchanged")
    edit_task(task, runner=FakeEditorRunner(), env=env, tmp_dir=tmp_path)
    assert task == Task(title="SAME", story="unchanged")


def test_edit_uses_default_shell_and_editor(tmp_path: Path) -> None:
    runner = FakeEditorRunner()
    edit_task(Task(title="T", story="S"), runner=runner, env={"EDITOR": "  "}, tmp_dir=tmp_path)
    assert (runner.calls[0].shell, runner.calls[0].editor) == ("sh", "vim")


def test_edit_nonzero_exit_leaves_task_and_keeps_file(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="KEEP", story="original")
    runner = FakeEditorRunner(rewrite=_replace_story("changed"), returncode=1)

    with pytest.raises(EditorFailedError) as excinfo:
        edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert excinfo.value.returncode == 1
    assert task == Task(title="KEEP", story="original")
    assert runner.calls[0].path.exists()


def test_edit_spawn_failure(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="KEEP", story="original")
    runner = FakeEditorRunner(error=FileNotFoundError("no such shell"))

    with pytest.raises(EditorFailedError) as excinfo:
        edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert task == Task(title="KEEP", story="original")


def test_edit_decode_failure_leaves_task(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="KEEP", story="original")
    runner = FakeEditorRunner(rewrite=lambda _: "{ broken")

    with pytest.raises(DecodeFailedError):
        edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert task == Task(title="KEEP", story="original")


def test_edit_missing_temp_dir(tmp_path: Path, env: dict[str, str]) -> None:
    runner = FakeEditorRunner()
    with pytest.raises(TempFileError):
        edit_task(
            Task(title="T", story="S"),
            runner=runner,
            env=env,
            tmp_dir=tmp_path / "does-not-exist",
        )
    assert runner.calls == []


def test_edit_unencodable_text_fails_before_writing(tmp_path: Path, env: dict[str, str]) -> None:
    # A lone surrogate, as read from stdin under a C/POSIX locale.
    task = Task(title="T", story="bad \udcff byte")
    runner = FakeEditorRunner()

    with pytest.raises(EncodeFailedError):
        edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert task == Task(title="T", story="bad \udcff byte")
    assert runner.calls == []
    assert list(tmp_path.iterdir()) == []


def test_edit_file_removed_by_editor(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="KEEP", story="original")
    runner = FakeEditorRunner(on_run=lambda path: path.unlink())

    with pytest.raises(TempFileError):
        edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert task == Task(title="KEEP", story="original")


def test_edit_file_not_utf8(tmp_path: Path, env: dict[str, str]) -> None:
    task = Task(title="KEEP", story="original")
    runner = FakeEditorRunner(on_run=lambda path: path.write_bytes(b"\xff\xfe"))

    with pytest.raises(DecodeFailedError) as excinfo:
        edit_task(task, runner=runner, env=env, tmp_dir=tmp_path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert task == Task(title="KEEP", story="original")


def test_decode_keys_are_case_sensitive() -> None:
    with pytest.raises(DecodeFailedError):
        decode_task('{"title": "t", "story": "s"}')


def test_task_edit_delegates_to_edit_task(monkeypatch: pytest.MonkeyPatch, env: dict[str, str]) -> None:
    seen = {}

    def fake_edit_task(task, *, runner=None, env=None, tmp_dir=None):
        seen["args"] = (task, runner, env)

    monkeypatch.setattr(task_editor, "edit_task", fake_edit_task)
    task = Task(title="T", story="S")
    runner = FakeEditorRunner()
    task.edit(runner=runner, env=env)

    assert seen["args"] == (task, runner, env)


def test_subprocess_runner_builds_shell_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured = {}

    def fake_run(cmd, check):
        captured["cmd"] = cmd
        captured["check"] = check
        return subprocess.CompletedProcess(cmd, 3)

    monkeypatch.setattr(task_editor.subprocess, "run", fake_run)
    path = tmp_path / "x_TASK"

    code = SubprocessEditorRunner().run("sh", "vim", path)

    assert code == 3
    assert captured["cmd"] == ["sh", "-c", f"vim {path}"]
    assert captured["check"] is False
