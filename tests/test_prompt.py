import io
import os

import pytest

from tildeshell import prompt
from tildeshell.config import ShellConfig
from tildeshell.prompt import display_path, format_prompt, readline_prompt, render_prompt


@pytest.mark.parametrize(
    "cwd, home, expected",
    [
        ("/home/bob", "/home/bob", "~"),
        ("/home/bob/src/app", "/home/bob", "~/src/app"),
        ("/home/bob/src", "/home/bob/", "~/src"),
        ("/tmp", "/home/bob", "/tmp"),
        ("/home/bobby", "/home/bob", "/home/bobby"),
        ("/home", "/home/bob", "/home"),
        ("/home/bob/x", None, "/home/bob/x"),
        ("/home/bob/x", "", "/home/bob/x"),
    ],
)
def test_display_path(cwd, home, expected):
    assert display_path(cwd, home) == expected


def test_format_prompt_colored():
    assert format_prompt("~/src") == "\033[36m~/src\n\033[35m❯\033[0m "


def test_format_prompt_plain():
    assert format_prompt("/tmp", color=False) == "/tmp\n❯ "


def test_render_abbreviates_home(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setattr(prompt, "home_dir", lambda: os.getcwd().rsplit(os.sep, 1)[0])

    assert render_prompt(ShellConfig(color=False), io.StringIO()) == "~/work\n❯ "


def test_render_uses_placeholder_when_cwd_is_gone(monkeypatch):
    def gone():
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(prompt.os, "getcwd", gone)
    monkeypatch.setattr(prompt, "home_dir", lambda: "/home/bob")

    text = render_prompt(ShellConfig(color=False, placeholder_cwd="/lost"), io.StringIO())
    assert text == "/lost\n❯ "


def test_render_reports_unknown_user_and_keeps_full_path(in_tmp, monkeypatch):
    def no_user():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(prompt, "home_dir", no_user)

    err = io.StringIO()
    assert render_prompt(ShellConfig(color=False), err) == f"{os.getcwd()}\n❯ "
    assert "Error getting current user" in err.getvalue()


def test_readline_prompt_marks_escapes_zero_width():
    wrapped = readline_prompt(format_prompt("~"))
    assert wrapped == "\001\033[36m\002~\n\001\033[35m\002❯\001\033[0m\002 "
    assert readline_prompt("/tmp\n❯ ") == "/tmp\n❯ "
