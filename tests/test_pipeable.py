"""Tests for touchkit.pipeable."""

import io
import sys

import pyperclip
import pytest

from touchkit import pipeable


class TestInput:
    def test_literal(self):
        assert list(pipeable.input("a.txt")) == ["a.txt"]

    def test_strip_and_skip_blank(self):
        lines = pipeable.input(" a \n\n b", strip=True, skip_blank=True)
        assert list(lines) == ["a", "b"]

    def test_clipboard(self, monkeypatch):
        monkeypatch.setattr(pyperclip, "paste", lambda: "one.txt\ntwo.txt")
        assert list(pipeable.input("!c")) == ["one.txt", "two.txt"]

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("x\ny\n"))
        assert list(pipeable.input("!i")) == ["x", "y"]

    def test_stdin_stops_at_eof_character(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("x\ny\x1aignored\nz\n"))
        assert list(pipeable.input("!stdin")) == ["x", "y"]

    def test_rejects_non_strings(self):
        with pytest.raises(TypeError):
            pipeable.input(["a"])

    def test_input_many(self):
        assert list(pipeable.input_many(["a", "b\nc"])) == ["a", "b", "c"]

    def test_input_many_single_string(self):
        assert list(pipeable.input_many("a")) == ["a"]


class TestInputManyRequired:
    """Arguments that resolve to no lines at all raise NoArguments."""

    def test_returns_list(self):
        assert pipeable.input_many_required(["a", "b"]) == ["a", "b"]

    def test_empty_stdin_raises(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        with pytest.raises(pipeable.NoArguments):
            pipeable.input_many_required(["!i"])

    def test_blank_clipboard_raises(self, monkeypatch):
        monkeypatch.setattr(pyperclip, "paste", lambda: "\n  \n")
        with pytest.raises(pipeable.NoArguments):
            pipeable.input_many_required("!c", strip=True, skip_blank=True)

    def test_is_a_pipeable_exception(self):
        assert issubclass(pipeable.NoArguments, pipeable.PipeableException)


class TestOutput:
    def test_stdout_adds_newline(self, capsys):
        pipeable.stdout("hello")
        assert capsys.readouterr().out == "hello\n"

    def test_stderr_keeps_existing_newline(self, capsys):
        pipeable.stderr("hello\n")
        assert capsys.readouterr().err == "hello\n"

    def test_ctrlc_return1(self):
        @pipeable.ctrlc_return1
        def interrupted():
            raise KeyboardInterrupt()

        assert interrupted() == 1
