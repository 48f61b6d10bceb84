"""Tests for CommandRunner: exit status handling and stderr capture."""

import os
import sys

import pytest

from mkproj.errors import ExecutionError
from mkproj.scaffold.command_runner import CommandInvocation, CommandResult, CommandRunner


def _python(code):
    return sys.executable, ["-c", code]


def _completed(returncode=0, stdout=None, stderr=""):
    """Create a subprocess result object for CommandRunner tests."""
    class Result:
        pass
    r = Result()
    r.returncode = returncode
    r.stdout = stdout
    r.stderr = stderr
    return r


@pytest.mark.unit
class TestCommandRunnerSuccess:

    def test_exit_zero_returns_ok_result(self):
        executable, args = _python("import sys; sys.exit(0)")
        result = CommandRunner().run(executable, args, "Should not fail")
        assert result.ok
        assert result.returncode == 0

    def test_stdout_is_inherited_not_captured(self, capfd):
        executable, args = _python("print('hello from child')")
        result = CommandRunner().run(executable, args, "Should not fail")
        assert result.stdout == ""
        assert "hello from child" in capfd.readouterr().out

    def test_capture_returns_stdout(self):
        executable, args = _python("print('3.12.4')")
        result = CommandRunner().capture(executable, args, "Should not fail")
        assert result.stdout.strip() == "3.12.4"

    def test_runs_in_given_directory(self, tmp_path):
        executable, args = _python("import os; print(os.getcwd())")
        result = CommandRunner().capture(executable, args, "Should not fail", cwd=str(tmp_path))
        assert os.path.realpath(result.stdout.strip()) == os.path.realpath(str(tmp_path))


@pytest.mark.unit
class TestCommandRunnerFailure:

    def test_nonzero_exit_raises_with_message_and_stderr(self):
        executable, args = _python("import sys; sys.stderr.write('X'); sys.exit(1)")
        with pytest.raises(ExecutionError) as excinfo:
            CommandRunner().run(executable, args, "Widget build failed")

        message = str(excinfo.value)
        assert "Widget build failed" in message
        assert "X" in message
        assert excinfo.value.failure_message == "Widget build failed"
        assert excinfo.value.stderr == "X"

    def test_capture_also_raises_on_nonzero_exit(self):
        executable, args = _python("import sys; print('partial'); sys.exit(3)")
        with pytest.raises(ExecutionError, match="Lookup failed"):
            CommandRunner().capture(executable, args, "Lookup failed")

    def test_missing_executable_raises_execution_error(self):
        with pytest.raises(ExecutionError, match="Command not found: no-such-tool-xyz"):
            CommandRunner().run("no-such-tool-xyz", [], "Could not run tool")

    def test_undecodable_stderr_still_raises_execution_error(self):
        executable, args = _python(
            "import sys; sys.stderr.buffer.write(b'bad \\xff byte'); sys.exit(1)"
        )
        with pytest.raises(ExecutionError) as excinfo:
            CommandRunner().run(executable, args, "Tool failed")

        assert excinfo.value.failure_message == "Tool failed"
        assert excinfo.value.stderr.startswith("bad ")
        assert "byte" in excinfo.value.stderr

    def test_undecodable_output_on_success_returns_normally(self):
        executable, args = _python(
            "import sys; sys.stdout.buffer.write(b'\\xfe'); sys.stderr.buffer.write(b'\\xff')"
        )
        result = CommandRunner().capture(executable, args, "Should not fail")
        assert result.ok
        assert result.stderr == "\ufffd"

    def test_non_executable_file_raises_execution_error(self, tmp_path):
        tool = tmp_path / "tool"
        tool.write_text("#!/bin/sh\nexit 0\n")
        tool.chmod(0o644)

        with pytest.raises(ExecutionError) as excinfo:
            CommandRunner().run(str(tool), [], "Tool failed")

        assert excinfo.value.failure_message == "Tool failed"
        assert f"Could not start {tool}" in excinfo.value.stderr

    def test_missing_working_directory_is_not_reported_as_missing_command(self, tmp_path):
        missing = tmp_path / "gone"
        executable, args = _python("pass")

        with pytest.raises(ExecutionError) as excinfo:
            CommandRunner().run(executable, args, "Tool failed", cwd=str(missing))

        assert f"Working directory not found: {missing}" in str(excinfo.value)
        assert "Command not found" not in str(excinfo.value)

    def test_working_directory_that_is_a_file_raises_execution_error(self, tmp_path):
        not_a_dir = tmp_path / "file.txt"
        not_a_dir.write_text("")
        executable, args = _python("pass")

        with pytest.raises(ExecutionError, match="Tool failed"):
            CommandRunner().run(executable, args, "Tool failed", cwd=str(not_a_dir))

    def test_empty_stderr_leaves_only_caller_message(self, monkeypatch):
        monkeypatch.setattr("subprocess.run", lambda cmd, **kwargs: _completed(returncode=2))
        with pytest.raises(ExecutionError) as excinfo:
            CommandRunner().run("git", ["status"], "git status failed")
        assert str(excinfo.value) == "git status failed"


@pytest.mark.unit
class TestCommandRunnerInvocation:

    def test_passes_argv_and_cwd_to_subprocess(self, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return _completed()

        monkeypatch.setattr("subprocess.run", fake_run)
        CommandRunner().run("git", ["init", "--quiet"], "init failed", cwd="/work/demo")

        cmd, kwargs = calls[0]
        assert cmd == ["git", "init", "--quiet"]
        assert kwargs["cwd"] == "/work/demo"
        assert kwargs["stdout"] is None

    def test_invocation_argv(self):
        invocation = CommandInvocation("pyenv", ("local", "3.12.4"), "pin failed")
        assert invocation.argv == ["pyenv", "local", "3.12.4"]

    def test_result_ok_reflects_returncode(self):
        assert CommandResult(returncode=0).ok
        assert not CommandResult(returncode=1).ok
