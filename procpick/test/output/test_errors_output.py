"""Tests for procpick.output.errors module."""

from __future__ import annotations

from procpick.attach.errors import ExecutionFailed, UnsupportedPlatform
from procpick.core.errors import ErrorCode
from procpick.output.console import MockConsole, Style
from procpick.output.errors import attach_error_exit_code, print_attach_error
from procpick.platform.process import ProcessError


class TestPrintAttachError:
    def test_unsupported_platform(self) -> None:
        console = MockConsole()

        print_attach_error(UnsupportedPlatform(name="sunos5"), console)

        assert console.messages == ["error: Operating system 'sunos5' not supported."]

    def test_execution_failed(self) -> None:
        console = MockConsole()
        error = ProcessError(command=("ps", "axww"), returncode=1, stdout="", stderr="ps: illegal option\n")

        print_attach_error(ExecutionFailed(error), console)

        assert console.messages == [
            "error: Could not retrieve the process list: ps axww failed (exit 1)",
            "ps: illegal option",
        ]
        assert console.count(Style.DIM) == 1

    def test_stderr_with_zero_exit_is_printed_once(self) -> None:
        console = MockConsole()
        error = ProcessError(command=("ps", "axww"), returncode=0, stdout="", stderr="ps: no controlling tty\n")

        print_attach_error(ExecutionFailed(error), console)

        assert console.messages == [
            "error: Could not retrieve the process list: ps axww wrote to stderr: ps: no controlling tty"
        ]
        assert len(console.find("no controlling tty")) == 1


class TestAttachErrorExitCode:
    def test_codes(self) -> None:
        error = ProcessError(command=("ps",), returncode=1, stdout="", stderr="")
        assert attach_error_exit_code(UnsupportedPlatform(name="x")) == int(ErrorCode.ENV_ERROR)
        assert attach_error_exit_code(ExecutionFailed(error)) == int(ErrorCode.EXEC_ERROR)


class TestAttachErrorMessages:
    def test_messages(self) -> None:
        error = ProcessError(command=("ps",), returncode=1, stdout="", stderr="")
        assert UnsupportedPlatform(name="aix").message == "Operating system 'aix' not supported."
        assert ExecutionFailed(error).message == "Could not retrieve the process list: ps failed (exit 1)"
