"""Tests for procpick.attach.ps_parser module."""

from __future__ import annotations

from procpick.attach.ps_parser import (
    COMM_COLUMN_WIDTH,
    PS_DARWIN_COMMAND,
    PS_LINUX_COMMAND,
    parse_processes,
)
from procpick.attach.types import AttachItem

HEADER = "  PID " + "a" * COMM_COLUMN_WIDTH + " ARGS"


def _line(pid: int | str, name: str, args: str = "") -> str:
    # ps right-aligns the pid and pads comm to the header width
    return f"{str(pid):>5} {name.ljust(COMM_COLUMN_WIDTH)} {args}"


class TestCommands:
    """Test the ps command descriptors."""

    def test_linux_command(self) -> None:
        assert PS_LINUX_COMMAND.command == "ps"
        assert PS_LINUX_COMMAND.args == ("axww", "-o", f"pid=,comm={'a' * 50},args=")

    def test_darwin_command_adds_c_flag(self) -> None:
        assert PS_DARWIN_COMMAND.command == "ps"
        assert PS_DARWIN_COMMAND.args[:-1] == PS_LINUX_COMMAND.args
        assert PS_DARWIN_COMMAND.args[-1] == "-c"


class TestParseProcesses:
    """Test parsing of ps output."""

    def test_parses_records(self) -> None:
        output = "\n".join(
            [
                HEADER,
                _line(1, "launchd", "/sbin/launchd"),
                _line(4242, "python3", "python3 manage.py runserver"),
            ]
        )

        assert parse_processes(output) == [
            AttachItem(pid=1, process_name="launchd", command_line="/sbin/launchd"),
            AttachItem(pid=4242, process_name="python3", command_line="python3 manage.py runserver"),
        ]

    def test_name_with_spaces_is_kept_whole(self) -> None:
        output = "\n".join([HEADER, _line(312, "Google Chrome Helper", "/Applications/Chrome --type=gpu")])

        [item] = parse_processes(output)
        assert item.process_name == "Google Chrome Helper"
        assert item.command_line == "/Applications/Chrome --type=gpu"

    def test_empty_args(self) -> None:
        output = "\n".join([HEADER, _line(2, "kthreadd")])

        assert parse_processes(output) == [AttachItem(pid=2, process_name="kthreadd", command_line="")]

    def test_empty_args_with_trailing_padding_stripped(self) -> None:
        output = "\n".join([HEADER, "    2 kthreadd"])

        assert parse_processes(output) == [AttachItem(pid=2, process_name="kthreadd", command_line="")]

    def test_skips_header_blank_and_malformed_lines(self) -> None:
        output = "\n".join(
            [
                HEADER,
                _line(10, "bash", "-bash"),
                _line("abc", "broken", "nope"),
                _line(11, "zsh", "-zsh"),
                "",
                "",
            ]
        )

        items = parse_processes(output)
        assert [i.pid for i in items] == [10, 11]

    def test_crlf_line_endings(self) -> None:
        output = "\r\n".join([HEADER, _line(7, "sshd", "sshd: /usr/sbin/sshd -D"), ""])

        assert parse_processes(output) == [
            AttachItem(pid=7, process_name="sshd", command_line="sshd: /usr/sbin/sshd -D")
        ]

    def test_drops_pid_zero(self) -> None:
        output = "\n".join([HEADER, _line(0, "kernel_task"), _line(1, "launchd")])

        assert [i.pid for i in parse_processes(output)] == [1]

    def test_empty_output(self) -> None:
        assert parse_processes("") == []

    def test_header_only(self) -> None:
        assert parse_processes(HEADER + "\n") == []

    def test_is_idempotent(self) -> None:
        output = "\n".join([HEADER, _line(1, "init", "/sbin/init"), _line(2, "python", "python a.py")])

        assert parse_processes(output) == parse_processes(output)

    def test_records_have_positive_pid_and_name(self) -> None:
        output = "\n".join(
            [HEADER, _line(1, "init"), _line(99, "python3.12", "python3.12 -m http.server"), "   "]
        )

        for item in parse_processes(output):
            assert item.pid > 0
            assert item.process_name

    def test_name_filling_the_column_is_kept_whole(self) -> None:
        name = ("Google Chrome Helper (Renderer) " + "x" * 30)[: COMM_COLUMN_WIDTH - 1]
        output = "\n".join([HEADER, _line(312, name, "/Applications/Chrome --type=renderer")])

        assert parse_processes(output) == [
            AttachItem(pid=312, process_name=name, command_line="/Applications/Chrome --type=renderer")
        ]

    def test_overlong_name_with_spaces_is_dropped_not_split(self) -> None:
        name = ("Google Chrome Helper (Renderer) " + "x" * 30)[:COMM_COLUMN_WIDTH]
        output = "\n".join(
            [
                HEADER,
                f"  312 {name} /Applications/Chrome --type=renderer",
                _line(313, "bash", "-bash"),
            ]
        )

        assert parse_processes(output) == [AttachItem(pid=313, process_name="bash", command_line="-bash")]

    def test_overlong_name_without_args_is_dropped(self) -> None:
        output = "\n".join([HEADER, "  314 " + "n" * COMM_COLUMN_WIDTH])

        assert parse_processes(output) == []
