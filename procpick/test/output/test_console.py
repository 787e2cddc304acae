"""Tests for procpick.output.console module."""

from __future__ import annotations

from procpick.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_all_styles_exist(self) -> None:
        expected = {"DEFAULT", "ERROR", "INFO", "DIM", "HEADER"}
        assert {s.name for s in Style} == expected


class TestMockConsole:
    """Test MockConsole capture helpers."""

    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello")
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DEFAULT

    def test_error_and_info_prefixes(self) -> None:
        console = MockConsole()
        console.error("failed")
        console.info("note")
        assert console.messages == ["error: failed", "info: note"]
        assert console.has_error() is True

    def test_table_records_header_and_rows(self) -> None:
        console = MockConsole()
        console.table(("PID", "NAME"), [("1", "init"), ("2", "bash")])
        assert console.messages == ["PID  NAME", "1  init", "2  bash"]
        assert console.count(Style.HEADER) == 1

    def test_find_and_clear(self) -> None:
        console = MockConsole()
        console.info("one")
        console.print("two")
        assert len(console.find("one")) == 1
        console.clear()
        assert console.text == ""

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.print("typed")


class TestRichConsole:
    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = RichConsole()
        assert console is not None

    def test_table_prints_rows(self, capsys) -> None:  # type: ignore[no-untyped-def]
        console = RichConsole()
        console.table(("PID", "NAME"), [("4242", "python3")])
        out = capsys.readouterr().out
        assert "4242" in out
        assert "python3" in out
