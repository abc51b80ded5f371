"""Tests for the command interpreter."""

import pytest

from depgraph_common.errors import CommandSyntaxError, NotFoundError, UnknownCommandError
from depgraph_core import CommandInterpreter, InstallationTracker, parse_line, parse_lines


class TestParsing:
    """Tests for parse_line()/parse_lines()."""

    def test_blank_lines_are_ignored(self):
        """Empty and whitespace-only lines parse to None."""
        assert parse_line("") is None
        assert parse_line("   \t  \n") is None

    def test_tokens_split_on_whitespace(self):
        """Runs of whitespace separate tokens."""
        command = parse_line("DEPEND   A\tB  C\n", line_number=4)
        assert command.keyword == "DEPEND"
        assert command.args == ("A", "B", "C")
        assert command.line == "DEPEND   A\tB  C"
        assert command.line_number == 4

    def test_unknown_keyword_raises(self):
        """An unrecognized leading token is fatal."""
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_line("UPGRADE A", line_number=7)
        assert exc_info.value.command == "UPGRADE"
        assert exc_info.value.line_number == 7
        assert exc_info.value.to_dict()["line"] == "UPGRADE A"

    def test_keywords_are_case_sensitive(self):
        """Lower-case keywords are not recognized."""
        with pytest.raises(UnknownCommandError):
            parse_line("install A")

    @pytest.mark.parametrize("line", ["DEPEND", "DEPEND A", "INSTALL", "REMOVE", "INSTALL A B"])
    def test_missing_arguments_raise(self, line):
        """Commands without their required arguments are rejected."""
        with pytest.raises(CommandSyntaxError):
            parse_line(line)

    def test_parse_lines_numbers_from_one(self):
        """Line numbers count blank lines too."""
        commands = list(parse_lines(["INSTALL A", "", "LIST"]))
        assert [c.line_number for c in commands] == [1, 3]


class TestExecution:
    """Tests for CommandInterpreter."""

    def test_depend_declares(self, interpreter):
        """DEPEND calls declare and produces no output."""
        result = interpreter.execute_line("DEPEND A B C")
        assert result.output == []
        assert interpreter.tracker.dependencies_of("A") == {"B", "C"}

    def test_install_output(self, interpreter):
        """INSTALL reports each installed component."""
        interpreter.execute_line("DEPEND A B")
        result = interpreter.execute_line("INSTALL A")
        assert result.output == ["Installing A", "Installing B"]
        assert interpreter.execute_line("INSTALL A").output == ["A is already installed"]

    def test_list_output(self, interpreter):
        """LIST yields installed components."""
        interpreter.execute_line("INSTALL A")
        interpreter.execute_line("INSTALL B")
        assert sorted(interpreter.execute_line("LIST").output) == ["A", "B"]

    def test_end_is_a_no_op(self, interpreter):
        """END changes nothing and does not stop later lines."""
        results = list(interpreter.run_lines(["END", "INSTALL A"]))
        assert results[0].output == []
        assert interpreter.tracker.list() == ["A"]

    def test_blank_line_returns_none(self, interpreter):
        assert interpreter.execute_line("  ") is None

    def test_shares_supplied_tracker(self):
        """The interpreter drives the tracker it is given."""
        tracker = InstallationTracker()
        CommandInterpreter(tracker).execute_line("INSTALL A")
        assert tracker.list() == ["A"]

    def test_error_stops_script_after_earlier_commands(self, interpreter):
        """Commands before a fatal line stay applied."""
        results = interpreter.run_lines(["INSTALL A", "FROB", "INSTALL B"])
        assert next(results).output == ["Installing A"]
        with pytest.raises(UnknownCommandError):
            next(results)
        assert interpreter.tracker.list() == ["A"]

    def test_sample_session(self, interpreter, sample_script):
        """The classic network stack session produces the expected output."""
        results = list(interpreter.run_lines(sample_script.splitlines()))
        output = {r.command.line: r.output for r in results}

        assert output["INSTALL TELNET"] == ["Installing TELNET", "Installing TCPIP"]
        assert output["REMOVE NETCARD"] == ["NETCARD is not installed"]
        assert output["INSTALL BROWSER"] == ["Installing BROWSER", "Installing HTML"]
        assert output["REMOVE TELNET"] == [
            "Removing TELNET",
            "TCPIP is still needed",
            "NETCARD is still needed",
        ]
        assert output["REMOVE DNS"] == [
            "Removing DNS",
            "Removing TCPIP",
            "Removing NETCARD",
            "NETCARD is not installed",
        ]
        assert output["REMOVE BROWSER"] == [
            "Removing BROWSER",
            "TCPIP is not installed",
            "Removing HTML",
        ]

        lists = [r.output for r in results if r.command.keyword == "LIST"]
        assert sorted(lists[0]) == ["BROWSER", "DNS", "HTML", "NETCARD", "TCPIP", "TELNET", "foo"]
        assert sorted(lists[1]) == ["NETCARD", "foo"]

    def test_sample_session_first_removal(self, interpreter, sample_script):
        """The first REMOVE NETCARD only decrements."""
        lines = sample_script.splitlines()
        results = list(interpreter.run_lines(lines[:8]))
        assert results[-1].output == ["NETCARD is still needed"]
        assert interpreter.tracker.reference_count("NETCARD") == 1


class TestRunFile:
    """Tests for run_file()."""

    def test_run_file(self, interpreter, tmp_path):
        script = tmp_path / "commands.txt"
        script.write_text("DEPEND A B\nINSTALL A\n\nLIST\nEND\n")
        results = list(interpreter.run_file(script))
        assert [r.command.keyword for r in results] == ["DEPEND", "INSTALL", "LIST", "END"]
        assert sorted(results[2].output) == ["A", "B"]

    def test_form_feed_does_not_split_lines(self, interpreter, tmp_path):
        """Only newlines end a line; other separators are token whitespace."""
        script = tmp_path / "ff.txt"
        script.write_text("DEPEND A B\x0cC\nINSTALL A\n")
        results = list(interpreter.run_file(script))
        assert results[0].command.args == ("A", "B", "C")
        assert results[1].output == ["Installing A", "Installing B", "Installing C"]

    def test_missing_file_raises(self, interpreter, tmp_path):
        with pytest.raises(NotFoundError):
            list(interpreter.run_file(tmp_path / "missing.txt"))

    def test_directory_is_not_a_script(self, interpreter, tmp_path):
        with pytest.raises(NotFoundError):
            list(interpreter.run_file(tmp_path))
