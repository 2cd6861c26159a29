# pytest -v tests/test_cli.py --log-cli-level=DEBUG

from unittest.mock import patch

import pytest

from fetchtool import cli
from fetchtool.config.defaults import HELP_MESSAGE, VERSION
from fetchtool.models import Failure, Success
from fetchtool.utils import network


@pytest.fixture
def executor(monkeypatch, scripted_executor):
    """Replace the network executor with a scripted one."""

    def install(*results):
        fake = scripted_executor(*results)
        monkeypatch.setattr(network, "execute", fake)
        return fake

    return install


class TestCLI:
    def test_help(self, capsys):
        with patch("fetchtool.cli.network.fetch") as mock_fetch:
            assert cli.main(["--help"]) == 0
            mock_fetch.assert_not_called()
        assert capsys.readouterr().out == HELP_MESSAGE

    def test_short_help_wins_over_version(self, capsys):
        assert cli.main(["-v", "-h"]) == 0
        assert capsys.readouterr().out == HELP_MESSAGE

    @pytest.mark.parametrize("flag", ["-v", "--version"])
    def test_version(self, capsys, flag):
        assert cli.main([flag]) == 0
        assert capsys.readouterr().out == f"Version: {VERSION}\n"

    def test_help_skips_url_validation(self, capsys):
        assert cli.main(["-u", "exa mple", "-h"]) == 0

    def test_missing_url(self, capsys, executor):
        fake = executor(Success(b"unused"))
        assert cli.main([]) == 1
        err = capsys.readouterr().err
        assert "Error: URL is required" in err
        assert HELP_MESSAGE in err
        assert fake.calls == []

    def test_empty_url(self, capsys, executor):
        fake = executor(Success(b"unused"))
        assert cli.main(["-u", ""]) == 1
        assert HELP_MESSAGE in capsys.readouterr().err
        assert fake.calls == []

    def test_invalid_url(self, capsys, executor):
        fake = executor(Success(b"unused"))
        assert cli.main(["--url", "http://example.com/%zz"]) == 1
        err = capsys.readouterr().err
        assert "Error: Invalid URL" in err
        assert HELP_MESSAGE in err
        assert fake.calls == []

    @pytest.mark.parametrize(
        "argv",
        [
            ["-u", "example.com", "-t", "soon"],
            ["-u", "example.com", "-t", "-1"],
            ["-u", "example.com", "-t", "10000000000"],
            ["-u", "example.com", "-r", "-2"],
            ["-u", "example.com", "-f", "0"],
            ["-u", "example.com", "--bogus"],
        ],
    )
    def test_bad_flags_exit_with_one(self, capsys, executor, argv):
        fake = executor(Success(b"unused"))
        assert cli.main(argv) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert HELP_MESSAGE in err
        assert fake.calls == []

    def test_long_flags(self, capsysbinary, executor, sleeps):
        fake = executor(Success(b"ok"))
        argv = ["--url", "https://example.com", "--timeout", "9", "--retry", "1"]
        assert cli.main(argv) == 0
        assert fake.calls == [("https://example.com", 9)]
        assert capsysbinary.readouterr().out == b"ok\n"


class TestScenarios:
    def test_bare_host_succeeds_first_try(self, capsysbinary, executor, sleeps):
        fake = executor(Success(b"<html>hi</html>", status_code=200))

        assert cli.main(["-u", "example.com", "-t", "30", "-r", "3"]) == 0

        assert fake.calls == [("http://example.com", 30)]
        assert sleeps == []
        assert capsysbinary.readouterr().out == b"<html>hi</html>\n"

    def test_recovers_on_third_attempt(self, capsysbinary, executor, sleeps):
        fake = executor(Failure("refused"), Failure("reset"), Success(b"third"))

        assert cli.main(["-u", "https://good.test", "-r", "3"]) == 0

        assert len(fake.calls) == 3
        assert sleeps == [1.0, 1.0]
        assert capsysbinary.readouterr().out == b"third\n"

    def test_exhausted_retries(self, capsys, executor, sleeps):
        fake = executor(Failure("connection refused"), Failure("no route to host"))

        assert cli.main(["-u", "https://down.test", "-r", "2"]) == 1

        assert len(fake.calls) == 2
        assert sleeps == [1.0]
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: no route to host" in captured.err
        assert "connection refused" not in captured.err

    def test_output_file(self, tmp_path, capsysbinary, executor, sleeps):
        target = tmp_path / "out.bin"
        executor(Success(b"\x00\x01payload"))

        assert cli.main(["-u", "https://example.com", "--output", str(target)]) == 0

        assert target.read_bytes() == b"\x00\x01payload"
        assert capsysbinary.readouterr().out == b""

    def test_output_failure_is_not_refetched(self, tmp_path, capsys, executor, sleeps):
        target = tmp_path / "missing" / "out.bin"
        fake = executor(Success(b"payload"))

        assert cli.main(["-u", "https://example.com", "-o", str(target)]) == 1

        assert len(fake.calls) == 1
        assert "Error: failed to write" in capsys.readouterr().err

    def test_status_errors_are_written(self, capsysbinary, executor, sleeps):
        fake = executor(Success(b"gone", status_code=500))

        assert cli.main(["-u", "https://example.com"]) == 0

        assert len(fake.calls) == 1
        assert capsysbinary.readouterr().out == b"gone\n"

    def test_repeat(self, capsysbinary, executor, sleeps):
        fake = executor(Success(b"a"), Success(b"b"))

        assert cli.main(["-u", "https://example.com", "--for", "2"]) == 0

        assert len(fake.calls) == 2
        assert capsysbinary.readouterr().out == b"a\nb\n"

    def test_repeat_stops_on_failure(self, capsysbinary, executor, sleeps):
        fake = executor(Failure("down"))

        assert cli.main(["-u", "https://example.com", "-f", "3", "-r", "0"]) == 1

        assert len(fake.calls) == 1
        assert capsysbinary.readouterr().out == b""

    def test_unencodable_hostname_is_reported(self, capsys, sleeps, no_proxy_env):
        assert cli.main(["-u", "a..b", "-r", "2"]) == 1

        assert sleeps == [1.0]
        err = capsys.readouterr().err
        assert err.startswith("Error: ")
        assert "label empty or too long" in err
