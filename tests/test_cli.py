"""Tests for qs2cookie.cli — entrypoint, argument parsing and preview output."""

import pytest

from qs2cookie.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_preview_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["preview", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_preview_missing_query(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["preview"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "qs2cookie" in captured.out


class TestPreview:
    def test_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1&b=2"])
        assert capsys.readouterr().out == "Set-Cookie: qs2cookie=a|1^b|2; path=/; \n"

    def test_per_pair(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1&b=2", "--per-pair", "--prefix", "qs_"])
        assert capsys.readouterr().out.splitlines() == [
            "Set-Cookie: qs_a=1; path=/; ",
            "Set-Cookie: qs_b=2; path=/; ",
        ]

    def test_ignore_repeatable(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1&b=2&c=3", "--ignore", "a", "--ignore", "C"])
        assert capsys.readouterr().out == "Set-Cookie: qs2cookie=b|2; path=/; \n"

    def test_attributes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "preview",
                "a=1",
                "--domain",
                ".example.com",
                "--expires",
                "3600",
                "--time",
                str(1700000000 - 3600),
            ]
        )
        assert capsys.readouterr().out == (
            "Set-Cookie: qs2cookie=a|1; path=/; domain=.example.com; "
            "expires=Tue, 14-Nov-23 22:13:20 GMT\n"
        )

    def test_encode_in_key_uses_time(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1", "--encode-in-key", "--time", "1234"])
        assert capsys.readouterr().out == "Set-Cookie: qs2cookie^a|1=1234; path=/; \n"

    def test_missing_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1", "--name-from", "uid"])
        assert capsys.readouterr().out == (
            "X-QS2Cookie: ERROR: Did not detect cookie name - missing QS argument: uid\n"
        )

    def test_declined_dnt(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1", "--dnt"])
        assert capsys.readouterr().out == "declined: DNT header present\n"

    def test_dnt_enabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "a=1", "--dnt", "--enable-if-dnt"])
        assert capsys.readouterr().out.startswith("Set-Cookie: ")

    def test_no_valid_pairs_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["preview", "junk"])
        assert capsys.readouterr().out == ""

    def test_invalid_config_exits_two(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["preview", "a=1", "--pair-delimiter", "="])
        assert exc_info.value.code == 2
        assert "pair_delimiter" in capsys.readouterr().err

    def test_invalid_domain_exits_two(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["preview", "a=1", "--domain", "example.com"])
        assert exc_info.value.code == 2
        assert "dot" in capsys.readouterr().err
