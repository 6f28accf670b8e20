"""Tests for pathcomplete.__main__ — CLI entry point and flag parsing."""

from __future__ import annotations

from unittest.mock import patch

import pytest


# ── main() ────────────────────────────────────────────────────────────────────


class TestMain:
    def test_no_args_runs_cli(self) -> None:
        with patch("pathcomplete.core.config.load_config", return_value={}):
            with patch("pathcomplete.cli.app.run_cli") as mock_cli:
                with patch("sys.argv", ["pathcomplete"]):
                    from pathcomplete.__main__ import main
                    main()
        mock_cli.assert_called_once()
        assert mock_cli.call_args.kwargs["option"] == {}

    def test_flags_override_config_file(self) -> None:
        file_option = {"trailing_slash": False, "path_mappings": {"~lib": "/lib"}}
        with patch("pathcomplete.core.config.load_config", return_value=file_option):
            with patch("pathcomplete.cli.app.run_cli") as mock_cli:
                with patch("sys.argv", ["pathcomplete", "--trailing-slash", "--map", "@=/src"]):
                    from pathcomplete.__main__ import main
                    main()
        option = mock_cli.call_args.kwargs["option"]
        assert option["trailing_slash"] is True
        assert option["path_mappings"] == {"~lib": "/lib", "@": "/src"}

    def test_invalid_config_exits_with_error(self) -> None:
        with patch("pathcomplete.core.config.load_config", return_value={"path_mappings": 3}):
            with patch("pathcomplete.cli.app.run_cli") as mock_cli:
                with patch("sys.argv", ["pathcomplete"]):
                    from pathcomplete.__main__ import main
                    with pytest.raises(SystemExit) as exc_info:
                        main()
        assert exc_info.value.code == 2
        mock_cli.assert_not_called()

    def test_help_flag_exits_zero(self) -> None:
        with patch("sys.argv", ["pathcomplete", "--help"]):
            from pathcomplete.__main__ import main
            with pytest.raises(SystemExit) as exc_info:
                main()
            assert exc_info.value.code == 0


# ── _parse_flags ──────────────────────────────────────────────────────────────


class TestParseFlags:
    def test_no_flags_returns_defaults(self) -> None:
        from pathcomplete.__main__ import _parse_flags
        f = _parse_flags([])
        assert f.trailing_slash is None
        assert f.label_trailing_slash is None
        assert f.path_mappings == {}
        assert f.to_option() == {}

    def test_trailing_slash_flag(self) -> None:
        from pathcomplete.__main__ import _parse_flags
        assert _parse_flags(["--trailing-slash"]).to_option() == {"trailing_slash": True}

    def test_no_label_slash_flag(self) -> None:
        from pathcomplete.__main__ import _parse_flags
        assert _parse_flags(["--no-label-slash"]).to_option() == {"label_trailing_slash": False}

    def test_repeated_map_flags(self) -> None:
        from pathcomplete.__main__ import _parse_flags
        f = _parse_flags(["--map", "@=${folder}/src", "--map", "~t=/tmp/a=b"])
        assert f.path_mappings == {"@": "${folder}/src", "~t": "/tmp/a=b"}

    def test_map_without_equals_exits(self) -> None:
        from pathcomplete.__main__ import _parse_flags
        with pytest.raises(SystemExit) as exc_info:
            _parse_flags(["--map", "oops"])
        assert exc_info.value.code == 1

    def test_unknown_flag_exits(self) -> None:
        from pathcomplete.__main__ import _parse_flags
        with pytest.raises(SystemExit) as exc_info:
            _parse_flags(["--unknown"])
        assert exc_info.value.code == 1
