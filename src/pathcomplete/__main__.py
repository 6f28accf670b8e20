"""pathcomplete - filesystem path completion at an interactive prompt."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

_HELP = """\
Usage: pathcomplete [OPTIONS]

Options:
  --trailing-slash       Insert directories with a trailing slash
  --no-label-slash       Do not show a trailing slash on directory labels
  --map <alias>=<dir>    Complete '<alias>/...' inside <dir> (repeatable,
                         ${folder} expands to the current directory)
  --help, -h             Show this help message and exit

Options are also read from ~/.pathcomplete/config.yaml and
.pathcomplete/config.yaml; command-line flags take precedence.

Examples:
  pathcomplete --map @=${folder}/src
  pathcomplete --trailing-slash --no-label-slash
"""


@dataclass
class CLIFlags:
    """Flags parsed from the command line."""

    trailing_slash: bool | None = None
    label_trailing_slash: bool | None = None
    path_mappings: dict[str, str] = field(default_factory=dict)

    def to_option(self) -> dict[str, Any]:
        option: dict[str, Any] = {}
        if self.trailing_slash is not None:
            option["trailing_slash"] = self.trailing_slash
        if self.label_trailing_slash is not None:
            option["label_trailing_slash"] = self.label_trailing_slash
        if self.path_mappings:
            option["path_mappings"] = dict(self.path_mappings)
        return option


def main() -> None:
    """Entry point for the pathcomplete CLI."""
    args = sys.argv[1:]
    if "--help" in args or "-h" in args:
        print(_HELP)
        sys.exit(0)
    flags = _parse_flags(args)

    from pathcomplete.cli.app import run_cli
    from pathcomplete.core.config import EnvSettings, _deep_merge, load_config, validate_option

    env = EnvSettings()
    logging.basicConfig(level=env.log_level.upper())

    option = _deep_merge(load_config(Path.cwd()), flags.to_option())
    try:
        validate_option(option)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(2)
    run_cli(option=option, max_lines=env.preview_max_lines)


def _parse_flags(args: list[str]) -> CLIFlags:
    """Parse flags from argv."""
    flags = CLIFlags()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--trailing-slash":
            flags.trailing_slash = True
            i += 1
        elif arg == "--no-label-slash":
            flags.label_trailing_slash = False
            i += 1
        elif arg == "--map" and i + 1 < len(args) and "=" in args[i + 1]:
            alias, target = args[i + 1].split("=", 1)
            flags.path_mappings[alias] = target
            i += 2
        else:
            print(f"Unknown argument: {arg}")
            print("Run 'pathcomplete --help' for usage.")
            sys.exit(1)
    return flags


if __name__ == "__main__":
    main()
