"""``python -m titletool_app`` entry; the file can also be run by path."""

from __future__ import annotations

import sys

if __package__:
    from .cli import main as _cli_main
else:
    # run by path, so no parent package is set
    from titletool_app.cli import main as _cli_main


def main(argv: list[str] | None = None) -> int:
    return int(_cli_main(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    raise SystemExit(main())
