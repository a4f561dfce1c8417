"""micro-control CLI (package entrypoint).

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import handle_describe, handle_serve
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    p = build_parser()
    argv_list = list(sys.argv[1:] if argv is None else argv)
    args = p.parse_args(argv_list)
    if args.log_level:
        configure_logger(level=args.log_level)
    if args.cmd == "serve":
        return handle_serve(args)
    if args.cmd == "describe":
        return handle_describe(args)
    p.print_help()
    return 2


__all__ = ["main"]
