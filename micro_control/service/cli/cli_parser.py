"""CLI parser construction for micro-control.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

VERBS = ("ping", "info", "stats")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``describe`` and ``serve`` subcommands.
    """
    p = argparse.ArgumentParser(prog="micro-control", description="Service control-plane responder")
    p.add_argument("--log-level", default=None, help="Override MICRO_LOG_LEVEL (DEBUG, INFO, ...)")
    sub = p.add_subparsers(dest="cmd")

    p_desc = sub.add_parser("describe", help="Print a discovery document for the configured service (offline)")
    p_desc.add_argument("--verb", choices=VERBS, default="info")
    p_desc.add_argument("--name", default=None, help="Override the service name")
    p_desc.add_argument("--id", dest="service_id", default=None, help="Override the instance id")

    p_serve = sub.add_parser("serve", help="Serve the calculator over NATS until interrupted")
    p_serve.add_argument("--nats-url", default=None, help="NATS server URL (default from MICRO_NATS_URL)")
    p_serve.add_argument("--name", default=None, help="Override the service name")
    p_serve.add_argument("--id", dest="service_id", default=None, help="Override the instance id")
    p_serve.add_argument("--control-prefix", default=None)
    p_serve.add_argument("--workers", type=int, default=None, help="Handler worker threads")

    return p


__all__ = ["build_parser", "VERBS"]
