"""Outer service layer: NATS binding, HTTP mirror and CLI.

Nothing under ``micro_control.base`` imports from this package.
"""
