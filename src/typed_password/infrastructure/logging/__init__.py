"""Logging adapters implementing LoggerProtocol."""

from typed_password.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
