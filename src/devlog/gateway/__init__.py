"""Gateways — environments that drive a ViewController and act as its host."""

from .base import JournalGateway
from .cli_gateway import CliGateway

__all__ = ["CliGateway", "JournalGateway"]
