"""Chains of responsibility: spending approvals and request handling."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def _format_amount(amount: float) -> str:
    value = float(amount)
    return str(int(value)) if value.is_integer() else str(value)


def _emit(message: str) -> str:
    print(message, file=sys.stderr)
    return message


class Approver:
    """An approver with a spending limit and an optional successor.

    The base approver approves nothing; concrete positions decide.
    """

    def __init__(self, limit: float) -> None:
        self.limit = limit
        self.successor: Approver | None = None

    def set_next(self, approver: Approver) -> Approver:
        """Set the successor and return this approver."""
        self.successor = approver
        return self

    def approve(self, amount: float) -> str | None:
        """Handle an approval request; the base approver does nothing."""
        return None

    def _decide(self, title: str, amount: float) -> str | None:
        if amount <= self.limit:
            return _emit(f"{title} approved the amount: {_format_amount(amount)}")
        if self.successor is not None:
            return self.successor.approve(amount)
        return _emit(f"No one can approve the amount: {_format_amount(amount)}")


class Manager(Approver):
    """Approver in the manager position."""

    def approve(self, amount: float) -> str | None:
        """Approve within the limit, else pass on; return the decision."""
        return self._decide("Manager", amount)


class Director(Approver):
    """Approver in the director position."""

    def approve(self, amount: float) -> str | None:
        """Approve within the limit, else pass on; return the decision."""
        return self._decide("Director", amount)


class CFO(Approver):
    """Approver in the CFO position."""

    def approve(self, amount: float) -> str | None:
        """Approve within the limit, else pass on; return the decision."""
        return self._decide("CFO", amount)


@dataclass
class Request:
    """An HTTP request passed along a handler chain."""

    url: str
    method: str = "GET"
    headers: dict[str, list[str]] = field(default_factory=dict)


class Handler(ABC):
    """A step in a request-processing chain."""

    def __init__(self) -> None:
        self.successor: Handler | None = None

    def set_next(self, handler: Handler) -> None:
        """Set the handler that runs after this one."""
        self.successor = handler

    @abstractmethod
    def handle(self, request: Request) -> list[str]:
        """Process the request and return the messages the chain produced."""

    def _invoke_next(self, request: Request) -> list[str]:
        if self.successor is None:
            return []
        return self.successor.handle(request)


class LoggerHandler(Handler):
    """Logs the request, then passes it on."""

    def handle(self, request: Request) -> list[str]:
        message = _emit(f"Logging request: {request.url}")
        return [message, *self._invoke_next(request)]


class AuthHandler(Handler):
    """Authenticates the request, then passes it on."""

    def handle(self, request: Request) -> list[str]:
        message = _emit(f"Authenticating request: {request.url}")
        return [message, *self._invoke_next(request)]


class BusinessHandler(Handler):
    """Runs the business logic; the end of the chain."""

    def handle(self, request: Request) -> list[str]:
        return [_emit(f"Processing business logic for request: {request.url}")]