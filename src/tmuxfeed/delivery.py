"""
Body delivery: type a multi-line body into a tmux window, one line at a time.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from .address import SessionAddress
from .liveness import LivenessChecker
from .logging_config import get_logger
from .protocols import TmuxControlInterface


logger = get_logger("delivery")

_LINE_BREAKS = re.compile(r"[\r\n]+")


class DeliveryResult(Enum):
    DELIVERED = "delivered"
    PARTIAL = "partial"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of one send, with per-line counts."""

    result: DeliveryResult
    sent: int = 0
    failed: int = 0


def split_body(body: str) -> List[str]:
    """Split a body on runs of CR/LF, dropping the empty edge pieces."""
    lines = _LINE_BREAKS.split(body)
    if lines and lines[0] == "":
        lines = lines[1:]
    if lines and lines[-1] == "":
        lines = lines[:-1]
    return lines


def escape_line(line: str) -> str:
    """Escape a trailing ';' so tmux doesn't treat it as a command separator."""
    if line.endswith(";"):
        return line[:-1] + "\\;"
    return line


class BodyDelivery:
    """Sends lines into the window an address points at."""

    def __init__(self, client: TmuxControlInterface, checker: LivenessChecker):
        self.client = client
        self.checker = checker

    def send(self, address: SessionAddress, lines: Iterable[str]) -> DeliveryOutcome:
        if not self.checker.window_alive(address):
            logger.info("Window %s is gone, dropping body", address.target)
            return DeliveryOutcome(DeliveryResult.SKIPPED)

        sent = failed = 0
        for line in lines:
            if self.client.send_literal(address, escape_line(line)):
                sent += 1
            else:
                logger.warning("send-keys to %s failed: %r", address.target, line)
                failed += 1
        logger.debug("Delivered %d line(s) to %s, %d failed", sent, address.target, failed)
        result = DeliveryResult.PARTIAL if failed else DeliveryResult.DELIVERED
        return DeliveryOutcome(result, sent=sent, failed=failed)
