"""
Session orchestration: make sure the addressed session and window exist,
make them visible, and type a body into them.

One call to SessionOrchestrator.execute runs the whole sequence:

    check session + window (once, before any mutation)
    create session if missing
    create window if missing
    open a terminal if the session is new and no alternate socket is used
    wait until the window is visible to tmux
    disable automatic window renaming
    deliver the body line by line

Nothing is rolled back on failure. Re-running with the same address is
safe because creation is guarded by the liveness checks.
"""

import os
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union

from .address import SessionAddress, parse_address, target
from .delivery import BodyDelivery, DeliveryResult, split_body
from .dependency_check import require_tmux
from .exceptions import WaitCancelledError, WindowTimeoutError
from .liveness import LivenessChecker
from .logging_config import get_structured_logger
from .protocols import TmuxControlInterface
from .terminal import launch_terminal
from .tmux_client import TmuxClient


logger = get_structured_logger("orchestrator")


class OrchestratorState(Enum):
    UNCHECKED = "unchecked"
    SESSION_CHECKED = "session_checked"
    WINDOW_CHECKED = "window_checked"
    SESSION_CREATED = "session_created"
    WINDOW_CREATED = "window_created"
    TERMINAL_LAUNCHED = "terminal_launched"
    WINDOW_READY = "window_ready"
    RENAMING_DISABLED = "renaming_disabled"
    DELIVERING_BODY = "delivering_body"
    DONE = "done"


@dataclass
class ExecutionReport:
    """What one execute() call did."""

    address: SessionAddress
    session_created: bool = False
    window_created: bool = False
    terminal_launched: bool = False
    lines: int = 0
    failed_lines: int = 0
    delivery: Optional[DeliveryResult] = None
    states: List[OrchestratorState] = field(default_factory=list)

    @property
    def target(self) -> str:
        return target(self.address)

    @property
    def state(self) -> OrchestratorState:
        return self.states[-1] if self.states else OrchestratorState.UNCHECKED


def poll_until(
    predicate: Callable[[], bool],
    what: str,
    timeout: Optional[float] = 10.0,
    poll_interval: float = 0.05,
    max_poll_interval: float = 1.0,
    cancel: Optional[threading.Event] = None,
) -> None:
    """Re-evaluate ``predicate`` with exponential backoff until it holds.

    Raises:
        WindowTimeoutError: ``timeout`` seconds passed without success
        WaitCancelledError: ``cancel`` was set while waiting
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    interval = poll_interval
    while True:
        if cancel is not None and cancel.is_set():
            raise WaitCancelledError(what)
        if predicate():
            return
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise WindowTimeoutError(what, timeout)
            interval = min(interval, remaining)
        time.sleep(interval)
        interval = min(interval * 2, max_poll_interval)


def wait_for_window(
    checker: LivenessChecker,
    address: SessionAddress,
    timeout: Optional[float] = 10.0,
    poll_interval: float = 0.05,
    max_poll_interval: float = 1.0,
    cancel: Optional[threading.Event] = None,
) -> None:
    """Block until tmux reports the addressed window."""
    poll_until(
        lambda: checker.window_alive(address),
        target(address),
        timeout=timeout,
        poll_interval=poll_interval,
        max_poll_interval=max_poll_interval,
        cancel=cancel,
    )


class SessionOrchestrator:
    """Ensures a session/window exists and delivers a body into it."""

    def __init__(self, client: Optional[TmuxControlInterface] = None):
        self.client = client if client is not None else TmuxClient()
        self.settings = self.client.settings
        self.checker = LivenessChecker(self.client)
        self.delivery = BodyDelivery(self.client, self.checker)

    def address(
        self,
        raw_spec: Optional[str],
        socket: Optional[str] = None,
        window: Optional[str] = None,
    ) -> SessionAddress:
        return parse_address(raw_spec, socket, prefix=self.settings.session_prefix, window=window)

    def execute(
        self,
        address: Union[SessionAddress, str],
        body: str,
        terminal: Optional[str] = None,
        open_terminal: bool = True,
        cancel: Optional[threading.Event] = None,
    ) -> ExecutionReport:
        """Run the full ensure-and-deliver sequence for one body.

        Args:
            address: Parsed address, or a raw "session[:window]" spec
            body: Multi-line text to type into the window
            terminal: Terminal emulator to open for a new session
            open_terminal: Set False to never open a terminal
            cancel: Event that aborts the window readiness wait

        Raises:
            TmuxNotFoundError: tmux is not installed
            WindowTimeoutError: the window never became visible
            WaitCancelledError: ``cancel`` was set during the wait
        """
        if isinstance(address, str):
            address = self.address(address)
        require_tmux(self.settings.tmux_location)

        report = ExecutionReport(address=address, states=[OrchestratorState.UNCHECKED])
        log = logger.with_context(target=target(address))
        home = os.path.expanduser("~")

        session_alive = self.checker.session_alive(address)
        report.states.append(OrchestratorState.SESSION_CHECKED)
        window_alive = self.checker.window_alive(address)
        report.states.append(OrchestratorState.WINDOW_CHECKED)

        if not session_alive:
            log.info("Creating session")
            self.client.new_session(address, home)
            report.session_created = True
            report.states.append(OrchestratorState.SESSION_CREATED)
            # new-session is not waited on; later commands need the session
            self._wait(lambda: self.checker.session_alive(address),
                       address.session_name, cancel)
            # The first window may already be the one we want
            window_alive = self.checker.window_alive(address)

        if not window_alive:
            log.info("Creating window")
            self.client.new_window(address, home)
            report.window_created = True
            report.states.append(OrchestratorState.WINDOW_CREATED)

        if not session_alive and open_terminal and not address.socket_path:
            if launch_terminal(self.client, address, terminal) is not None:
                report.terminal_launched = True
                report.states.append(OrchestratorState.TERMINAL_LAUNCHED)

        wait_for_window(
            self.checker,
            address,
            timeout=self.settings.window_timeout,
            poll_interval=self.settings.poll_interval,
            max_poll_interval=self.settings.max_poll_interval,
            cancel=cancel,
        )
        report.states.append(OrchestratorState.WINDOW_READY)

        self.disable_renaming(address)
        report.states.append(OrchestratorState.RENAMING_DISABLED)

        lines = split_body(body)
        report.lines = len(lines)
        report.states.append(OrchestratorState.DELIVERING_BODY)
        outcome = self.delivery.send(address, lines)
        report.delivery = outcome.result
        report.failed_lines = outcome.failed
        report.states.append(OrchestratorState.DONE)
        log.debug("Done", lines=report.lines, failed=report.failed_lines,
                  delivery=report.delivery.value)
        return report

    def disable_renaming(self, address: SessionAddress) -> None:
        """Stop tmux from renaming the window after its running command."""
        self.client.set_window_option(address, "allow-rename", "off")
        self.client.set_window_option(address, "automatic-rename", "off")

    def _wait(self, predicate: Callable[[], bool], what: str,
              cancel: Optional[threading.Event]) -> None:
        poll_until(
            predicate,
            what,
            timeout=self.settings.window_timeout,
            poll_interval=self.settings.poll_interval,
            max_poll_interval=self.settings.max_poll_interval,
            cancel=cancel,
        )
