"""Background solving over a request / response message contract.

Request::

    {"state": [1, 2, 3, 4, 5, 6, 7, 0, 8], "algorithm": "backtracking"}

Response::

    {"status": "done", "path": [{"state": [...], "movedTile": 8, "direction": "Right"}, ...]}
    {"status": "done", "path": None, "message": "No solution found.", "nodesSearched": 181440}
    {"status": "error", "message": "..."}
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any

from loguru import logger

from eightpuzzle.backend.engine.gamesolver import Solver
from eightpuzzle.backend.engine.gamesolver.observer import SearchObserver
from eightpuzzle.backend.models.errors import PuzzleError, WorkerFailureError
from eightpuzzle.backend.models.result import Algorithm, SolveResult, SolveStatus, Step
from eightpuzzle.config import SolverConfig

log = logger.bind(component="worker")

NO_SOLUTION_MESSAGE = "No solution found."


def error_response(message: str) -> dict[str, Any]:
    return {"status": "error", "message": message}


def handle_request(
    message: Mapping[str, Any],
    config: SolverConfig | None = None,
    observer: SearchObserver | None = None,
    cancel: threading.Event | None = None,
) -> dict[str, Any]:
    """Run one solve request and build its response.

    Bad input (``InvalidStateError``, ``UnknownAlgorithmError``, missing
    keys) becomes an error response; anything else propagates.
    """
    if not isinstance(message, Mapping) or "state" not in message:
        return error_response("Request must carry a 'state'.")

    try:
        result = Solver.solve(
            message["state"],
            message.get("algorithm", "astar"),
            config=config,
            observer=observer,
            cancel=cancel,
        )
    except PuzzleError as exc:
        return error_response(str(exc))

    if result.status is SolveStatus.CANCELLED:
        return error_response("Solve cancelled.")
    if not result.solved:
        return {
            "status": "done",
            "path": None,
            "message": NO_SOLUTION_MESSAGE,
            "nodesSearched": result.nodes_expanded,
        }
    return {
        "status": "done",
        "path": [step.to_message() for step in result.path],
        "nodesSearched": result.nodes_expanded,
    }


def result_from_response(response: Mapping[str, Any], algorithm: Algorithm | str) -> SolveResult:
    """Rebuild a ``SolveResult`` from a worker response.

    Raises ``WorkerFailureError`` for an error status.
    """
    if response.get("status") != "done":
        raise WorkerFailureError(response.get("message") or "Worker reported an error.")
    path = response.get("path")
    return SolveResult(
        status=SolveStatus.SOLVED if path else SolveStatus.NO_SOLUTION,
        algorithm=Algorithm.parse(algorithm),
        path=[Step.from_message(step) for step in path or []],
        nodes_expanded=response.get("nodesSearched", 0),
    )


class SolverWorker:
    """A single background thread that runs solve requests.

    Use as a context manager so the thread is released on every path::

        with SolverWorker() as worker:
            response = worker.submit({"state": state, "algorithm": "backtracking"}).result()
    """

    def __init__(self, config: SolverConfig | None = None, observer: SearchObserver | None = None) -> None:
        self.config = config or SolverConfig()
        self.observer = observer
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="eightpuzzle-solver")
        self._closed = False
        # One event per submitted request that has not finished yet.
        self._pending: set[threading.Event] = set()
        self._lock = threading.Lock()

    def submit(self, request: Mapping[str, Any]) -> Future[dict[str, Any]]:
        if self._closed:
            raise WorkerFailureError("Worker has been closed.")
        cancel = threading.Event()
        with self._lock:
            self._pending.add(cancel)
        return self._executor.submit(self._run, request, cancel)

    def _run(self, request: Mapping[str, Any], cancel: threading.Event) -> dict[str, Any]:
        # Exceptions escaping a solve are a crash from the caller's point of
        # view; report them as an error status instead of losing the thread.
        try:
            return handle_request(request, self.config, self.observer, cancel)
        except Exception as exc:
            log.exception("Background solve failed")
            failure = WorkerFailureError(f"Solver crashed: {exc}")
            return error_response(str(failure))
        finally:
            with self._lock:
                self._pending.discard(cancel)

    def cancel(self) -> None:
        """Stop the running solve and any queued ones; later submissions run normally."""
        with self._lock:
            for event in self._pending:
                event.set()

    def close(self, wait: bool = True) -> None:
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait, cancel_futures=True)
        log.debug("Worker shut down")

    def __enter__(self) -> SolverWorker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()
        self.close()


def run_in_background(
    request: Mapping[str, Any],
    config: SolverConfig | None = None,
    timeout: float | None = None,
    observer: SearchObserver | None = None,
) -> dict[str, Any]:
    """Solve *request* on a fresh worker and return its terminal response.

    The worker is torn down whether the solve succeeds, fails or times out.
    """
    config = config or SolverConfig()
    if timeout is None:
        timeout = config.background_timeout

    worker = SolverWorker(config, observer)
    try:
        future = worker.submit(request)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError:
            log.warning("Background solve timed out after {}s", timeout)
            worker.cancel()
            return error_response(f"Solve timed out after {timeout}s.")
    finally:
        worker.cancel()
        worker.close()
