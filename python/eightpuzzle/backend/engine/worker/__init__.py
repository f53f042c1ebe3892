from eightpuzzle.backend.engine.worker.worker import (
    SolverWorker,
    error_response,
    handle_request,
    result_from_response,
    run_in_background,
)

__all__ = [
    "SolverWorker",
    "error_response",
    "handle_request",
    "result_from_response",
    "run_in_background",
]
