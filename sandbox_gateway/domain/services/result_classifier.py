"""
Result classifier

Turns a raw backend result into exactly one Outcome. A SIGKILL is only
reported as a suspected memory-limit violation; the backend never confirms
the cause.
"""
from sandbox_gateway.domain.value_objects import BackendResult, Outcome
from sandbox_gateway.shared.errors.domain import MalformedBackendResponseError

# Piston stage status tokens
STATUS_TIMEOUT = "TO"
SIGNAL_KILL = "SIGKILL"


def classify(result: BackendResult) -> Outcome:
    """
    Classify a backend result.

    Order: failed compile stage, then run stage, otherwise the response is a
    protocol violation.

    Raises:
        MalformedBackendResponseError: neither compile nor run is present
    """
    compile_stage = result.compile
    # a missing exit code means the compiler was killed, which is a failure too
    if compile_stage is not None and compile_stage.code != 0:
        if compile_stage.status == STATUS_TIMEOUT:
            return Outcome.compile_timeout()
        return Outcome.compile_error(compile_stage.stderr or compile_stage.message)

    run_stage = result.run
    if run_stage is not None:
        if run_stage.code == 0:
            return Outcome.success(run_stage.stdout)
        if run_stage.status == STATUS_TIMEOUT:
            return Outcome.execution_timeout()
        if run_stage.signal == SIGNAL_KILL:
            return Outcome.process_killed()
        return Outcome.runtime_error(run_stage.stderr or run_stage.message)

    raise MalformedBackendResponseError()
