from sandbox_gateway.domain.ports.execution_backend import IExecutionBackend

__all__ = ["IExecutionBackend"]
