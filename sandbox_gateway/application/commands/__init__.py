from sandbox_gateway.application.commands.run_code import RunCodeCommand

__all__ = ["RunCodeCommand"]
