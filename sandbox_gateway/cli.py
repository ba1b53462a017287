#!/usr/bin/env python3
"""
Sandbox Gateway CLI - serve the API or run a source file through Piston
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from sandbox_gateway.application.commands.run_code import RunCodeCommand
from sandbox_gateway.application.services.code_execution_service import CodeExecutionService
from sandbox_gateway.domain.services.runtime_registry import RuntimeRegistry
from sandbox_gateway.domain.value_objects import Outcome
from sandbox_gateway.infrastructure.config.settings import get_settings
from sandbox_gateway.infrastructure.executors import ExecutorError, PistonClient
from sandbox_gateway.infrastructure.logging import configure_logging
from sandbox_gateway.shared.errors.domain import DomainError, InvalidInputError

# Exit codes
EXIT_OK = 0
EXIT_PROGRAM_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_GATEWAY_ERROR = 3

EXTENSIONS = {
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".java": "java",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".sql": "sqlite3",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="sandbox-gateway",
        description="Sandboxed code execution gateway in front of Piston",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Start the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")

    run = subparsers.add_parser("run", help="Run a source file and print the outcome")
    run.add_argument("source", help="Source file, or - to read from stdin")
    run.add_argument(
        "--language", "-l",
        help="Language id (default: guessed from the file extension)",
    )
    run.add_argument("--stdin", default="", help="Standard input for the program")
    run.add_argument(
        "--time-limit", "-t",
        type=float,
        default=settings.default_time_limit_seconds,
        help="Run time limit in seconds, clamped to 3",
    )
    run.add_argument(
        "--memory-limit", "-m",
        type=int,
        default=settings.default_memory_limit_kb,
        help="Memory limit in KB, clamped to 128000",
    )
    run.add_argument(
        "--piston-url",
        default=settings.piston_url,
        help=f"Piston base URL (default: {settings.piston_url})",
    )
    run.add_argument(
        "--format",
        choices=["pretty", "json"],
        default="pretty",
        help="Output format (default: pretty)",
    )

    return parser.parse_args(argv)


def guess_language(source: str) -> Optional[str]:
    return EXTENSIONS.get(Path(source).suffix.lower())


def format_outcome(outcome: Outcome, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(outcome.to_dict(), ensure_ascii=False)
    lines = [outcome.message]
    if outcome.output:
        lines.append("-" * 50)
        lines.append(outcome.output.rstrip("\n"))
    return "\n".join(lines)


async def run_source(args: argparse.Namespace) -> int:
    """Execute one file through the gateway service and print the outcome"""
    if args.source == "-":
        code = sys.stdin.read()
    else:
        path = Path(args.source)
        if not path.is_file():
            print(f"Error: Source file not found: {args.source}", file=sys.stderr)
            return EXIT_INVALID_INPUT
        code = path.read_text(encoding="utf-8")

    language = args.language or guess_language(args.source)
    if not language:
        print("Error: Cannot guess the language, pass --language", file=sys.stderr)
        return EXIT_INVALID_INPUT

    async with PistonClient(base_url=args.piston_url, timeout=get_settings().piston_timeout) as client:
        service = CodeExecutionService(registry=RuntimeRegistry(), backend=client)
        try:
            command = RunCodeCommand(
                code=code,
                language=language,
                stdin=args.stdin,
                time_limit_seconds=args.time_limit,
                memory_limit_kb=args.memory_limit,
            )
            outcome = await service.run_code(command)
        except InvalidInputError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return EXIT_INVALID_INPUT
        except (DomainError, ExecutorError) as e:
            print(f"Error: Failed to run code: {e}", file=sys.stderr)
            return EXIT_GATEWAY_ERROR

    print(format_outcome(outcome, args.format))
    return EXIT_OK if outcome.is_success() else EXIT_PROGRAM_FAILED


def serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "sandbox_gateway.interfaces.rest.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point"""
    args = parse_args(argv)
    configure_logging(log_level=args.log_level)

    try:
        if args.command == "serve":
            code = serve(args)
        else:
            code = asyncio.run(run_source(args))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
