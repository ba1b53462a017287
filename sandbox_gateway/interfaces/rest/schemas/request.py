"""
REST API request schemas
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RunCodeRequest(BaseModel):
    """
    Run code request

    Fields are untyped here. RunCodeCommand does the type and blank checks,
    and its InvalidInputError maps to a 400 rather than FastAPI's 422.
    """
    code: Any = Field(None, description="Source code, executed as a single file")
    language: Any = Field(None, description="Language id, e.g. python, cpp, java")
    stdin: Any = Field("", description="Standard input passed to the program")
    time_limit_seconds: Any = Field(None, alias="timeLimit", description="Run time limit in seconds (max 3)")
    memory_limit_kb: Any = Field(None, alias="memoryLimit", description="Memory limit in KB (max 128000)")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "code": "print('hi')",
                    "language": "python",
                },
                {
                    "code": "#include <iostream>\nint main() { int n; std::cin >> n; std::cout << n * 2; }",
                    "language": "cpp",
                    "stdin": "21",
                    "timeLimit": 2,
                    "memoryLimit": 64000,
                },
            ]
        },
    )
