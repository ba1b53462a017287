"""
Runtime registry

Maps a language id to the runtime version the gateway asks the backend for.
The table is fixed at construction time and read-only afterwards.
"""
from types import MappingProxyType
from typing import List, Mapping, Optional

from sandbox_gateway.domain.value_objects import RuntimeSpec
from sandbox_gateway.shared.errors.domain import UnsupportedLanguageError

DEFAULT_RUNTIMES: Mapping[str, RuntimeSpec] = MappingProxyType({
    "javascript": RuntimeSpec("javascript", "18.15.0"),  # node
    "typescript": RuntimeSpec("typescript", "5.0.3"),
    "python": RuntimeSpec("python", "3.10.0"),
    "cpp": RuntimeSpec("cpp", "10.2.0"),  # gcc
    "java": RuntimeSpec("java", "15.0.2"),
    "csharp": RuntimeSpec("csharp", "6.12.0"),  # mono
    "go": RuntimeSpec("go", "1.16.2"),
    "rust": RuntimeSpec("rust", "1.68.2"),
    "sqlite3": RuntimeSpec("sqlite3", "3.36.0"),
})


class RuntimeRegistry:
    """Immutable language -> runtime table"""

    def __init__(self, runtimes: Optional[Mapping[str, RuntimeSpec]] = None):
        source = DEFAULT_RUNTIMES if runtimes is None else runtimes
        self._runtimes: Mapping[str, RuntimeSpec] = MappingProxyType(
            {language.lower(): spec for language, spec in source.items()}
        )

    @property
    def runtimes(self) -> Mapping[str, RuntimeSpec]:
        return self._runtimes

    def lookup(self, language: str) -> RuntimeSpec:
        """
        Resolve a language id (case-insensitive).

        Raises:
            UnsupportedLanguageError: id not in the table
        """
        key = language.lower()
        runtime = self._runtimes.get(key)
        if runtime is None:
            raise UnsupportedLanguageError(key)
        return runtime

    def languages(self) -> List[str]:
        return list(self._runtimes)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and language.lower() in self._runtimes

    def __len__(self) -> int:
        return len(self._runtimes)
