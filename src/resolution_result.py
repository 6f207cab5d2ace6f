"""Data models for class-file lookup outcomes."""

from dataclasses import dataclass, field


@dataclass
class ResolutionResult:
    """Represents the outcome of looking up the source file of a qualified name."""

    qualified_name: str
    candidates: list[str] = field(default_factory=list)
    loaded_path: str | None = None
    skipped: bool = False  # needs_load declined the lookup

    @property
    def found(self) -> bool:
        """Whether one of the candidates existed."""
        return self.loaded_path is not None
