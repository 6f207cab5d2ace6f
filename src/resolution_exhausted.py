"""Exception raised when no candidate file exists for a qualified name."""


class ResolutionExhausted(Exception):
    """None of the candidate paths for a qualified name exist on disk."""

    def __init__(self, qualified_name: str, candidates: list[str]) -> None:
        """Store the lookup that failed together with every path tried."""
        self.qualified_name = qualified_name
        self.candidates = list(candidates)
        super().__init__(
            f"Could not resolve {qualified_name}: "
            f"{len(self.candidates)} candidate(s) tried"
        )
