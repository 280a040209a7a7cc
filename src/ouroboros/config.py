from dataclasses import dataclass


@dataclass
class Settings:
    """Rendering and comparison knobs for the structural helpers."""
    placeholder: str = "..."
    equal_on_recursion: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.placeholder, str) or not self.placeholder:
            raise ValueError("placeholder must be a non-empty string")
