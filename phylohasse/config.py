from dataclasses import dataclass

SINGLE_PASS = "single_pass"
FULL = "full"
REDUCTION_MODES = (SINGLE_PASS, FULL)


@dataclass
class HasseConfig:
    """Configuration for Hasse diagram construction."""

    reduction: str = SINGLE_PASS
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.reduction not in REDUCTION_MODES:
            raise ValueError(
                f"Unknown reduction mode {self.reduction!r}; "
                f"expected one of {', '.join(REDUCTION_MODES)}"
            )
