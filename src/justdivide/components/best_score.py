from dataclasses import dataclass


@dataclass(slots=True)
class BestScore:
    """Highest score seen; survives restarts and is persisted by BestScoreSystem."""

    value: int = 0
