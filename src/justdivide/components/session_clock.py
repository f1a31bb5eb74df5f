from dataclasses import dataclass


@dataclass(slots=True)
class SessionClock:
    # Display only; rules never read it.
    elapsed: float = 0.0
