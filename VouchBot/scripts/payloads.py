from dataclasses import dataclass

MIN_STARS = 1
MAX_STARS = 5


@dataclass(frozen=True)
class VouchInvocation:
    review: str
    stars: int
    attachment_url: str | None = None

    def __post_init__(self):
        if not MIN_STARS <= self.stars <= MAX_STARS:
            raise ValueError(f"stars must be between {MIN_STARS} and {MAX_STARS}, got {self.stars}")


@dataclass(frozen=True)
class RestoreInvocation:
    pass


Invocation = VouchInvocation | RestoreInvocation
