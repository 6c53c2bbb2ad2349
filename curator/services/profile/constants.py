from typing import Final

# Evidence increments (added to every tag of the item the viewer acted on)
INCREMENT_LIKE: Final[float] = 0.3
INCREMENT_DOWNLOAD: Final[float] = 0.3
INCREMENT_SHARE: Final[float] = 0.0  # Logged, never scored

# Play increments by completion bucket
INCREMENT_PLAY_NEAR_COMPLETE: Final[float] = 0.5  # >85%
INCREMENT_PLAY_THREE_QUARTERS: Final[float] = 0.4  # 75%
INCREMENT_PLAY_HALF: Final[float] = 0.25  # 50%
INCREMENT_PLAY_QUARTER: Final[float] = 0.1  # 25%

PLAY_COMPLETION_INCREMENTS: Final[dict[str, float]] = {
    ">85%": INCREMENT_PLAY_NEAR_COMPLETE,
    "75%": INCREMENT_PLAY_THREE_QUARTERS,
    "50%": INCREMENT_PLAY_HALF,
    "25%": INCREMENT_PLAY_QUARTER,
}
