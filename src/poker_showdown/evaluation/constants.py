"""Constants for poker hand evaluation."""

# Every evaluated hand holds exactly this many cards
CARDS_IN_HAND = 5

# Weight applied to each kicker position, most significant first
KICKER_POSITION_WEIGHTS = (1.0, 0.1, 0.01, 0.001, 0.0001)

# Kicker contributions are summed as integers in units of the smallest weight
KICKER_SCALE = 10_000
KICKER_POSITION_MULTIPLIERS = tuple(
    round(weight * KICKER_SCALE) for weight in KICKER_POSITION_WEIGHTS
)

# Rank value of an ace played low in a wheel (5-4-3-2-A)
LOW_ACE_VALUE = 1
