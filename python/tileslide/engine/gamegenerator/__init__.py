from tileslide.engine.gamegenerator.generator import (
    SHUFFLE_FACTOR,
    GameGenerator,
    RandomSource,
    create_shuffled,
    neighbor_indices,
    shuffle,
)

__all__ = [
    "SHUFFLE_FACTOR",
    "GameGenerator",
    "RandomSource",
    "create_shuffled",
    "neighbor_indices",
    "shuffle",
]
