"""Terminal host for the tileslide engine."""
