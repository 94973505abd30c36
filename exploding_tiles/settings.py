"""Game and AI settings read from environment variables."""

import os

# Hex edge length used when no explicit size is given.
BOARD_SIZE: int = int(os.environ.get('EXPLODING_TILES_BOARD_SIZE', '3'))

# Number of polls an AI player withholds its move (presentation delay).
AI_DELAY_TICKS: int = int(os.environ.get('EXPLODING_TILES_AI_DELAY_TICKS', '0'))

# Step budget for a single forward simulation inside max_fitness.
MAX_CASCADE_STEPS: int = int(
    os.environ.get('EXPLODING_TILES_MAX_CASCADE_STEPS', '1000')
)

# Tick cap after which the simulator reports a game as timed out.
MAX_TICKS_PER_GAME: int = int(
    os.environ.get('EXPLODING_TILES_MAX_TICKS_PER_GAME', '20000')
)

LOG_LEVEL: str = os.environ.get('EXPLODING_TILES_LOG_LEVEL', 'INFO')
