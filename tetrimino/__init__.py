"""A falling-block puzzle engine: the board, the seven pieces and the game rules."""

__version__ = "0.1.0"
__all__ = ["board", "tetromino", "game"]