from backend.engine.generator.generator import DEFAULT_MOVES, Scrambler

__all__ = ["DEFAULT_MOVES", "Scrambler"]
