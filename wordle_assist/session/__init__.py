from .manager import Active, CandidateSetManager, GameState, Solved, Unsolvable

__all__ = ["Active", "CandidateSetManager", "GameState", "Solved", "Unsolvable"]
