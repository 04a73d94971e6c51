"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_tally import GetTallyRequest, GetTallyResponse, GetTallyUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetTallyRequest",
    "GetTallyResponse",
    "GetTallyUseCase",
]
