from chisel.futures.combinators import (
    answer_proposal,
    first_settled,
    gather_all,
    reduce_settled,
    rejected,
    resolved,
)

__all__ = [
    "answer_proposal",
    "first_settled",
    "gather_all",
    "reduce_settled",
    "rejected",
    "resolved",
]
