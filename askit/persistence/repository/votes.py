"""SQL expressions shared by the vote-carrying tables (questions, answers)."""

from typing import Any, Dict, Optional

from sqlalchemy import Table, cast, func
from sqlalchemy.dialects.postgresql import UUID

from askit.domain.value import UserId, VoteType


def vote_membership_values(
    table: Table, user_id: UserId, vote: Optional[VoteType]
) -> Dict[str, Any]:
    """Build the SET clause that moves one user into exactly one vote set.

    The user is removed from both arrays and appended to the target array in
    the same UPDATE, so two users voting at once never overwrite each other.
    """
    voter = cast(user_id, UUID)
    array_type = table.c.upvoters.type

    upvoters = func.array_remove(table.c.upvoters, voter, type_=array_type)
    downvoters = func.array_remove(table.c.downvoters, voter, type_=array_type)

    if vote == VoteType.UPVOTE:
        upvoters = func.array_append(upvoters, voter, type_=array_type)
    elif vote == VoteType.DOWNVOTE:
        downvoters = func.array_append(downvoters, voter, type_=array_type)

    return {"upvoters": upvoters, "downvoters": downvoters}


def vote_count_expression(table: Table):
    """Net vote count computed from the two arrays."""
    return func.cardinality(table.c.upvoters) - func.cardinality(table.c.downvoters)


def vote_total_expression(table: Table):
    """Number of votes in either direction."""
    return func.cardinality(table.c.upvoters) + func.cardinality(table.c.downvoters)
