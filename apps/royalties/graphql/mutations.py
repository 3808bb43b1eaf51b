import strawberry
from decimal import Decimal
from typing import Optional
from apps.royalties.splits import add_split
from .types import RoyaltySplitType


@strawberry.input
class RoyaltySplitInput:
    work_id: int
    recipient_type: str
    recipient_id: int
    percentage: Decimal
    role_description: Optional[str] = None


@strawberry.type
class RoyaltyMutations:

    @strawberry.mutation
    def add_royalty_split(self, input: RoyaltySplitInput) -> RoyaltySplitType:
        return add_split(
            input.work_id,
            input.recipient_type,
            input.recipient_id,
            input.percentage,
            role_description=input.role_description,
        )
