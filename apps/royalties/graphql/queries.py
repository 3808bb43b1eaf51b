import strawberry
from typing import List
from apps.royalties.splits import list_splits
from .types import RoyaltySplitType


@strawberry.type
class RoyaltyQueries:

    @strawberry.field
    def royalty_splits(self, work_id: int) -> List[RoyaltySplitType]:
        return list_splits(work_id)
