import strawberry
from typing import List
from apps.catalog.graphql.types import WorkType
from apps.distribution import machine


@strawberry.type
class DistributionMutations:

    @strawberry.mutation
    def request_distribution(self, work_id: int, platforms: List[str]) -> WorkType:
        return machine.request_distribution(work_id, platforms)
