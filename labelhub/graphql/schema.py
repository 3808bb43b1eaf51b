import strawberry
from apps.analytics.graphql.queries import AnalyticsQueries
from apps.royalties.graphql.queries import RoyaltyQueries
from apps.royalties.graphql.mutations import RoyaltyMutations
from apps.distribution.graphql.mutations import DistributionMutations


@strawberry.type
class Query(AnalyticsQueries, RoyaltyQueries):
    pass


@strawberry.type
class Mutation(RoyaltyMutations, DistributionMutations):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)
