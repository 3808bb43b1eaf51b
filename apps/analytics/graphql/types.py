import strawberry
from decimal import Decimal
from typing import List


@strawberry.type
class TopWorkType:
    work_id: int
    title: str
    artist_name: str
    streams: int
    revenue: Decimal


@strawberry.type
class TenantAnalyticsType:
    tenant_id: int
    total_artists: int
    total_works: int
    total_streams: int
    total_revenue: Decimal
    monthly_growth: Decimal
    top_performing_works: List[TopWorkType]

    @classmethod
    def from_dict(cls, data):
        return cls(**{
            **data,
            'top_performing_works': [TopWorkType(**row) for row in data['top_performing_works']],
        })


@strawberry.type
class MonthlyStreamsType:
    month: str
    streams: int
    revenue: Decimal


@strawberry.type
class PlatformBreakdownType:
    platform: str
    streams: int
    revenue: Decimal


@strawberry.type
class ArtistAnalyticsType:
    artist_id: int
    total_works: int
    total_streams: int
    total_revenue: Decimal
    monthly_streams: List[MonthlyStreamsType]
    platform_breakdown: List[PlatformBreakdownType]

    @classmethod
    def from_dict(cls, data):
        return cls(**{
            **data,
            'monthly_streams': [MonthlyStreamsType(**row) for row in data['monthly_streams']],
            'platform_breakdown': [PlatformBreakdownType(**row) for row in data['platform_breakdown']],
        })
