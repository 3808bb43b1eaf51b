"""
URL configuration for the labelhub project.

REST endpoints live under /api/v1/, the GraphQL schema under /graphql/ and
the OpenAPI schema and docs under /api/schema/, /api/docs/ and /api/redoc/.
"""

from django.contrib import admin
from django.urls import path
from django.urls import include
from django.http import JsonResponse
from strawberry.django.views import GraphQLView
from labelhub.graphql.schema import schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView


def home_view(request):
    return JsonResponse({
        "message": "Labelhub Royalty & Distribution API",
        "status": "running",
        "endpoints": {
            "admin": "/admin/",
            "api": "/api/v1/",
            "graphql": "/graphql/",
            "docs": "/api/docs/",
            "schema": "/api/schema/"
        }
    })


urlpatterns = [
    path("", home_view, name="home"),
    path("admin/", admin.site.urls),
    path("api-auth/", include("rest_framework.urls")),
    path("api/v1/analytics/", include("apps.analytics.urls")),
    path("api/v1/", include("apps.tenants.urls")),
    path("api/v1/", include("apps.royalties.urls")),
    path("api/v1/", include("apps.distribution.urls")),
    path("api/v1/", include("apps.catalog.urls")),
    path('graphql/', GraphQLView.as_view(schema=schema, graphql_ide="graphiql")),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
