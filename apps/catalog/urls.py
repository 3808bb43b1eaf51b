from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ArtistViewSet, WorkViewSet

router = DefaultRouter()
router.register(r'artists', ArtistViewSet, basename='artist')
router.register(r'works', WorkViewSet, basename='work')

urlpatterns = [
    path('', include(router.urls)),
]
