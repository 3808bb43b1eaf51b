from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import TenantViewSet, tenant_quota

router = DefaultRouter()
router.register(r'tenants', TenantViewSet, basename='tenant')

urlpatterns = [
    path('tenants/<int:tenant_id>/quota/<str:resource>/', tenant_quota, name='tenant-quota'),
    path('', include(router.urls)),
]
