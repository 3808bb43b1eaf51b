from django.urls import path
from . import views

urlpatterns = [
    path('tenants/<int:tenant_id>/', views.tenant_analytics, name='tenant_analytics'),
    path('artists/<int:artist_id>/', views.artist_analytics, name='artist_analytics'),
]
