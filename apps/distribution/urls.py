from django.urls import path
from . import views

urlpatterns = [
    path('works/<int:work_id>/distribute/', views.distribute_work, name='work-distribute'),
    path('works/<int:work_id>/distribution-status/', views.distribution_status, name='work-distribution-status'),
]
