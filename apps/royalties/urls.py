from django.urls import path
from . import views

urlpatterns = [
    path('works/<int:work_id>/splits/', views.work_splits, name='work-splits'),
    path('royalty-reports/', views.royalty_reports, name='royalty-reports'),
    path('royalty-reports/<int:report_id>/', views.royalty_report_detail, name='royalty-report-detail'),
]
