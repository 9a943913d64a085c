from django.urls import path
from . import views

urlpatterns = [
    path('reports/fetch/', views.report_fetch, name='report-fetch'),
    path('reports/<int:report_id>/pdf/', views.report_pdf, name='report-pdf'),
]
