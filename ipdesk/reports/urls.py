from django.urls import path
from . import views

urlpatterns = [
    path('reports/dashboard/', views.dashboard_summary, name='dashboard-summary'),
    path('reports/analytics/', views.analytics_summary, name='analytics-summary'),
]
