# core/urls.py
from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    path('', views.HomeView.as_view(), name='home'),
    path('it-solutions/', views.ITSolutionsView.as_view(), name='it_solutions'),
    path('dashboard/', views.AdminDashboardView.as_view(), name='dashboard'),
    path('dashboard/settings/', views.SiteSettingsUpdateView.as_view(), name='site_settings'),
]
