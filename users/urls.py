# users/urls.py
from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication URLs
    path('login/', views.LoginView.as_view(), name='login'),
    path('register/', views.RegisterView.as_view(), name='register'),
    path('logout/', views.UserLogoutView.as_view(), name='logout'),

    # Profile URLs
    path('profile/', views.ProfileView.as_view(), name='profile'),
]
