# Import all views to keep URLs clean
from .auth import LoginView, RegisterView, UserLogoutView
from .profile import ProfileView

__all__ = [
    # auth
    'LoginView',
    'RegisterView',
    'UserLogoutView',
    # profile
    'ProfileView',
]
