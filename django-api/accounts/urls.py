from django.urls import path

from accounts.handlers.views import LoginView, SignupView

urlpatterns = [
    path("users/signup", SignupView.as_view(), name="account-signup"),
    path("users/login", LoginView.as_view(), name="account-login"),
]
