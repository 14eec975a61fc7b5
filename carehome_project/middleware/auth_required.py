from django.conf import settings
from django.http import HttpResponseForbidden
from django.shortcuts import redirect
from django.urls import resolve, Resolver404

from accounts.models import User


class LoginRequiredMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

        self.PUBLIC_PREFIXES = (
            settings.LOGIN_URL,
            "/auth/",
            "/static/",
            "/media/",
            "/carehome/django/admin/",  # Django admin (staff only)
        )

    def __call__(self, request):
        path = request.path

        # Allow public paths
        if path.startswith(self.PUBLIC_PREFIXES):
            return self.get_response(request)

        # Block unauthenticated users
        if not request.user.is_authenticated:
            return redirect(settings.LOGIN_URL)

        # Only facility roles may use the app
        role = getattr(request.user, "login_role", None)
        if role not in User.Role.values:
            return HttpResponseForbidden("Your account has no facility role.")

        # Invalid URL → send to the reminder board
        try:
            resolve(path)
        except Resolver404:
            return redirect("reminders:list")

        return self.get_response(request)
