from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.shortcuts import redirect
from django.urls import path, include


def root_redirect(request):
    if request.user.is_authenticated:
        return redirect("reminders:list")
    return redirect("login")


urlpatterns = [
    # ROOT
    path("", root_redirect, name="root"),

    # DJANGO ADMIN (RESIDENT / ROOM / PAYMENT RECORDS)
    path("carehome/django/admin/", admin.site.urls),

    # AUTH
    path(
        "auth/login/",
        auth_views.LoginView.as_view(template_name="accounts/login.html"),
        name="login",
    ),
    path("auth/logout/", auth_views.LogoutView.as_view(), name="logout"),

    # APPS
    path("reminders/", include("reminders.urls")),
    path("billing/", include("billing.urls")),
]

if settings.DEBUG:
    urlpatterns += static(
        settings.MEDIA_URL,
        document_root=settings.MEDIA_ROOT
    )
