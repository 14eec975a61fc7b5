from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Facility staff account.

    Both roles operate the application day to day; only a
    super admin may invite or remove other admins.
    """

    class Role(models.TextChoices):
        SUPER_ADMIN = "super_admin", "Super Admin"
        ADMIN = "admin", "Admin"

    login_role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.ADMIN,
        db_index=True,
    )

    contact_number = models.CharField(max_length=20, blank=True)

    @property
    def is_super_admin(self):
        return self.login_role == self.Role.SUPER_ADMIN

    def __str__(self):
        full = self.get_full_name()
        return f"{full} ({self.username})" if full else self.username
