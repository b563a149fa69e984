"""User models for the accounts application."""

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model extending Django's AbstractUser.

    Sessions are issued by the external identity provider; the user's ID
    there is what the admin allow-list is matched against.
    """

    identity_provider_id = models.CharField(
        max_length=255,
        unique=True,
        null=True,
        blank=True,
        help_text="User ID at the identity provider (e.g. 'user_2abc...')",
    )

    class Meta:
        """Meta options for User model."""

        db_table = "users"
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self) -> str:
        """Return string representation of user."""
        return self.username
