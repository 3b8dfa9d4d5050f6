from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Account holder; the profile fields must be filled in before booking."""

    name = models.CharField(max_length=120, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    phone_number = models.CharField(max_length=30, blank=True)

    def __str__(self):
        return self.name or self.email or self.username
