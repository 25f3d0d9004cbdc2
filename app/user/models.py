from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    class Role(models.TextChoices):
        USER = "USER", "普通用户"
        ADMIN = "ADMIN", "管理员"

    role = models.CharField(max_length=10, choices=Role.choices, default=Role.USER)

    @property
    def is_portal_admin(self) -> bool:
        return self.role == self.Role.ADMIN or self.is_staff
