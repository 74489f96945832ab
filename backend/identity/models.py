from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils.translation import gettext_lazy as _


class UserManager(BaseUserManager):
    """Manager for the user model with email as the unique identifier."""

    use_in_migrations = True

    def create_user(self, email, password=None, *, organisation, name, **extra_fields):
        """Create and save a User under `organisation` with a salted password hash."""
        if not email:
            raise ValueError(_('The Email must be set'))
        email = self.normalize_email(email)
        user = self.model(email=email, organisation=organisation, name=name, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user


class User(AbstractBaseUser):
    """
    Administrative user of exactly one organisation.
    `password` holds the hash produced by the configured Django hasher.
    """
    organisation = models.ForeignKey("platformapp.Organisation", on_delete=models.CASCADE, related_name="users")
    name = models.CharField(_('name'), max_length=150)
    email = models.EmailField(_('email address'), unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    EMAIL_FIELD = 'email'
    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    def __str__(self):
        return self.email
