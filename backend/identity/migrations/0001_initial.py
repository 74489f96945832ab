import django.db.models.deletion
from django.db import migrations, models

import identity.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("platformapp", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("name", models.CharField(max_length=150, verbose_name="name")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="email address")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "organisation",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="users",
                        to="platformapp.organisation",
                    ),
                ),
            ],
            options={
                "abstract": False,
            },
            managers=[
                ("objects", identity.models.UserManager()),
            ],
        ),
    ]
