import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Chat",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        blank=True,
                        help_text="Group name (null for direct chats)",
                        max_length=100,
                        null=True,
                    ),
                ),
                (
                    "picture",
                    models.URLField(
                        blank=True,
                        help_text="Group picture URL",
                        max_length=500,
                        null=True,
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        help_text="Group owner (null for direct chats and read-only groups)",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="owned_chats",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "admins",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Group administrators",
                        related_name="admin_chats",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "all_time_members",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Users who ever took part in this chat",
                        related_name="all_time_member_chats",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "listing_members",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Users who currently have this chat in their list",
                        related_name="listing_member_chats",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "actual_group_members",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Users currently participating in this group",
                        related_name="actual_group_member_chats",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "chat_chat",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["name"], name="chat_chat_name_idx"),
                ],
            },
        ),
    ]
