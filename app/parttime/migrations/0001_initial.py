from __future__ import annotations

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Parttime",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=100)),
                ("type", models.CharField(db_index=True, max_length=50)),
                ("salary", models.CharField(max_length=100)),
                ("worktime", models.CharField(max_length=200)),
                ("location", models.CharField(max_length=200)),
                ("description", models.TextField(max_length=2000)),
                ("contact", models.CharField(max_length=100)),
                (
                    "contact_method",
                    models.CharField(
                        choices=[
                            ("phone", "手机"),
                            ("qq", "QQ"),
                            ("wechat", "微信"),
                            ("other", "其他"),
                        ],
                        default="other",
                        help_text="contact 에서 파생된 연락 수단",
                        max_length=10,
                    ),
                ),
                (
                    "requirements",
                    models.CharField(blank=True, max_length=200, null=True),
                ),
                (
                    "gender",
                    models.CharField(
                        choices=[("male", "男"), ("female", "女"), ("any", "不限")],
                        db_index=True,
                        default="any",
                        help_text="requirements 에서 파생된 성별 조건",
                        max_length=10,
                    ),
                ),
                ("tags", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "parttime",
                "ordering": ["-created_at"],
            },
        ),
    ]
