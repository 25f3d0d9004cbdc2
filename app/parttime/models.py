import uuid

from django.db import models


class Parttime(models.Model):
    """
    아르바이트(兼职) 공고

    contact_method / gender 는 contact / requirements 에서 파생된 값으로,
    ParttimeService 가 저장 시점에 다시 계산합니다.
    """

    class ContactMethod(models.TextChoices):
        PHONE = "phone", "手机"
        QQ = "qq", "QQ"
        WECHAT = "wechat", "微信"
        OTHER = "other", "其他"

    class Gender(models.TextChoices):
        MALE = "male", "男"
        FEMALE = "female", "女"
        ANY = "any", "不限"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    type = models.CharField(max_length=50, db_index=True)
    salary = models.CharField(max_length=100)
    worktime = models.CharField(max_length=200)
    location = models.CharField(max_length=200)
    description = models.TextField(max_length=2000)
    contact = models.CharField(max_length=100)
    contact_method = models.CharField(
        max_length=10,
        choices=ContactMethod.choices,
        default=ContactMethod.OTHER,
        help_text="contact 에서 파생된 연락 수단",
    )
    requirements = models.CharField(max_length=200, null=True, blank=True)
    gender = models.CharField(
        max_length=10,
        choices=Gender.choices,
        default=Gender.ANY,
        db_index=True,
        help_text="requirements 에서 파생된 성별 조건",
    )
    tags = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "parttime"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} - {self.type} - {self.location}"
