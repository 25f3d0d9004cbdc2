from django.contrib import admin
from parttime.domain.contact import parse_contact
from parttime.domain.requirements import parse_gender_requirement
from parttime.models import Parttime


@admin.register(Parttime)
class ParttimeAdmin(admin.ModelAdmin):
    list_display = ["name", "type", "location", "contact_method", "gender", "created_at"]
    search_fields = ["name", "description", "location", "type"]
    list_filter = ["type", "contact_method", "gender", "created_at"]
    readonly_fields = ["contact_method", "gender"]
    ordering = ["-created_at"]
    list_per_page = 100

    def save_model(self, request, obj, form, change):
        # Admin 에서 직접 수정해도 파생 필드가 어긋나지 않도록 다시 계산
        obj.contact_method = parse_contact(obj.contact).method
        obj.gender = parse_gender_requirement(obj.requirements).gender
        super().save_model(request, obj, form, change)
