from django.contrib import admin

from .models import StudentProfile


@admin.register(StudentProfile)
class StudentProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "course", "preferred_name", "major", "updated_at")
    search_fields = ("user__username", "preferred_name", "major", "course__name")
    list_filter = ("course",)
