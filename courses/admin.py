from django.contrib import admin

from .models import Course, Enrolment


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("name", "join_code", "owner", "created_at")
    search_fields = ("name", "join_code", "owner__username")
    readonly_fields = ("join_code",)


@admin.register(Enrolment)
class EnrolmentAdmin(admin.ModelAdmin):
    list_display = ("course", "student", "created_at")
    search_fields = ("course__name", "student__username")
