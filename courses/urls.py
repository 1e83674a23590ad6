from django.urls import path

from .views import course_create, course_join

app_name = "courses"

urlpatterns = [
    path("create/", course_create, name="create"),
    path("join/", course_join, name="join"),
]
