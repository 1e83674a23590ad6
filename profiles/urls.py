from django.urls import path

from .views import profile_edit, profile_list

app_name = "profiles"

urlpatterns = [
    path("<int:course_id>/profile/", profile_edit, name="edit"),
    path("<int:course_id>/profiles/", profile_list, name="list"),
]
