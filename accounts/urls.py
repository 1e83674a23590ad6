from django.urls import path

from .views import home, home_student, home_teacher, login_view, logout_view

app_name = "accounts"

urlpatterns = [
    path("login/", login_view, name="login"),
    path("logout/", logout_view, name="logout"),
    path("home/", home, name="home"),
    path("home/teacher/", home_teacher, name="home-teacher"),
    path("home/student/", home_student, name="home-student"),
]
