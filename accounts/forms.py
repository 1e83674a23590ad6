"""Forms for the combined login/registration page."""
from __future__ import annotations

from django import forms

from .models import Role


class AuthForm(forms.Form):
    """Log in with email and password, or register by also giving a name.

    The role selector only matters for registration and defaults to
    student when absent.
    """

    email = forms.EmailField(label="Email", max_length=150)
    password = forms.CharField(label="Password", strip=False, widget=forms.PasswordInput)
    name = forms.CharField(
        label="Name (required for registration)",
        required=False,
        max_length=200,
        widget=forms.TextInput(attrs={"placeholder": "Leave blank to login only"}),
    )
    role = forms.ChoiceField(label="Role (for registration)", choices=Role.choices, required=False, initial=Role.STUDENT)

    def clean_role(self) -> str:
        return self.cleaned_data.get("role") or Role.STUDENT
