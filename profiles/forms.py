"""Form for the student "about me" page."""
from __future__ import annotations

from django import forms


class StudentProfileForm(forms.Form):
    """All fields are optional free text; values are stripped on save."""

    preferred_name = forms.CharField(label="Preferred Name", max_length=200, required=False)
    pronouns = forms.CharField(
        label="Pronouns",
        max_length=50,
        required=False,
        widget=forms.TextInput(attrs={"placeholder": "e.g., she/her, he/him, they/them"}),
    )
    major = forms.CharField(label="Major/Field of Study", max_length=200, required=False)
    goals = forms.CharField(label="Goals for this Course", required=False, widget=forms.Textarea)
    fun_fact = forms.CharField(label="Fun Fact About Me", required=False, widget=forms.Textarea)
    learning_needs = forms.CharField(label="Learning Needs/Accommodations", required=False, widget=forms.Textarea)
