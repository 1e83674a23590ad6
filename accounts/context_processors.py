def identity(request):
    """Expose the session identity to templates."""
    return {"identity": getattr(request, "identity", None)}
