def skip_placeholder_responses(record):
    """CallbackFilter for django.request: drop the 503s the gate serves itself."""
    request = getattr(record, "request", None)
    return not (
        getattr(record, "status_code", None) == 503
        and getattr(request, "site_mode_intercepted", False)
    )
