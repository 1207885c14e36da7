from django.conf import settings
from django.urls import NoReverseMatch, reverse


def resolve_base_path(name):
    """
    'admin' 같은 이름으로 기준 경로를 찾는다.
    1) settings.NAVIGATION_BASE_PATHS  2) '<name>:index' URL  3) '/<name>'
    """
    base_paths = getattr(settings, "NAVIGATION_BASE_PATHS", None) or {}
    if name in base_paths:
        return base_paths[name]

    try:
        return reverse(f"{name}:index").rstrip("/")
    except NoReverseMatch:
        return f"/{name}"
