from django.conf import settings

from .navigation import DEFAULT_BASE_PATH_NAME, DEFAULT_MATCH_MAX_OFFSET, Navigation
from .permissions import UserPermissionPredicate


def get_navigation_descriptors():
    return getattr(settings, "NAVIGATION", [])


# 특정 유저에게 보이는 메뉴 트리를 만들고, 현재 URI 기준 활성 페이지를 표시
def build_navigation(user=None, current_uri=None, descriptors=None):
    navigation = Navigation(
        permission_predicate=UserPermissionPredicate(user) if user is not None else None,
        base_path_name=getattr(settings, "NAVIGATION_BASE_PATH_NAME", DEFAULT_BASE_PATH_NAME),
        match_max_offset=getattr(settings, "NAVIGATION_MATCH_MAX_OFFSET", DEFAULT_MATCH_MAX_OFFSET),
    )

    if descriptors is None:
        descriptors = get_navigation_descriptors()
    navigation.add_pages(descriptors)

    if current_uri:
        navigation.find_active_page_by_uri(current_uri)

    return navigation
