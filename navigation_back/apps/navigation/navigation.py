import logging

from .permissions import PAGE_VIEW_ACTION, PermissionPredicate
from .resolvers import resolve_base_path
from .section import ROOT_NAME, Section

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH_NAME = "admin"
DEFAULT_MATCH_MAX_OFFSET = 5


class Navigation:
    """
    메뉴 트리의 소유 컨텍스트.

    루트 섹션을 생성하고, 섹션 find-or-create 와 현재(활성) 페이지 기록을 담당한다.
    권한 판단과 기준 경로 계산은 생성자로 주입받는다.

        navigation = Navigation(permission_predicate=UserPermissionPredicate(user))
        navigation.add_pages(settings.NAVIGATION)
        navigation.find_active_page_by_uri(request.path)
    """

    def __init__(
        self,
        permission_predicate=None,
        base_path_resolver=None,
        base_path_name=DEFAULT_BASE_PATH_NAME,
        match_max_offset=DEFAULT_MATCH_MAX_OFFSET,
    ):
        self.permission_predicate = permission_predicate or PermissionPredicate()
        self.base_path_resolver = base_path_resolver or resolve_base_path
        self.base_path_name = base_path_name
        self.match_max_offset = match_max_offset
        self.current_page = None
        self.root = Section.factory(self, {"name": ROOT_NAME})

    def add_pages(self, descriptors):
        self.root.add_pages(descriptors)
        return self

    def find_section_or_create(self, name, parent=None, attributes=None):
        if parent is None:
            parent = self.root

        section = parent.find_section(name)
        if section is None:
            section = Section.factory(self, {**(attributes or {}), "name": name})
            parent.add_section(section, section.priority)
            logger.debug(f"Navigation section created: {name} (parent={parent.name})")

        return section

    def set_current_page(self, page):
        self.current_page = page
        logger.info(f"Navigation current page: {page.name} {page.url}")
        return self

    def find_active_page_by_uri(self, uri):
        return self.root.find_active_page_by_uri(uri)

    def find_section(self, name):
        return self.root.find_section(name)

    def find_page_by_uri(self, uri):
        return self.root.find_page_by_uri(uri)

    def denies(self, page):
        return self.permission_predicate.denies(PAGE_VIEW_ACTION, page)

    def resolve_base_path(self, name):
        return self.base_path_resolver(name)

    def breadcrumbs(self):
        # 현재 페이지 → 상위 섹션 순으로 올라간 뒤 뒤집음 (root 제외)
        items = []
        item = self.current_page
        while item is not None:
            if not (item.is_container() and item.is_root()):
                items.append(item)
            item = item.parent_section
        items.reverse()
        return items
