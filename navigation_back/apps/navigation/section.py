import logging
from functools import cmp_to_key

from .items import Item
from .page import Page
from .serializers import is_section_descriptor, validate_descriptors

logger = logging.getLogger(__name__)

ROOT_NAME = "root"
SECTION_ATTRIBUTES = ("priority", "label")


def _compare_priority(a, b):
    if a.priority == b.priority:
        return 0
    return -1 if a.priority < b.priority else 1


_priority_key = cmp_to_key(_compare_priority)


def _next_free_key(mapping, priority):
    priority = int(priority)
    while priority in mapping:
        priority += 1
    return priority


def _strip_base_path(value, base_path):
    # base_path 첫 등장 위치까지 잘라냄 (없으면 원본 그대로)
    position = value.find(base_path)
    if position == -1:
        return value
    return value[position + len(base_path):]


class Section(Item):
    """
    메뉴 그룹 (컨테이너 노드).

    pages / sections 는 priority 키 → 항목 dict 이며
    삽입할 때마다 정렬 상태가 유지된다.
    """

    @classmethod
    def factory(cls, navigation, data=None):
        return cls(navigation, data)

    def __init__(self, navigation, data=None):
        super().__init__(data)
        self.navigation = navigation
        self._pages = {}
        self._sections = {}

    @property
    def id(self):
        return self.get_attribute("id")

    @property
    def pages(self):
        return self._pages

    @property
    def sections(self):
        return self._sections

    def get_pages(self):
        return self._pages

    def get_sections(self):
        return self._sections

    def is_root(self):
        return self.name == ROOT_NAME

    def is_container(self):
        return True

    # ---------- 트리 구성 ----------

    def add_pages(self, items):
        return self._add_validated_pages(validate_descriptors(items))

    def _add_validated_pages(self, items):
        for data in items:
            if is_section_descriptor(data):
                attributes = {key: data[key] for key in SECTION_ATTRIBUTES if data.get(key) is not None}
                section = self.navigation.find_section_or_create(data["name"], self, attributes)

                if data.get("icon"):
                    section.set_icon(data["icon"])

                if len(data["children"]) > 0:
                    section._add_validated_pages(data["children"])
            else:
                self.add_page(Page({k: v for k, v in data.items() if k != "children"}))

        return self

    def add_section(self, section, priority=1):
        key = _next_free_key(self._sections, priority)

        self._sections[key] = section
        section.set_parent_section(self)
        self.sort()

        return section

    def add_page(self, page, priority=1):
        if page.permissions and self.navigation.denies(page):
            logger.debug(f"Navigation page dropped (permission denied): {page.name} {page.url}")
            return self

        if page.has_attribute("priority"):
            priority = page.priority

        if page.is_container():
            self.add_section(page)
        else:
            key = _next_free_key(self._pages, priority)
            self._pages[key] = page
            page.set_parent_section(self)

        return self.sort()

    # ---------- 조회 ----------

    def find_active_page_by_uri(self, current_uri):
        found = False
        base_path = self.navigation.resolve_base_path(self.navigation.base_path_name)
        uri = _strip_base_path(current_uri, base_path)

        for page in self._pages.values():
            url = _strip_base_path(page.url or "", base_path)
            position = uri.find(url)

            # 앞부분 몇 글자 차이는 허용하는 근사 매칭 (match_max_offset)
            if url and position != -1 and position < self.navigation.match_max_offset:
                page.set_status(True)
                self.navigation.set_current_page(page)

                found = True
                break

        if not found:
            for section in self._sections.values():
                if section.find_active_page_by_uri(current_uri):
                    return True

        return found

    def find_section(self, name):
        for section in self._sections.values():
            if section.key == name:
                return section

        for section in self._sections.values():
            found = section.find_section(name)
            if found is not None:
                return found

        return None

    def find_page_by_uri(self, uri):
        for page in self._pages.values():
            if page.url == uri:
                return page

        for section in self._sections.values():
            found = section.find_page_by_uri(uri)
            if found is not None:
                return found

        return None

    # ---------- 정렬 / 순회 ----------

    def sort(self):
        self._sections = dict(
            sorted(self._sections.items(), key=lambda item: _priority_key(item[1]))
        )
        self._pages = dict(sorted(self._pages.items()))
        return self

    def cursor(self):
        return PageCursor(self)

    def count(self):
        return len(self._pages)

    def __len__(self):
        return self.count()

    def __iter__(self):
        return iter(list(self._pages.values()))

    def __contains__(self, page):
        return any(item is page for item in self._pages.values())


class PageCursor:
    """
    섹션 페이지 목록에 대한 독립 커서 (생성 시점 스냅샷 기준).

        cursor = section.cursor()
        cursor.rewind()
        while cursor.valid():
            print(cursor.key(), cursor.current())
            cursor.next()
    """

    def __init__(self, section):
        self._items = list(section.pages.items())
        self._position = 0

    def rewind(self):
        self._position = 0

    def valid(self):
        return 0 <= self._position < len(self._items)

    def key(self):
        return self._items[self._position][0] if self.valid() else None

    def current(self):
        return self._items[self._position][1] if self.valid() else None

    def next(self):
        self._position += 1

    def prev(self):
        # 실제로 한 칸 뒤로 이동
        self._position -= 1

    def __iter__(self):
        return self

    def __next__(self):
        if not self.valid():
            raise StopIteration
        page = self.current()
        self.next()
        return page
