import weakref

from django.utils.translation import gettext


# 메뉴 항목 공통 속성 (name, icon, priority, url + 임의 속성)
class Item:
    DEFAULT_PRIORITY = 1

    def __init__(self, data=None):
        self._attributes = {}
        self._parent_section = None
        self.active = False
        self.set_attribute(data or {})

    def set_attribute(self, name, value=None):
        """
        set_attribute("icon", "mdi-home") 또는
        set_attribute({"name": "users", "url": "/admin/users"})
        """
        if isinstance(name, dict):
            for key, item_value in name.items():
                self._attributes[key] = item_value
        else:
            self._attributes[name] = value
        return self

    def get_attribute(self, name, default=None):
        return self._attributes.get(name, default)

    def has_attribute(self, name):
        return self._attributes.get(name) is not None

    @property
    def name(self):
        return self.get_attribute("name")

    @property
    def key(self):
        return self.name

    @property
    def label(self):
        # 명시적 label 만 번역, 미지정 시 name 그대로
        text = self.get_attribute("label")
        if text:
            return gettext(text)
        return self.name or ""

    @property
    def icon(self):
        return self.get_attribute("icon")

    @icon.setter
    def icon(self, value):
        self.set_attribute("icon", value)

    def set_icon(self, value):
        self.icon = value
        return self

    @property
    def priority(self):
        if not self.has_attribute("priority"):
            return self.DEFAULT_PRIORITY
        return int(self.get_attribute("priority"))

    @property
    def url(self):
        return self.get_attribute("url")

    @property
    def permissions(self):
        permissions = self.get_attribute("permissions")
        if not permissions:
            return set()
        if isinstance(permissions, str):
            return {permissions}
        return set(permissions)

    # 부모 섹션은 weakref로만 참조 (소유권은 부모 쪽)
    @property
    def parent_section(self):
        if self._parent_section is None:
            return None
        return self._parent_section()

    def set_parent_section(self, section):
        self._parent_section = weakref.ref(section) if section is not None else None
        return self

    def is_active(self):
        return self.active

    def set_status(self, status=True):
        # 활성 항목을 포함한 상위 섹션도 함께 활성화
        self.active = bool(status)
        parent = self.parent_section
        if parent is not None:
            parent.set_status(status)
        return self

    def is_container(self):
        return False

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r}>"
