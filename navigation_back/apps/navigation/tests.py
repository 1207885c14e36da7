import json
from io import StringIO

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser, Permission
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, TestCase, override_settings
from django.utils import translation

from utils.exceptions import InvalidDescriptorException
from .navigation import Navigation
from .page import Page
from .permissions import PAGE_VIEW_ACTION, PermissionCodePredicate, PermissionPredicate, UserPermissionPredicate
from .resolvers import resolve_base_path
from .section import Section
from .serializers import serialize_navigation, validate_descriptor
from .services import build_navigation


class DenyAllPredicate(PermissionPredicate):
    def __init__(self):
        self.calls = []

    def denies(self, action, page):
        self.calls.append((action, page))
        return True


def make_navigation(**kwargs):
    kwargs.setdefault("base_path_resolver", lambda name: "/admin")
    return Navigation(**kwargs)


class SectionInsertTest(SimpleTestCase):
    """페이지/섹션 삽입 및 priority 충돌 처리"""

    def setUp(self):
        self.navigation = make_navigation()
        self.root = self.navigation.root

    def test_root_section(self):
        """루트 섹션 판별"""
        self.assertTrue(self.root.is_root())
        system = Section.factory(self.navigation, {"name": "system", "id": "sys"})
        self.assertFalse(system.is_root())
        self.assertEqual(system.id, "sys")
        self.assertIsNone(self.root.parent_section)

    def test_same_priority_pages_get_next_free_keys(self):
        """같은 priority로 N개 삽입 시 N개의 연속 키, 삽입 순서 유지"""
        pages = [Page({"name": f"p{i}", "url": f"/p{i}"}) for i in range(3)]
        for page in pages:
            self.root.add_page(page, priority=5)

        self.assertEqual(list(self.root.pages.keys()), [5, 6, 7])
        self.assertEqual(list(self.root.pages.values()), pages)

    def test_collision_fills_first_gap(self):
        """충돌 시 불필요하게 빈 키를 건너뛰지 않음"""
        first = Page({"name": "first"})
        third = Page({"name": "third"})
        second = Page({"name": "second"})
        self.root.add_page(first, 1)
        self.root.add_page(third, 3)
        self.root.add_page(second, 1)

        self.assertEqual(list(self.root.pages.keys()), [1, 2, 3])
        self.assertIs(self.root.pages[2], second)

    def test_page_priority_attribute_overrides_argument(self):
        """페이지 자체의 priority 속성이 인자보다 우선"""
        page = Page({"name": "users", "priority": 7})
        self.root.add_page(page, priority=1)

        self.assertIs(self.root.pages[7], page)

    def test_add_page_returns_section_and_sets_parent(self):
        """add_page는 섹션을 반환하고 부모를 연결"""
        page = Page({"name": "users", "url": "/admin/users"})
        result = self.root.add_page(page)

        self.assertIs(result, self.root)
        self.assertIs(page.parent_section, self.root)
        self.assertIn(page, self.root)

    def test_pages_keys_sorted_after_insert(self):
        """삽입 후 pages 키는 오름차순"""
        for priority in (30, 10, 20, 10):
            self.root.add_page(Page({"name": f"p{priority}"}), priority)

        keys = list(self.root.get_pages().keys())
        self.assertEqual(keys, sorted(keys))
        self.assertEqual(len(set(keys)), len(keys))

    def test_add_section_returns_added_section(self):
        """add_section은 추가된 섹션을 반환"""
        section = Section(self.navigation, {"name": "system"})
        result = self.root.add_section(section)

        self.assertIs(result, section)
        self.assertIs(section.parent_section, self.root)

    def test_sections_sorted_by_priority(self):
        """섹션은 priority 속성 기준 정렬 (동일 priority는 삽입 순서)"""
        late = Section(self.navigation, {"name": "late", "priority": 10})
        early = Section(self.navigation, {"name": "early", "priority": 2})
        first_default = Section(self.navigation, {"name": "a"})
        second_default = Section(self.navigation, {"name": "b"})
        for section in (late, early, first_default, second_default):
            self.root.add_section(section)

        ordered = list(self.root.get_sections().values())
        self.assertEqual(ordered, [first_default, second_default, early, late])
        priorities = [section.priority for section in ordered]
        self.assertEqual(priorities, sorted(priorities))

    def test_sections_and_pages_use_independent_keys(self):
        """섹션과 페이지는 별도의 키 공간"""
        self.root.add_page(Page({"name": "page"}), 1)
        self.root.add_section(Section(self.navigation, {"name": "section"}), 1)

        self.assertEqual(list(self.root.pages.keys()), [1])
        self.assertEqual(list(self.root.sections.keys()), [1])

    def test_add_page_with_section_delegates(self):
        """add_page에 Section을 넘기면 하위 섹션으로 추가"""
        section = Section(self.navigation, {"name": "system"})
        result = self.root.add_page(section)

        self.assertIs(result, self.root)
        self.assertEqual(self.root.count(), 0)
        self.assertIs(self.root.find_section("system"), section)

    def test_section_via_add_page_uses_default_slot(self):
        """add_page로 넘어온 섹션은 기본 키(1)부터 배치, 정렬은 priority 속성 기준"""
        late = Section(self.navigation, {"name": "late", "priority": 7})
        early = Section(self.navigation, {"name": "early", "priority": 3})
        self.root.add_page(late)
        self.root.add_page(early)

        self.assertEqual(sorted(self.root.sections.keys()), [1, 2])
        self.assertIs(self.root.sections[1], late)
        self.assertEqual(list(self.root.sections.values()), [early, late])

    def test_sort_is_idempotent(self):
        """sort는 여러 번 호출해도 동일"""
        self.root.add_page(Page({"name": "b"}), 2)
        self.root.add_page(Page({"name": "a"}), 1)
        before = list(self.root.pages.items())

        self.root.sort().sort()
        self.assertEqual(list(self.root.pages.items()), before)


class SectionPermissionTest(SimpleTestCase):
    """권한 필터"""

    def test_denied_page_is_dropped(self):
        """권한 거부 시 페이지는 조용히 제외"""
        predicate = DenyAllPredicate()
        navigation = make_navigation(permission_predicate=predicate)
        page = Page({"name": "users", "url": "/admin/users", "permissions": ["auth.view_user"]})

        result = navigation.root.add_page(page)

        self.assertIs(result, navigation.root)
        self.assertNotIn(page, list(navigation.root.get_pages().values()))
        self.assertEqual(predicate.calls, [(PAGE_VIEW_ACTION, page)])

    def test_page_without_permissions_skips_check(self):
        """권한이 없는 페이지는 predicate를 호출하지 않음"""
        predicate = DenyAllPredicate()
        navigation = make_navigation(permission_predicate=predicate)
        navigation.root.add_page(Page({"name": "dashboard", "url": "/admin"}))

        self.assertEqual(navigation.root.count(), 1)
        self.assertEqual(predicate.calls, [])

    def test_permission_code_predicate(self):
        """권한 코드 목록 기반 필터"""
        navigation = make_navigation(permission_predicate=PermissionCodePredicate(["VIEW_PATIENT_LIST"]))
        navigation.add_pages([
            {"name": "patients", "url": "/admin/patients", "permissions": "VIEW_PATIENT_LIST"},
            {"name": "audit", "url": "/admin/audit", "permissions": ["VIEW_AUDIT", "VIEW_PATIENT_LIST"]},
        ])

        self.assertEqual([page.name for page in navigation.root], ["patients"])


class AddPagesTest(SimpleTestCase):
    """descriptor 목록으로 트리 구성"""

    def setUp(self):
        self.navigation = make_navigation()

    def test_nested_descriptor_creates_section(self):
        """children이 있는 descriptor는 섹션이 됨"""
        self.navigation.add_pages([{"name": "a", "children": [{"name": "b", "url": "/x"}]}])

        section = self.navigation.find_section("a")
        self.assertIsNotNone(section)
        self.assertEqual(section.count(), 1)
        self.assertEqual([page.url for page in section], ["/x"])

    def test_same_section_name_merges(self):
        """같은 이름의 섹션은 하나로 병합"""
        descriptors = [{"name": "a", "children": [{"name": "b", "url": "/x"}]}]
        self.navigation.add_pages(descriptors)
        self.navigation.add_pages([{"name": "a", "icon": "mdi-cog", "children": [{"name": "c", "url": "/y"}]}])

        self.assertEqual(len(self.navigation.root.sections), 1)
        section = self.navigation.find_section("a")
        self.assertEqual(section.icon, "mdi-cog")
        self.assertEqual([page.url for page in section], ["/x", "/y"])

    def test_empty_children_creates_empty_section(self):
        """children가 빈 목록이면 빈 섹션만 생성"""
        self.navigation.add_pages([{"name": "empty", "children": []}])

        section = self.navigation.find_section("empty")
        self.assertIsNotNone(section)
        self.assertEqual(len(section), 0)

    def test_deep_tree_and_section_priority(self):
        """여러 단계 중첩과 섹션 priority"""
        self.navigation.add_pages([
            {"name": "reports", "priority": 20, "children": [
                {"name": "monthly", "children": [{"name": "summary", "url": "/admin/reports/monthly"}]},
            ]},
            {"name": "patients", "priority": 10, "children": [{"name": "list", "url": "/admin/patients"}]},
        ])

        names = [section.name for section in self.navigation.root.sections.values()]
        self.assertEqual(names, ["patients", "reports"])
        monthly = self.navigation.find_section("monthly")
        self.assertIs(monthly.parent_section, self.navigation.find_section("reports"))

    def test_count_only_direct_pages(self):
        """count는 직속 페이지만 셈"""
        self.navigation.add_pages([
            {"name": "dashboard", "url": "/admin"},
            {"name": "system", "children": [
                {"name": "users", "url": "/admin/users"},
                {"name": "groups", "url": "/admin/groups"},
            ]},
        ])

        self.assertEqual(self.navigation.root.count(), 1)
        self.assertEqual(len(self.navigation.find_section("system")), 2)

    def test_extra_attributes_are_kept(self):
        """검증 대상이 아닌 속성도 페이지에 유지"""
        self.navigation.add_pages([{"name": "users", "url": "/admin/users", "badge": 3}])

        page = self.navigation.find_page_by_uri("/admin/users")
        self.assertEqual(page.get_attribute("badge"), 3)

    def test_section_without_name_is_rejected(self):
        """이름 없는 섹션 descriptor는 계약 위반"""
        with self.assertRaises(InvalidDescriptorException) as ctx:
            self.navigation.add_pages([{"children": [{"name": "b", "url": "/x"}]}])

        self.assertEqual(ctx.exception.field, "name")
        self.assertEqual(ctx.exception.get_full_details()["error"]["code"], "NAV_101")

    def test_children_not_a_list_is_rejected(self):
        """children가 목록이 아니면 계약 위반"""
        with self.assertRaises(InvalidDescriptorException) as ctx:
            self.navigation.add_pages([{"name": "a", "children": "oops"}])

        self.assertEqual(ctx.exception.field, "children")

    def test_invalid_nested_descriptor_leaves_tree_unchanged(self):
        """하위 descriptor 오류 시 트리는 변경되지 않음"""
        self.navigation.add_pages([{"name": "dashboard", "url": "/admin"}])

        with self.assertRaises(InvalidDescriptorException) as ctx:
            self.navigation.add_pages([
                {"name": "top", "url": "/top"},
                {"name": "a", "children": [
                    {"name": "ok", "url": "/x"},
                    {"name": "bad", "children": "oops"},
                ]},
            ])

        self.assertEqual(ctx.exception.field, "children")
        self.assertEqual(self.navigation.root.sections, {})
        self.assertEqual([page.name for page in self.navigation.root], ["dashboard"])
        self.assertIsNone(self.navigation.find_page_by_uri("/x"))
        self.assertIsNone(self.navigation.find_page_by_uri("/top"))

    def test_descriptor_input_is_not_mutated(self):
        """검증 과정에서 입력 descriptor는 변경되지 않음"""
        children = [{"name": "b", "url": "/x", "priority": "2"}]
        self.navigation.add_pages([{"name": "a", "children": children}])

        self.assertEqual(children, [{"name": "b", "url": "/x", "priority": "2"}])
        self.assertEqual(self.navigation.find_section("a").pages[2].url, "/x")

    def test_non_mapping_descriptor_is_rejected(self):
        """dict가 아닌 descriptor는 계약 위반"""
        with self.assertRaises(InvalidDescriptorException) as ctx:
            self.navigation.add_pages(["users"])

        self.assertIsNone(ctx.exception.field)

    def test_invalid_priority_is_rejected(self):
        """priority는 정수여야 함"""
        with self.assertRaises(InvalidDescriptorException):
            self.navigation.add_pages([{"name": "users", "url": "/admin/users", "priority": "high"}])

    def test_validate_descriptor_normalizes_values(self):
        """descriptor 정규화"""
        data = validate_descriptor({"name": "users", "priority": "3", "permissions": "auth.view_user"})

        self.assertEqual(data["priority"], 3)
        self.assertEqual(data["permissions"], ["auth.view_user"])


class ItemLabelTest(SimpleTestCase):
    """메뉴 라벨"""

    def test_name_is_not_translated(self):
        """label 미지정 시 name 그대로 (번역 카탈로그와 무관)"""
        with translation.override("ko"):
            self.assertEqual(Page({"name": "users"}).label, "users")
            self.assertEqual(Section(make_navigation(), {"name": "groups"}).label, "groups")

    def test_explicit_label(self):
        """명시적 label 사용"""
        with translation.override("en"):
            self.assertEqual(Page({"name": "users", "label": "Staff accounts"}).label, "Staff accounts")

    def test_missing_name(self):
        """name도 label도 없으면 빈 문자열"""
        self.assertEqual(Page({"url": "/x"}).label, "")


class LookupTest(SimpleTestCase):
    """섹션/페이지 조회"""

    def setUp(self):
        self.navigation = make_navigation()
        self.navigation.add_pages([
            {"name": "dashboard", "url": "/admin"},
            {"name": "a", "children": [{"name": "b", "url": "/x"}]},
        ])

    def test_find_page_by_uri(self):
        """URL 일치 페이지 조회"""
        page = self.navigation.find_page_by_uri("/x")

        self.assertIsNotNone(page)
        self.assertEqual(page.url, "/x")
        self.assertIsNone(self.navigation.find_page_by_uri("/nope"))

    def test_found_page_is_mutable_in_place(self):
        """조회한 페이지는 트리 안의 같은 객체"""
        self.navigation.find_page_by_uri("/x").set_status(True)

        section = self.navigation.find_section("a")
        self.assertTrue(list(section)[0].is_active())

    def test_find_section_prefers_direct_child(self):
        """직속 자식 이름 매칭이 하위 탐색보다 우선"""
        root = self.navigation.root
        nested_parent = self.navigation.find_section("a")
        nested = nested_parent.add_section(Section(self.navigation, {"name": "target"}))
        direct = root.add_section(Section(self.navigation, {"name": "target", "priority": 50}))

        self.assertIs(root.find_section("target"), direct)
        self.assertIs(nested_parent.find_section("target"), nested)
        self.assertIsNone(root.find_section("missing"))

    def test_find_section_or_create_under_parent(self):
        """find-or-create는 대상 부모 아래에서만 검색"""
        parent_a = self.navigation.find_section("a")
        parent_c = self.navigation.find_section_or_create("c")
        child_a = self.navigation.find_section_or_create("child", parent_a)
        child_c = self.navigation.find_section_or_create("child", parent_c)

        self.assertIsNot(child_a, child_c)
        self.assertIs(self.navigation.find_section_or_create("child", parent_a), child_a)
        self.assertIs(parent_c.parent_section, self.navigation.root)


class ActivePageTest(SimpleTestCase):
    """현재 URI 기준 활성 페이지 판단"""

    def setUp(self):
        self.navigation = make_navigation()
        self.navigation.add_pages([
            {"name": "system", "children": [
                {"name": "users", "url": "/admin/users"},
                {"name": "groups", "url": "/admin/groups"},
            ]},
        ])

    def test_active_page_found(self):
        """'/users' 가 '/users/5' 의 0번 위치에서 발견"""
        found = self.navigation.find_active_page_by_uri("/admin/users/5")

        page = self.navigation.find_page_by_uri("/admin/users")
        self.assertTrue(found)
        self.assertTrue(page.is_active())
        self.assertIs(self.navigation.current_page, page)
        self.assertTrue(self.navigation.find_section("system").is_active())

    def test_offset_too_far(self):
        """오프셋 5 이상이면 매칭 실패"""
        found = self.navigation.find_active_page_by_uri("/admin/other/users")

        self.assertFalse(found)
        self.assertIsNone(self.navigation.current_page)
        self.assertFalse(self.navigation.find_page_by_uri("/admin/users").is_active())

    def test_offset_boundary(self):
        """오프셋 4는 매칭, 5는 매칭 실패"""
        near = make_navigation()
        near.add_pages([{"name": "users", "url": "/admin/users"}])
        far = make_navigation()
        far.add_pages([{"name": "users", "url": "/admin/users"}])

        self.assertTrue(near.find_active_page_by_uri("/admin/abc/users"))
        self.assertFalse(far.find_active_page_by_uri("/admin/abcd/users"))
        self.assertIsNone(far.current_page)

    def test_max_offset_is_configurable(self):
        """match_max_offset 조정"""
        navigation = make_navigation(match_max_offset=10)
        navigation.add_pages([{"name": "users", "url": "/admin/users"}])

        self.assertTrue(navigation.find_active_page_by_uri("/admin/other/users"))

    def test_first_page_in_priority_order_wins(self):
        """여러 페이지가 맞으면 priority 순서상 첫 페이지"""
        navigation = make_navigation()
        navigation.add_pages([
            {"name": "detail", "url": "/admin/users/5", "priority": 2},
            {"name": "list", "url": "/admin/users", "priority": 1},
        ])

        navigation.find_active_page_by_uri("/admin/users/5")
        self.assertEqual(navigation.current_page.name, "list")
        self.assertFalse(navigation.find_page_by_uri("/admin/users/5").is_active())

    def test_direct_pages_checked_before_sections(self):
        """직속 페이지가 하위 섹션보다 먼저 검사됨"""
        self.navigation.add_pages([{"name": "users-top", "url": "/admin/users"}])

        self.navigation.find_active_page_by_uri("/admin/users")
        self.assertEqual(self.navigation.current_page.name, "users-top")

    def test_url_without_base_path(self):
        """기준 경로가 없는 URL은 그대로 비교"""
        navigation = make_navigation()
        navigation.add_pages([{"name": "reports", "url": "/reports"}])

        self.assertTrue(navigation.find_active_page_by_uri("/admin/reports"))

    def test_page_without_url_never_matches(self):
        """URL 없는 페이지는 매칭 대상 아님"""
        navigation = make_navigation()
        navigation.add_pages([{"name": "placeholder"}])

        self.assertFalse(navigation.find_active_page_by_uri("/admin/anything"))

    def test_breadcrumbs(self):
        """현재 페이지까지의 경로 (root 제외)"""
        self.assertEqual(self.navigation.breadcrumbs(), [])

        self.navigation.find_active_page_by_uri("/admin/groups")
        names = [item.name for item in self.navigation.breadcrumbs()]
        self.assertEqual(names, ["system", "groups"])


class PageCursorTest(SimpleTestCase):
    """페이지 커서 순회"""

    def setUp(self):
        self.navigation = make_navigation()
        for priority, name in ((3, "c"), (1, "a"), (2, "b")):
            self.navigation.root.add_page(Page({"name": name}), priority)

    def test_cursor_visits_every_page_once(self):
        """rewind/valid/current/next 로 오름차순 한 번씩 방문"""
        cursor = self.navigation.root.cursor()
        cursor.rewind()
        visited = []
        while cursor.valid():
            visited.append((cursor.key(), cursor.current().name))
            cursor.next()

        self.assertEqual(visited, [(1, "a"), (2, "b"), (3, "c")])
        self.assertFalse(cursor.valid())
        self.assertIsNone(cursor.current())

    def test_prev_moves_back(self):
        """prev는 실제로 한 칸 뒤로 이동"""
        cursor = self.navigation.root.cursor()
        cursor.next()
        cursor.next()
        cursor.prev()

        self.assertEqual(cursor.key(), 2)

    def test_cursors_are_independent(self):
        """커서 상태는 섹션에 저장되지 않음"""
        first = self.navigation.root.cursor()
        second = self.navigation.root.cursor()
        first.next()

        self.assertEqual(first.key(), 2)
        self.assertEqual(second.key(), 1)

    def test_iteration(self):
        """for 문 순회"""
        self.assertEqual([page.name for page in self.navigation.root], ["a", "b", "c"])
        self.assertEqual([page.name for page in self.navigation.root.cursor()], ["a", "b", "c"])


class ResolverTest(SimpleTestCase):
    """기준 경로 계산"""

    def test_reverse_admin_index(self):
        """'admin:index' URL 사용 (끝 슬래시 제거)"""
        self.assertEqual(resolve_base_path("admin"), "/admin")

    @override_settings(NAVIGATION_BASE_PATHS={"admin": "/backend"})
    def test_settings_override(self):
        """settings 값 우선"""
        self.assertEqual(resolve_base_path("admin"), "/backend")

    def test_unknown_name_fallback(self):
        """등록되지 않은 이름"""
        self.assertEqual(resolve_base_path("cms"), "/cms")


class UserNavigationTest(TestCase):
    """Django 사용자 권한 기반 메뉴 구성"""

    def setUp(self):
        """테스트 데이터 설정"""
        User = get_user_model()
        self.staff = User.objects.create_user(username='staff1', password='testpass123')
        self.staff.user_permissions.add(
            Permission.objects.get(codename='view_user', content_type__app_label='auth')
        )
        # 권한 캐시 초기화
        self.staff = User.objects.get(pk=self.staff.pk)
        self.admin = User.objects.create_superuser(username='admin1', password='testpass123')

    def test_user_predicate(self):
        """has_perms 결과에 따라 거부"""
        predicate = UserPermissionPredicate(self.staff)
        users = Page({"name": "users", "permissions": ["auth.view_user"]})
        groups = Page({"name": "groups", "permissions": ["auth.view_group"]})

        self.assertFalse(predicate.denies(PAGE_VIEW_ACTION, users))
        self.assertTrue(predicate.denies(PAGE_VIEW_ACTION, groups))
        self.assertFalse(predicate.denies("other-action", groups))

    def test_anonymous_user_denied(self):
        """비인증 사용자는 권한 필요한 페이지 제외"""
        navigation = build_navigation(user=AnonymousUser())

        self.assertEqual(navigation.find_section("system").count(), 0)
        self.assertIsNotNone(navigation.find_page_by_uri("/admin"))

    def test_staff_navigation(self):
        """view_user 권한만 있는 사용자"""
        navigation = build_navigation(user=self.staff, current_uri="/admin/users/3/change")

        system = navigation.find_section("system")
        self.assertEqual([page.name for page in system], ["users"])
        self.assertEqual(navigation.current_page.url, "/admin/users")

    def test_superuser_sees_everything(self):
        """superuser는 모든 페이지"""
        navigation = build_navigation(user=self.admin)

        self.assertEqual(navigation.find_section("system").count(), 2)

    @override_settings(NAVIGATION=[{"name": "cms", "children": [{"name": "pages", "url": "/admin/pages"}]}])
    def test_descriptors_from_settings(self):
        """settings.NAVIGATION 사용"""
        navigation = build_navigation()

        self.assertIsNotNone(navigation.find_page_by_uri("/admin/pages"))
        self.assertIsNone(navigation.find_section("system"))

    @override_settings(NAVIGATION_MATCH_MAX_OFFSET=10)
    def test_match_offset_from_settings(self):
        """settings 의 오프셋 값 적용"""
        navigation = build_navigation(
            current_uri="/admin/other/users",
            descriptors=[{"name": "users", "url": "/admin/users"}],
        )

        self.assertEqual(navigation.match_max_offset, 10)
        self.assertIsNotNone(navigation.current_page)

    def test_serialize_navigation(self):
        """트리 dict 변환"""
        navigation = build_navigation(user=self.admin, current_uri="/admin/groups")
        data = serialize_navigation(navigation)

        self.assertEqual(data["current"], "/admin/groups")
        self.assertEqual(data["breadcrumbs"], ["system", "groups"])
        system = data["root"]["sections"][0]
        self.assertEqual(system["name"], "system")
        self.assertTrue(system["active"])
        self.assertEqual(system["pages"][1]["permissions"], ["auth.view_group"])


class CheckNavigationCommandTest(TestCase):
    """check_navigation 관리 명령"""

    def test_prints_tree_and_active_page(self):
        """트리 출력과 활성 페이지 표시"""
        out = StringIO()
        call_command('check_navigation', uri='/admin/users', stdout=out)

        output = out.getvalue()
        self.assertIn('Navigation Tree', output)
        self.assertIn('* [1] users /admin/users', output)
        self.assertIn('Active: /admin/users (system > users)', output)

    def test_json_output(self):
        """JSON 출력"""
        out = StringIO()
        call_command('check_navigation', uri='/admin/groups', json=True, stdout=out)

        data = json.loads(out.getvalue())
        self.assertEqual(data['current'], '/admin/groups')

    def test_unknown_user(self):
        """없는 사용자"""
        with self.assertRaises(CommandError):
            call_command('check_navigation', user='nobody', stdout=StringIO())

    @override_settings(NAVIGATION=[{'children': []}])
    def test_invalid_descriptor(self):
        """잘못된 descriptor는 CommandError"""
        with self.assertRaises(CommandError):
            call_command('check_navigation', stdout=StringIO())
