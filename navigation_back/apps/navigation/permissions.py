PAGE_VIEW_ACTION = "navigation-page-view"


# 메뉴 노출 여부 판단 (denies 가 True면 해당 페이지는 트리에서 제외)
class PermissionPredicate:
    def denies(self, action, page):
        return False


class UserPermissionPredicate(PermissionPredicate):
    """Django 사용자 권한(user.has_perms) 기반"""

    def __init__(self, user):
        self.user = user

    def denies(self, action, page):
        if action != PAGE_VIEW_ACTION:
            return False
        if self.user is None or not self.user.is_authenticated:
            return True
        return not self.user.has_perms(sorted(page.permissions))


class PermissionCodePredicate(PermissionPredicate):
    """
    권한 코드 목록 기반.
    codes: ['VIEW_DASHBOARD', 'VIEW_PATIENT_LIST', ...]
    """

    def __init__(self, codes):
        self.codes = set(codes)

    def denies(self, action, page):
        if action != PAGE_VIEW_ACTION:
            return False
        return not page.permissions <= self.codes
