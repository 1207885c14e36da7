import json

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.navigation.serializers import serialize_navigation
from apps.navigation.services import build_navigation
from utils.exceptions import InvalidDescriptorException


class Command(BaseCommand):
    help = 'Validate settings.NAVIGATION and print the resolved menu tree'

    def add_arguments(self, parser):
        parser.add_argument('--uri', default=None, help='활성 페이지를 찾을 현재 URI')
        parser.add_argument('--user', default=None, help='권한 필터에 사용할 username')
        parser.add_argument('--json', action='store_true', help='JSON 형태로 출력')

    def handle(self, *args, **options):
        user = None
        if options['user']:
            User = get_user_model()
            try:
                user = User.objects.get(**{User.USERNAME_FIELD: options['user']})
            except User.DoesNotExist:
                raise CommandError(f"User not found: {options['user']}")

        try:
            navigation = build_navigation(user=user, current_uri=options['uri'])
        except InvalidDescriptorException as exc:
            raise CommandError(f"Invalid NAVIGATION descriptor: {json.dumps(exc.get_full_details(), ensure_ascii=False, default=str)}")

        if options['json']:
            self.stdout.write(json.dumps(serialize_navigation(navigation), ensure_ascii=False, indent=2))
            return

        self.stdout.write("=" * 60)
        self.stdout.write("Navigation Tree")
        self.stdout.write("=" * 60)
        self._write_section(navigation.root, depth=0)

        self.stdout.write("")
        current_page = navigation.current_page
        if current_page is not None:
            trail = " > ".join(item.label for item in navigation.breadcrumbs())
            self.stdout.write(self.style.SUCCESS(f"Active: {current_page.url} ({trail})"))
        elif options['uri']:
            self.stdout.write(self.style.WARNING(f"No active page for {options['uri']}"))

    def _write_section(self, section, depth):
        indent = "  " * depth
        for key, page in section.pages.items():
            marker = "*" if page.is_active() else "-"
            self.stdout.write(f"{indent}{marker} [{key}] {page.label} {page.url or ''}")

        for section_key, child in section.sections.items():
            marker = "*" if child.is_active() else "+"
            icon = f" ({child.icon})" if child.icon else ""
            self.stdout.write(f"{indent}{marker} [{section_key}] {child.label}{icon}")
            self._write_section(child, depth + 1)
