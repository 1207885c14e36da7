from collections.abc import Mapping

from rest_framework import serializers

from utils.exceptions import InvalidDescriptorException


# permissions: "auth.view_user" 또는 ["auth.view_user", ...] 둘 다 허용
class PermissionsField(serializers.Field):
    default_error_messages = {
        "invalid": "permissions는 문자열 또는 문자열 목록이어야 합니다.",
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            return [data]
        if isinstance(data, (list, tuple, set, frozenset)) and all(isinstance(item, str) for item in data):
            return list(data)
        self.fail("invalid")

    def to_representation(self, value):
        return sorted(value)


# 입력 descriptor 검증용
class PageDescriptorSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    label = serializers.CharField(required=False, allow_blank=True)
    url = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    icon = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    priority = serializers.IntegerField(required=False, allow_null=True)
    permissions = PermissionsField(required=False, allow_null=True)


class SectionDescriptorSerializer(PageDescriptorSerializer):
    name = serializers.CharField()
    children = serializers.ListField(child=serializers.DictField(), allow_empty=True)


def is_section_descriptor(descriptor):
    return isinstance(descriptor, Mapping) and descriptor.get("children") is not None


def validate_descriptor(descriptor):
    """
    descriptor 하나를 검증하고 정규화된 dict를 반환.
    검증되지 않는 추가 속성은 그대로 유지된다.
    """
    if is_section_descriptor(descriptor):
        serializer = SectionDescriptorSerializer(data=descriptor)
    else:
        serializer = PageDescriptorSerializer(data=descriptor)

    if not serializer.is_valid():
        field = next(iter(serializer.errors))
        raise InvalidDescriptorException(
            detail=serializer.errors,
            field=None if field == "non_field_errors" else field,
        )

    return {**descriptor, **serializer.validated_data}


def validate_descriptors(items):
    """
    descriptor 목록 전체(하위 children 포함)를 먼저 검증.
    하나라도 잘못되면 트리를 건드리기 전에 예외가 발생한다.
    """
    validated = []
    for descriptor in items:
        data = validate_descriptor(descriptor)
        if is_section_descriptor(data):
            data["children"] = validate_descriptors(data["children"])
        validated.append(data)
    return validated


# 프론트/템플릿에 내려줄 형태
class PageSerializer(serializers.Serializer):
    name = serializers.CharField()
    label = serializers.CharField()
    icon = serializers.CharField(allow_null=True)
    url = serializers.CharField(allow_null=True)
    priority = serializers.IntegerField()
    active = serializers.BooleanField()
    permissions = PermissionsField()


class SectionSerializer(serializers.Serializer):
    name = serializers.CharField()
    label = serializers.CharField()
    icon = serializers.CharField(allow_null=True)
    priority = serializers.IntegerField()
    active = serializers.BooleanField()
    pages = serializers.SerializerMethodField()
    sections = serializers.SerializerMethodField()

    def get_pages(self, obj):
        return PageSerializer(list(obj.pages.values()), many=True).data

    def get_sections(self, obj):
        return SectionSerializer(list(obj.sections.values()), many=True).data


def serialize_navigation(navigation):
    current_page = navigation.current_page
    return {
        "current": current_page.url if current_page is not None else None,
        "breadcrumbs": [item.label for item in navigation.breadcrumbs()],
        "root": SectionSerializer(navigation.root).data,
    }
