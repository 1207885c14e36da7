from .items import Item


class Page(Item):
    """
    메뉴의 leaf 노드 (URL 하나에 대응).
    permissions 가 비어 있지 않으면 섹션에 추가될 때 권한 검사를 거친다.
    """
