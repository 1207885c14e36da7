from django.contrib import admin
from django.urls import path


urlpatterns = [
    # 관리자 기준 경로 ('admin:index' → 메뉴 활성 페이지 판단에 사용)
    path("admin/", admin.site.urls),
]
