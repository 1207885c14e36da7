from rest_framework.exceptions import APIException
from rest_framework import status
from datetime import datetime, timezone


class NavigationException(APIException):
    """내비게이션 트리 기본 예외 클래스"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = 'NAV_000'
    default_detail = '내비게이션 처리 중 오류가 발생했습니다.'

    def __init__(self, code=None, message=None, detail=None, field=None):
        super().__init__(detail=message or self.default_detail)
        self.code = code or self.default_code
        self.message = message or self.default_detail
        self.detail_info = detail
        self.field = field

    def get_full_details(self):
        error_detail = {
            'code': self.code,
            'message': self.message,
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        }
        if self.detail_info:
            error_detail['detail'] = self.detail_info
        if self.field:
            error_detail['field'] = self.field
        return {'error': error_detail}


class InvalidDescriptorException(NavigationException):
    """메뉴 descriptor 형식 오류 (호출자 계약 위반)"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'NAV_101'
    default_detail = '메뉴 descriptor 형식이 올바르지 않습니다.'
