import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# SECRET_KEY: 환경변수 우선, 없으면 개발용 기본값 사용
# ⚠️ 프로덕션에서는 반드시 환경변수로 안전한 키 설정 필요
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-do-not-use-in-production')
DEBUG = os.environ.get('DEBUG', 'False').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'rest_framework',
    'apps.navigation',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

AUTH_PASSWORD_VALIDATORS = []

LANGUAGE_CODE = 'ko-kr'
TIME_ZONE = 'Asia/Seoul'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ==================================================
# NAVIGATION (메뉴 트리 descriptor)
# children 키가 있으면 섹션, 없으면 페이지
# ==================================================
NAVIGATION = [
    {'name': 'dashboard', 'url': '/admin', 'icon': 'mdi-view-dashboard', 'priority': 1},
    {
        'name': 'system',
        'icon': 'mdi-cog',
        'priority': 90,
        'children': [
            {'name': 'users', 'url': '/admin/users', 'permissions': ['auth.view_user']},
            {'name': 'groups', 'url': '/admin/groups', 'permissions': ['auth.view_group']},
        ],
    },
]

# 이름 → 기준 경로 (미설정 시 '<name>:index' URL 또는 '/<name>')
NAVIGATION_BASE_PATHS = {}
NAVIGATION_BASE_PATH_NAME = 'admin'

# 활성 페이지 근사 매칭 허용 오프셋
NAVIGATION_MATCH_MAX_OFFSET = 5

NAVIGATION_LOG_LEVEL = os.environ.get('NAVIGATION_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps.navigation': {
            'handlers': ['console'],
            'level': NAVIGATION_LOG_LEVEL,
            'propagate': False,
        },
    },
}
