import environ
import os
from pathlib import Path
from .base import * # 공통 설정
from dotenv import load_dotenv
load_dotenv()


# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# env 초기화 (.env 파일에서 환경변수 로드)
env = environ.Env()
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))


SECRET_KEY = env('SECRET_KEY', default=SECRET_KEY)
DEBUG = env.bool('DEBUG', default=False)

# ALLOWED_HOSTS 설정
# 운영 환경에서는 .env에서 ALLOWED_HOSTS를 명시적으로 설정하세요
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])


# 데이터베이스 설정 (DATABASE_URL 미설정 시 sqlite)
DATABASES = {
    'default': env.db('DATABASE_URL', default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}


# 메뉴 설정
# NAVIGATION 트리 자체는 base.py 에서 관리, 환경별로 달라지는 값만 env에서 읽음
NAVIGATION_BASE_PATH_NAME = env('NAVIGATION_BASE_PATH_NAME', default=NAVIGATION_BASE_PATH_NAME)
NAVIGATION_MATCH_MAX_OFFSET = env.int('NAVIGATION_MATCH_MAX_OFFSET', default=NAVIGATION_MATCH_MAX_OFFSET)

NAVIGATION_LOG_LEVEL = env('NAVIGATION_LOG_LEVEL', default=NAVIGATION_LOG_LEVEL)
LOGGING['loggers']['apps.navigation']['level'] = NAVIGATION_LOG_LEVEL
