"""
Supabase 마이그레이션 확인 스크립트

클럽 테이블 존재 여부를 확인하고, 없으면 실행할 SQL을 출력
"""
import sys
from pathlib import Path
from dotenv import load_dotenv
from loguru import logger

load_dotenv()

logger.remove()
logger.add(sys.stdout, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}")

MIGRATION_FILE = Path(__file__).parent / "migrations" / "001_club_schema.sql"

REQUIRED_TABLES = [
    "members",
    "events",
    "event_attendees",
    "event_feedback",
    "dues_payments",
]


def find_missing_tables(client) -> list:
    """존재하지 않는 테이블 목록"""
    missing = []
    for table in REQUIRED_TABLES:
        try:
            client.table(table).select("id").limit(1).execute()
            logger.info(f"✅ {table} 테이블 확인")
        except Exception as e:
            if "does not exist" in str(e) or "relation" in str(e).lower():
                logger.warning(f"{table} 테이블이 없습니다")
                missing.append(table)
            else:
                logger.error(f"{table} 테이블 확인 중 오류: {e}")
                raise
    return missing


def run_migration() -> bool:
    """마이그레이션 상태 확인 및 SQL 안내"""
    from database.supabase_client import get_supabase_client

    try:
        client = get_supabase_client()
    except ValueError as e:
        logger.error(str(e))
        return False

    if not MIGRATION_FILE.exists():
        logger.error(f"마이그레이션 파일을 찾을 수 없습니다: {MIGRATION_FILE}")
        return False

    missing = find_missing_tables(client)
    if not missing:
        logger.info("모든 테이블이 이미 존재합니다")
        return True

    with open(MIGRATION_FILE, 'r', encoding='utf-8') as f:
        sql_content = f.read()

    # Supabase Python 클라이언트는 DDL 실행을 지원하지 않음
    logger.info("=" * 60)
    logger.info("Supabase Dashboard에서 아래 SQL을 실행해주세요:")
    logger.info("=" * 60)
    logger.info("1. https://supabase.com/dashboard 접속")
    logger.info("2. 프로젝트 선택 → SQL Editor")
    logger.info("3. 아래 SQL 복사하여 실행")
    logger.info("=" * 60)
    print("\n" + sql_content + "\n")

    return False


if __name__ == "__main__":
    sys.exit(0 if run_migration() else 1)
