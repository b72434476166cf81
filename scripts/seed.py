"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py          # 테이블 생성 + 샘플 데이터
    python scripts/seed.py --reset  # 테이블 삭제 후 다시 생성

DATABASE_URL, SECRET_KEY 환경변수(.env)가 필요합니다.
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.base import Base
from db.models.company import Company
from db.models.job import Job
from db.models.user import User
from db.session import engine, AsyncSessionLocal

COMPANIES = [
    {"handle": "c1", "name": "C1", "description": "Desc1", "num_employees": 1, "logo_url": "http://c1.img"},
    {"handle": "c2", "name": "C2", "description": "Desc2", "num_employees": 2, "logo_url": "http://c2.img"},
    {"handle": "c3", "name": "C3", "description": "Desc3", "num_employees": 3, "logo_url": "http://c3.img"},
]

JOBS = [
    {"title": "j1", "salary": 100000, "equity": Decimal("0.1"), "company_handle": "c1"},
    {"title": "j2", "salary": 110000, "equity": Decimal("0.2"), "company_handle": "c2"},
    {"title": "j3", "salary": 150000, "equity": Decimal("0"), "company_handle": "c3"},
]

# 토큰은 외부 인증 서비스에서 발급 (payload: username, isAdmin)
USERS = [
    {"username": "u1", "first_name": "U1F", "last_name": "U1L", "email": "user1@user.com", "is_admin": False},
    {"username": "admin", "first_name": "Admin", "last_name": "Jobly", "email": "admin@jobly.com", "is_admin": True},
]


async def create_tables(reset: bool = False) -> None:
    """테이블 생성"""
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def seed(reset: bool = False) -> None:
    """모든 테스트 데이터 생성"""
    await create_tables(reset)

    async with AsyncSessionLocal() as db:
        db.add_all(Company(**company) for company in COMPANIES)
        await db.flush()
        db.add_all(Job(**job) for job in JOBS)
        db.add_all(User(**user) for user in USERS)
        await db.commit()

    await engine.dispose()

    print("✅ 테스트 데이터 생성 완료!")
    print(f"\n🏢 회사 {len(COMPANIES)}개, 채용공고 {len(JOBS)}개")
    print("\n👤 테스트 계정:")
    for user in USERS:
        print(f"   - username: {user['username']} (admin: {user['is_admin']})")


if __name__ == "__main__":
    asyncio.run(seed(reset="--reset" in sys.argv))
