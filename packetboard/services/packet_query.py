import datetime as dt
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import DataAccessError
from ..models.packet_info import PacketInfo
from ..schemas import PacketRecord

PAGE_LIMIT = 1000

def _calendar_date(value) -> Optional[dt.date]:
    # timestamp 컬럼이면 시각 버림, date 컬럼이면 그대로
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    raise TypeError(f"unexpected scan_date value: {value!r}")

def _to_record(row: PacketInfo) -> PacketRecord:
    return PacketRecord(
        id=row.id, version=row.version, total_length=row.total_length,
        flags=row.flags, ttl=row.ttl, protocol=row.protocol,
        header_checksum=row.header_checksum,
        source_ip=row.source_ip, destination_ip=row.destination_ip,
        malicious=row.malicious, suspicious=row.suspicious,
        harmless=row.harmless, undetected=row.undetected,
        scan_date=_calendar_date(row.scan_date), checked_at=row.checked_at,
    )

def fetch_packets(db: Session, after_id: int, limit: int) -> List[PacketRecord]:
    """
    id > after_id 인 레코드를 id 내림차순으로 최대 limit 건 반환.
    (커서보다 큰 id 중 "가장 최근" 창을 주는 방식 - 순방향 페이지네이션 아님)

    raises DataAccessError: 접속 실패 / 쿼리 거부 / 행 디코딩 실패
    """
    q = (db.query(PacketInfo)
           .filter(PacketInfo.id > after_id)
           .order_by(PacketInfo.id.desc())
           .limit(limit))
    try:
        rows = q.all()
        # 전부 변환에 성공해야 반환 (부분 결과 없음)
        return [_to_record(r) for r in rows]
    except SQLAlchemyError as e:
        raise DataAccessError(f"packet query failed: {e}") from e
    except (ValueError, TypeError) as e:
        raise DataAccessError(f"packet row decode failed: {e}") from e
    except ArithmeticError as e:
        # 드라이버가 DBAPI Error 밖에서 던지는 경우 (예: sqlite 정수 overflow)
        raise DataAccessError(f"packet query failed: {e}") from e
