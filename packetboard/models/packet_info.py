from sqlalchemy import Column, Integer, String, DateTime
from .base import Base

class PacketInfo(Base):
    # 외부 수집기가 채우는 테이블 (여기서는 읽기 전용)
    __tablename__ = "packet_info"
    id = Column(Integer, primary_key=True)
    version = Column(String, nullable=False)
    total_length = Column(Integer, nullable=False)
    flags = Column(String)
    ttl = Column(Integer, nullable=False)
    protocol = Column(String, nullable=False)
    header_checksum = Column(Integer, nullable=False)
    source_ip = Column(String, nullable=False)
    destination_ip = Column(String, nullable=False)
    # 평판 조회 결과 (malicious/suspicious/harmless/undetected 투표 수)
    malicious = Column(Integer, nullable=False)
    suspicious = Column(Integer, nullable=False)
    harmless = Column(Integer, nullable=False)
    undetected = Column(Integer, nullable=False)
    scan_date = Column(DateTime(timezone=True))
    checked_at = Column(DateTime(timezone=True), nullable=False)
