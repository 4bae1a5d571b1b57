import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer


class PacketRecord(BaseModel):
    """One row of packet_info as it leaves the query layer.

    flags / scan_date stay None internally; the empty-string sentinel only
    appears when the record is dumped for JSON or the dashboard.
    """
    model_config = ConfigDict(frozen=True)

    id: int
    version: str
    total_length: int
    flags: Optional[str] = None
    ttl: int
    protocol: str
    header_checksum: int
    source_ip: str
    destination_ip: str
    malicious: int
    suspicious: int
    harmless: int
    undetected: int
    scan_date: Optional[dt.date] = None
    checked_at: dt.datetime

    @field_serializer("flags")
    def _flags_or_empty(self, v: Optional[str]) -> str:
        return v if v is not None else ""

    @field_serializer("scan_date")
    def _scan_date_or_empty(self, v: Optional[dt.date]) -> str:
        return v.strftime("%Y-%m-%d") if v is not None else ""
