from typing import List, Dict, Any, Optional
from datetime import datetime, timezone
from app.core.config import settings
from app.core.supabase import db
from app.schemas.order import OrderRecordCreate

class OrderStore:
    def __init__(self, table: Optional[str] = None):
        self.table = table or settings.ORDERS_TABLE

    async def save(self, record: OrderRecordCreate) -> Dict[str, Any]:
        client = await db.get_service_client()
        now = datetime.now(timezone.utc).isoformat()
        row = record.model_dump()
        row["created_at"] = now
        row["updated_at"] = now

        # Supabase returns the inserted row
        result = await client.table(self.table).insert(row).execute()
        if result.data:
            return result.data[0]
        return row

    async def list_recent(self) -> List[Dict[str, Any]]:
        client = await db.get_service_client()
        result = await client.table(self.table).select("*").order("created_at", desc=True).execute()
        return result.data or []
