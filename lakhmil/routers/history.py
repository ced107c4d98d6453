from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from lakhmil.db.dal import Database
from lakhmil.models.history import HistoryEntry
from lakhmil.services.history import list_entries

router = APIRouter(prefix="/history", tags=["history"])


def get_db(request: Request) -> Database:
    return Database(request.app.state.settings.db_path)


@router.get("", response_model=List[HistoryEntry], summary="Recent conversions, newest first")
async def list_history(
    limit: Optional[int] = Query(None, ge=1, description="Return at most this many entries"),
    db: Database = Depends(get_db),
):
    return list_entries(db, limit)


@router.delete("", summary="Clear conversion history")
async def clear_history(db: Database = Depends(get_db)):
    removed = db.clear_history()
    return {"status": "cleared", "removed": removed}
