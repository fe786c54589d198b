"""Event details service with caching."""
from typing import Optional

from src.models.event import EventDetails
from src.services.storage_service import load_json

# 資料檔案路徑
EVENT_FILE = "data/event.json"

# 快取變數
_event_cache: Optional[EventDetails] = None


def _clear_cache():
    """清除活動資訊快取。"""
    global _event_cache
    _event_cache = None


def get_event_details(file_path: Optional[str] = None) -> EventDetails:
    """
    載入活動資訊。

    Args:
        file_path: JSON file to read (default: EVENT_FILE)

    Returns:
        EventDetails: 活動資訊

    Raises:
        FileNotFoundError: 如果資料檔案不存在
        json.JSONDecodeError: 如果 JSON 格式錯誤
        ValueError: 如果必要欄位為空
    """
    global _event_cache

    if _event_cache is not None:
        return _event_cache

    data = load_json(file_path or EVENT_FILE)
    event_data = data.get("event", {})
    speaker_data = event_data.get("speaker", {})

    _event_cache = EventDetails(
        title=event_data.get("title", ""),
        date_label=event_data.get("date_label", ""),
        description=event_data.get("description", ""),
        speaker_name=speaker_data.get("name", ""),
        speaker_bio=speaker_data.get("bio", ""),
        contact_email=event_data.get("contact_email", ""),
    )
    return _event_cache
