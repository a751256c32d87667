from datetime import datetime, timedelta
from typing import Dict, Optional

from province_portal.models.audit_log import AuditLog
from province_portal.models.banner import Banner
from province_portal.models.base import utc_now
from province_portal.models.birthday_wish import BirthdayWish
from province_portal.models.house import House
from province_portal.models.news_item import NewsItem
from province_portal.models.page import Page


def dashboard_stats(now: Optional[datetime] = None) -> Dict[str, int]:
    now = now or utc_now()

    return {
        "news": NewsItem.query.count(),
        "published_news": NewsItem.query.filter(NewsItem.is_published.is_(True)).count(),
        "pages": Page.query.count(),
        "active_banners": Banner.query.filter(Banner.is_active.is_(True)).count(),
        "houses": House.query.count(),
        "birthday_wishes": BirthdayWish.query.count(),
        "recent_activity": AuditLog.query.filter(
            AuditLog.created_at >= now - timedelta(days=7)
        ).count(),
    }
