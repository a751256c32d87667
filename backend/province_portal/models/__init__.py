# Import every model so metadata is complete for create_all() and Flask-Migrate.
from .admin_user import AdminUser
from .audit_log import AuditLog
from .banner import Banner
from .birthday_wish import BirthdayWish
from .circular import Circular
from .collaboration import Collaboration
from .commission import Commission
from .council_member import CouncilMember
from .gallery_item import GalleryItem
from .house import House
from .message import Message
from .news_item import NewsItem
from .newsline_issue import NewsLineIssue
from .page import Page
from .provincial import Provincial
from .quick_link import QuickLink
from .setting import Setting
from .strenna import Strenna

__all__ = [
    "AdminUser",
    "AuditLog",
    "Banner",
    "BirthdayWish",
    "Circular",
    "Collaboration",
    "Commission",
    "CouncilMember",
    "GalleryItem",
    "House",
    "Message",
    "NewsItem",
    "NewsLineIssue",
    "Page",
    "Provincial",
    "QuickLink",
    "Setting",
    "Strenna",
]
