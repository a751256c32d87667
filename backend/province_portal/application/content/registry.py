from province_portal.models.banner import BANNER_TYPES, Banner
from province_portal.models.birthday_wish import DEFAULT_BACKGROUND_COLOR, BirthdayWish
from province_portal.models.circular import Circular
from province_portal.models.collaboration import Collaboration
from province_portal.models.commission import Commission
from province_portal.models.council_member import CouncilMember
from province_portal.models.gallery_item import GALLERY_TYPES, GalleryItem
from province_portal.models.house import House
from province_portal.models.message import Message
from province_portal.models.news_item import NewsItem
from province_portal.models.newsline_issue import NewsLineIssue
from province_portal.models.page import Page
from province_portal.models.provincial import PROVINCIAL_TITLES, Provincial
from province_portal.models.quick_link import QuickLink
from province_portal.models.strenna import Strenna

from .fields import Field
from .resources import (
    ContentResource,
    CouncilResource,
    DatedPublicationResource,
    ExclusiveFlagResource,
    GalleryResource,
    MessageResource,
    NewsResource,
    PageResource,
)


def _flag(name, default=False):
    return Field(name, "bool", default=default)


def _order_index():
    return Field("order_index", "int", default=0)


PAGES = PageResource(
    "pages",
    Page,
    label="Page",
    entity_type="page",
    slugged=True,
    paginated=True,
    media_fields=("featured_image",),
    fields=(
        Field("title", required=True),
        Field("slug"),
        Field("content", "text"),
        Field("excerpt", "text"),
        Field("meta_title"),
        Field("meta_description", "text"),
        Field("featured_image", max_length=500),
        Field("menu_label"),
        Field("menu_position", "int", default=0),
        Field("parent_menu", max_length=50),
        _flag("is_submenu"),
        _flag("is_enabled", True),
        _flag("is_featured"),
        _flag("show_in_menu", True),
        Field("sort_order", "int", default=0),
    ),
    filters=(Field("parent_menu"), Field("featured", "bool", attribute="is_featured")),
    ordering=lambda m: (m.sort_order.asc(), m.menu_position.asc(), m.created_at.desc()),
)

NEWS = NewsResource(
    "news",
    NewsItem,
    label="News item",
    entity_type="news",
    slugged=True,
    paginated=True,
    media_fields=("featured_image",),
    fields=(
        Field("title", required=True),
        Field("content", "text", required=True),
        Field("excerpt", "text"),
        Field("featured_image", max_length=500),
        Field("event_date", "date"),
        _flag("is_featured"),
        _flag("is_published"),
        Field("published_at", "datetime"),
    ),
    filters=(Field("featured", "bool", attribute="is_featured"),),
    ordering=lambda m: (m.published_at.desc(), m.created_at.desc()),
)

CIRCULARS = DatedPublicationResource(
    "circulars",
    Circular,
    label="Circular",
    entity_type="circular",
    paginated=True,
    duplicate_message="Circular for this month and year already exists",
    fields=(
        Field("title", required=True),
        Field("month", "int", required=True),
        Field("year", "int", required=True),
        Field("file_path", max_length=500),
        Field("description", "text"),
        _flag("is_active", True),
    ),
    filters=(Field("year", "int"), Field("month", "int")),
    ordering=lambda m: (m.year.desc(), m.month.desc()),
)

NEWSLINE = DatedPublicationResource(
    "newsline",
    NewsLineIssue,
    label="NewsLine issue",
    entity_type="newsline",
    paginated=True,
    media_fields=("cover_image",),
    duplicate_message="NewsLine issue for this month and year already exists",
    fields=(
        Field("title", required=True),
        Field("month", "int", required=True),
        Field("year", "int", required=True),
        Field("cover_image", max_length=500),
        Field("pdf_path", max_length=500),
        Field("qr_code_url", max_length=500),
        Field("description", "text"),
        _flag("is_active", True),
    ),
    filters=(Field("year", "int"), Field("month", "int")),
    ordering=lambda m: (m.year.desc(), m.month.desc()),
)

BANNERS = ContentResource(
    "banners",
    Banner,
    label="Banner",
    entity_type="banner",
    media_fields=("image",),
    fields=(
        Field(
            "type",
            "choice",
            required=True,
            choices=BANNER_TYPES,
            message="Valid type (hero or flash_news) is required",
        ),
        Field("title"),
        Field("subtitle"),
        Field("content", "text"),
        Field("image", max_length=500),
        Field("link_url", max_length=500),
        _order_index(),
        _flag("is_active", True),
    ),
    filters=(Field("type", "choice", choices=BANNER_TYPES),),
    ordering=lambda m: (m.order_index.asc(), m.created_at.desc()),
)

COUNCIL = CouncilResource(
    "council",
    CouncilMember,
    label="Council member",
    entity_type="council_member",
    media_fields=("image",),
    fields=(
        Field("name", required=True),
        Field("role", required=True),
        Field("image", max_length=500),
        Field("bio", "text"),
        Field("dimension", max_length=100),
        Field("commission", max_length=100),
        _order_index(),
        _flag("is_active", True),
    ),
    filters=(Field("dimension"), Field("commission")),
    ordering=lambda m: (m.order_index.asc(), m.name.asc()),
)

PROVINCIALS = ExclusiveFlagResource(
    "provincials",
    Provincial,
    label="Provincial",
    entity_type="provincial",
    public_flag=None,
    flag="is_current",
    scope="title",
    media_fields=("image",),
    fields=(
        Field("name", required=True),
        Field(
            "title",
            "choice",
            required=True,
            choices=PROVINCIAL_TITLES,
            message="Valid title is required (provincial, vice_provincial, economer, secretary)",
        ),
        Field("image", max_length=500),
        Field("bio", "text"),
        Field("period_start", "date"),
        Field("period_end", "date"),
        _flag("is_current"),
        _order_index(),
    ),
    filters=(Field("title", "choice", choices=PROVINCIAL_TITLES),),
    ordering=lambda m: (m.is_current.desc(), m.order_index.asc(), m.created_at.desc()),
)

GALLERY = GalleryResource(
    "gallery",
    GalleryItem,
    label="Gallery item",
    entity_type="gallery_item",
    public_flag=None,
    paginated=True,
    media_fields=("file_path", "thumbnail"),
    fields=(
        Field("title", required=True),
        Field("type", "choice", required=True, choices=GALLERY_TYPES),
        Field("file_path", required=True, max_length=500),
        Field("thumbnail", max_length=500),
        Field("description", "text"),
        Field("category", max_length=100),
        _flag("is_featured"),
        _order_index(),
    ),
    filters=(
        Field("type", "choice", choices=GALLERY_TYPES),
        Field("category"),
        Field("featured", "bool", attribute="is_featured"),
    ),
    ordering=lambda m: (m.is_featured.desc(), m.order_index.asc(), m.created_at.desc()),
)

COMMISSIONS = ContentResource(
    "commissions",
    Commission,
    label="Commission",
    entity_type="commission",
    fields=(
        Field("name", required=True),
        Field("description", "text"),
        Field("icon", max_length=100),
        _order_index(),
        _flag("is_active", True),
    ),
    ordering=lambda m: (m.order_index.asc(), m.name.asc()),
)

HOUSES = ContentResource(
    "houses",
    House,
    label="House",
    entity_type="house",
    media_fields=("image",),
    fields=(
        Field("name", required=True),
        Field("description", "text"),
        Field("location"),
        Field("image", max_length=500),
        _order_index(),
        _flag("is_active", True),
    ),
    ordering=lambda m: (m.order_index.asc(), m.name.asc()),
)

QUICK_LINKS = ContentResource(
    "quick_links",
    QuickLink,
    label="Quick link",
    entity_type="quick_link",
    fields=(
        Field("title", required=True),
        Field("url", "url", required=True, max_length=500, label="URL"),
        Field("icon", max_length=100),
        _order_index(),
        _flag("is_active", True),
    ),
    ordering=lambda m: (m.order_index.asc(), m.title.asc()),
)

COLLABORATIONS = ContentResource(
    "collaborations",
    Collaboration,
    label="Collaboration",
    entity_type="collaboration",
    media_fields=("logo",),
    fields=(
        Field("name", required=True),
        Field("logo", required=True, max_length=500),
        Field("website", "url", max_length=500),
        Field("description", "text"),
        _order_index(),
        _flag("is_active", True),
    ),
    ordering=lambda m: (m.order_index.asc(), m.name.asc()),
)

MESSAGES = MessageResource(
    "messages",
    Message,
    label="Message",
    entity_type="message",
    media_fields=("author_image",),
    fields=(
        Field("title", required=True),
        Field("content", "text", required=True),
        Field("author_name"),
        Field("author_title"),
        Field("author_image", max_length=500),
        _flag("is_active", True),
    ),
    ordering=lambda m: (m.is_active.desc(), m.created_at.desc()),
)

BIRTHDAY_WISHES = ContentResource(
    "birthday",
    BirthdayWish,
    label="Birthday wish",
    entity_type="birthday_wish",
    paginated=True,
    media_fields=("profile_image",),
    fields=(
        Field("name", required=True),
        Field("date_of_birth", "date", required=True, label="Date of birth"),
        Field("message", "text"),
        Field("profile_image", max_length=500),
        Field("background_color", "color", default=DEFAULT_BACKGROUND_COLOR),
        _flag("is_active", True),
    ),
    ordering=lambda m: (m.date_of_birth.asc(), m.created_at.desc()),
)

STRENNA = ExclusiveFlagResource(
    "strenna",
    Strenna,
    label="Strenna",
    entity_type="strenna",
    flag="is_active",
    scope="year",
    media_fields=("image",),
    fields=(
        Field("year", "int", required=True),
        Field("title", required=True),
        Field("content", "text", required=True),
        Field("image", max_length=500),
        _flag("is_active", True),
    ),
    filters=(Field("year", "int"),),
    ordering=lambda m: (m.year.desc(), m.created_at.desc()),
)

RESOURCES = {
    resource.name: resource
    for resource in (
        PAGES,
        NEWS,
        CIRCULARS,
        NEWSLINE,
        BANNERS,
        COUNCIL,
        PROVINCIALS,
        GALLERY,
        COMMISSIONS,
        HOUSES,
        QUICK_LINKS,
        COLLABORATIONS,
        MESSAGES,
        BIRTHDAY_WISHES,
        STRENNA,
    )
}
