"""
Header navigation built from the page set.

Pages are grouped by ``parent_menu`` (``None`` means a top-level item) and
ordered within each group by ``sort_order`` then ``menu_position``.
``is_submenu`` marks pages shown one level deeper, in the commission-style
sub-list under their parent.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

# Top-level keys the header knows how to render.
MENU_PARENTS = (
    "about",
    "provincials",
    "houses",
    "council",
    "newsline",
    "circulars",
    "gallery",
)


@dataclass(frozen=True)
class MenuEntry:
    id: int
    title: str
    slug: str
    label: str
    parent_menu: Optional[str]
    is_submenu: bool
    sort_order: int
    menu_position: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["menu_label"] = self.label
        return data


def is_menu_visible(page) -> bool:
    return (
        getattr(page, "deleted_at", None) is None
        and bool(page.is_enabled)
        and bool(page.show_in_menu)
    )


def menu_entry(page) -> MenuEntry:
    return MenuEntry(
        id=page.id,
        title=page.title,
        slug=page.slug,
        label=page.menu_label or page.title,
        parent_menu=page.parent_menu or None,
        is_submenu=bool(page.is_submenu),
        sort_order=page.sort_order or 0,
        menu_position=page.menu_position or 0,
    )


def _menu_order(entry: MenuEntry):
    return (
        entry.parent_menu is not None,
        entry.parent_menu or "",
        entry.sort_order,
        entry.menu_position,
        entry.id,
    )


def resolve_menu(pages: Iterable[Any]) -> List[MenuEntry]:
    """Flat menu: top-level entries first, then each parent group in key order."""
    entries = [menu_entry(page) for page in pages if is_menu_visible(page)]
    return sorted(entries, key=_menu_order)


def build_menu_tree(
    entries: Iterable[MenuEntry],
    parents: Iterable[str] = MENU_PARENTS,
) -> Dict[str, Any]:
    """
    Group resolved entries under the known parent keys.

    Expects ``entries`` already ordered by ``resolve_menu``; each group keeps
    that order. Entries whose parent key is unknown are left out of the tree.
    """
    groups: Dict[str, Dict[str, List[MenuEntry]]] = {
        key: {"items": [], "submenu": []} for key in parents
    }
    top_level: List[MenuEntry] = []

    for entry in entries:
        if entry.parent_menu is None:
            top_level.append(entry)
            continue

        group = groups.get(entry.parent_menu)
        if group is None:
            continue

        group["submenu" if entry.is_submenu else "items"].append(entry)

    return {"top_level": top_level, "groups": groups}


def orphaned_entries(
    entries: Iterable[MenuEntry],
    parents: Iterable[str] = MENU_PARENTS,
) -> List[MenuEntry]:
    known = set(parents)
    return [
        entry for entry in entries
        if entry.parent_menu is not None and entry.parent_menu not in known
    ]
