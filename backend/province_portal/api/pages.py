import logging

from flask import jsonify

from province_portal.domain.navigation import build_menu_tree, orphaned_entries, resolve_menu
from province_portal.models.page import Page
from province_portal.normalizers.menu import normalize_menu_entry, normalize_menu_tree

from . import legacy_route

logger = logging.getLogger(__name__)


@legacy_route("/pages/menu", methods=["GET"])
def page_menu():
    pages = Page.query.filter(
        Page.is_enabled.is_(True),
        Page.show_in_menu.is_(True),
    ).all()
    entries = resolve_menu(pages)

    orphans = orphaned_entries(entries)
    if orphans:
        logger.warning(
            "Menu pages with unknown parent_menu: %s",
            ", ".join(f"{e.slug} ({e.parent_menu})" for e in orphans),
        )

    return jsonify({
        "success": True,
        "data": [normalize_menu_entry(e) for e in entries],
        "tree": normalize_menu_tree(build_menu_tree(entries)),
    }), 200
