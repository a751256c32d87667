from province_portal.domain.navigation import MenuEntry


def normalize_menu_entry(entry: MenuEntry):
    return entry.to_dict()


def normalize_menu_tree(tree):
    return {
        "top_level": [normalize_menu_entry(e) for e in tree["top_level"]],
        "groups": {
            key: {
                "items": [normalize_menu_entry(e) for e in group["items"]],
                "submenu": [normalize_menu_entry(e) for e in group["submenu"]],
            }
            for key, group in tree["groups"].items()
        },
    }
