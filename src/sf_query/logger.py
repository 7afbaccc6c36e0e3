import logging

pkg_root = logging.getLogger("sf_query")


def getLogger(name: str | None = None):
    if not name:
        return pkg_root
    if name == pkg_root.name or name.startswith(pkg_root.name + "."):
        name = name[len(pkg_root.name) + 1 :]
        if not name:
            return pkg_root
    return pkg_root.getChild(name)
