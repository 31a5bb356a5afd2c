"""Mapping from a package name to its location inside the registry index."""


def get_index_path(package: str) -> str:
    """Return the index path for ``package``.

    The name is lower-cased first, then bucketed by length::

        a        -> 1/a
        ab       -> 2/ab
        ice      -> 3/i/ice
        cargo    -> ca/rg/cargo

    Args:
        package (str): Package name, must be non-empty.

    Returns:
        str: Relative path of the package's index file.
    """
    if not package:
        raise ValueError("package name must not be empty")

    name = package.lower()
    if len(name) == 1:
        return f"1/{name}"
    if len(name) == 2:
        return f"2/{name}"
    if len(name) == 3:
        return f"3/{name[0]}/{name}"
    return f"{name[0:2]}/{name[2:4]}/{name}"
