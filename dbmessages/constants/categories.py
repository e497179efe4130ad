"""Message category constants.

A category is the namespace a source message belongs to ("site", "app", ...).
Only categories listed in the settings are recorded by the message store.
"""

# Categories managed when TRANSLATE_CATEGORIES is not set
DEFAULT_CATEGORIES = ('site',)

# Matches the source_messages.category column
MAX_CATEGORY_LENGTH = 255


def parse_categories(value) -> list[str]:
    """Turn a comma separated string or an iterable into a category list.

    Blank entries are dropped and duplicates removed, keeping the first
    occurrence. Names are stripped but otherwise kept as-is: categories are
    case-sensitive.
    """
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')

    categories = []
    for raw in value:
        name = (raw or '').strip()
        if name and name not in categories:
            categories.append(name)
    return categories


def validate_category(category) -> bool:
    """Check that a value can be stored as a category."""
    if not isinstance(category, str):
        return False
    return 0 < len(category) <= MAX_CATEGORY_LENGTH
