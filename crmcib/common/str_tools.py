from crmcib.common.types import (
    StringIterable,
    StringSequence,
)


def join_multilines(strings: StringSequence) -> str:
    return "\n".join([a.strip() for a in strings if a.strip()])


def format_list(item_list: StringIterable, separator: str = ", ") -> str:
    return separator.join(sorted([f"'{item}'" for item in item_list]))


def format_optional(value, template: str = "{} ") -> str:
    return "" if not value else template.format(value)


def format_plural(depends_on, singular: str, plural: str = "") -> str:
    """
    Return a singular or plural form of a word based on a count or a list

    depends_on -- a number or a collection deciding the form
    singular -- singular form of the word
    plural -- plural form, "s" is appended to singular when not specified
    """
    count = depends_on if isinstance(depends_on, int) else len(depends_on)
    if count == 1:
        return singular
    return plural if plural else f"{singular}s"
