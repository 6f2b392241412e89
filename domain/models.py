import re

import bs4
import markdown2  # pyright: ignore[reportMissingTypeStubs]


DEFAULT_TITLE = "Your recipe"

TITLE_RE = re.compile(r"^#(?!#)[ \t]*(?P<title>\S.*?)[ \t#]*$", re.MULTILINE)

# Element -> css class, applied to the rendered recipe.
ELEMENT_CLASSES = {
    "h1": "recipe-title",
    "h2": "recipe-subtitle",
    "h3": "recipe-section-title",
    "ul": "recipe-list",
    "ol": "recipe-steps",
    "li": "recipe-item",
    "p": "recipe-paragraph",
    "strong": "recipe-strong",
}


def style_html(html: str, classes: dict[str, str] | None = None) -> str:
    classes = ELEMENT_CLASSES if classes is None else classes
    soup = bs4.BeautifulSoup(html, features="html.parser")
    for tag, cls in classes.items():
        for el in soup.find_all(tag):
            el["class"] = cls
    return str(soup)


class Recipe:
    def __init__(self, content: str) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"<Recipe(title={self.title})>"

    def __str__(self) -> str:
        return self.content

    @property
    def title(self) -> str:
        match = TITLE_RE.search(self.content)
        if match is None:
            return DEFAULT_TITLE
        return match.group("title")

    @property
    def html(self) -> str:
        html = markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.content,
            extras=["fenced-code-blocks", "tables"],
            safe_mode="escape",
        )
        return style_html(str(html))
