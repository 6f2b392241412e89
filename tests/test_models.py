import bs4
import pytest

from domain.models import DEFAULT_TITLE, Recipe
from tests.helpers import RECIPE


def soup(html: str) -> bs4.BeautifulSoup:
    return bs4.BeautifulSoup(html, features="html.parser")


def test_title() -> None:
    assert Recipe(RECIPE).title == "Tomato Basil Pasta"


def test_title_missing() -> None:
    assert Recipe("## Ingredients\n- egg").title == DEFAULT_TITLE


def test_html_element_classes() -> None:
    html = soup(Recipe(RECIPE).html)
    assert html.find("h1")["class"] == ["recipe-title"]
    assert {h["class"][0] for h in html.find_all("h2")} == {"recipe-subtitle"}
    assert html.find("ul")["class"] == ["recipe-list"]
    assert html.find("ol")["class"] == ["recipe-steps"]
    assert all(li["class"] == ["recipe-item"] for li in html.find_all("li"))
    assert html.find("strong")["class"] == ["recipe-strong"]
    assert html.find("strong").text == "fresh"


def test_html_paragraph_and_subsection() -> None:
    html = soup(Recipe("### Notes\n\nServe warm.").html)
    assert html.find("h3")["class"] == ["recipe-section-title"]
    assert html.find("p")["class"] == ["recipe-paragraph"]


def test_html_escapes_raw_html() -> None:
    html = Recipe("# Soup\n\n<script>alert(1)</script>").html
    assert "<script>" not in html


@pytest.mark.parametrize(
    "content,expected",
    (
        ("#Shakshuka\n\nEggs.", "Shakshuka"),
        ("# Shakshuka #\n\nEggs.", "Shakshuka"),
        ("## Ingredients\n\n#Shakshuka", "Shakshuka"),
        ("#\n\nEggs.", DEFAULT_TITLE),
    ),
)
def test_title_variants(content: str, expected: str) -> None:
    assert Recipe(content).title == expected
