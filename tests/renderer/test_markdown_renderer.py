import pytest

from typing import Optional

from textwrap import dedent

from cooklang_md.recipe import RecipeDocument, Ingredient

from cooklang_md.compiler import compile_recipe

from cooklang_md.images import NO_IMAGE

from cooklang_md.renderer.markdown import (
    NO_INGREDIENTS,
    NO_EQUIPMENT,
    NO_STEPS,
    encode_image_filename,
    fallback_encode_image_filename,
    source_domain,
    ingredients_header,
    render_recipe,
)


class TestEncodeImageFilename:
    @pytest.mark.parametrize(
        "filename, exp",
        [
            ("tomato_soup.png", "tomato_soup.png"),
            (NO_IMAGE, "no-image.png"),
            ("tomato soup.png", "tomato%20soup.png"),
            ("crème brûlée.jpg", "cr%C3%A8me%20br%C3%BBl%C3%A9e.jpg"),
            # Reserved characters are encoded too
            ("a&b (1).png", "a%26b%20%281%29.png"),
            ("smørrebrød.png", "sm%C3%B8rrebr%C3%B8d.png"),
        ],
    )
    def test_quoted(self, filename: str, exp: str) -> None:
        assert encode_image_filename(filename) == exp

    def test_undecodable_filename_uses_fallback(self) -> None:
        # An undecodable 0xFF byte, as represented by os.fsdecode
        assert encode_image_filename("crème\udcff.png") == "cr%C3%A8me%FF.png"


@pytest.mark.parametrize(
    "filename, exp",
    [
        ("plain.png", "plain.png"),
        ("tomato soup.png", "tomato%20soup.png"),
        ("pâte à crêpes.png", "p%C3%A2te%20%C3%A0%20cr%C3%AApes.png"),
        ("Bûche de Noël.jpg", "B%C3%BBche%20de%20No%C3%ABl.jpg"),
        ("straße.png", "stra%C3%9Fe.png"),
        # Characters outside the substitution table
        ("smørrebrød.png", "sm%C3%B8rrebr%C3%B8d.png"),
        ("\udcff.png", "%FF.png"),
    ],
)
def test_fallback_encode_image_filename(filename: str, exp: str) -> None:
    assert fallback_encode_image_filename(filename) == exp


@pytest.mark.parametrize(
    "url, exp",
    [
        ("https://example.com/recipe", "example.com"),
        ("https://example.com", "example.com"),
        ("http://www.example.com/a/b/c?d=e", "www.example.com"),
        ("https://example.com:8080/x", "example.com:8080"),
        # No scheme
        ("example.com/recipe", ""),
    ],
)
def test_source_domain(url: str, exp: str) -> None:
    assert source_domain(url) == exp


@pytest.mark.parametrize(
    "servings, exp",
    [
        ("4", "## Ingrédients (Pour 4)"),
        ("2 personnes", "## Ingrédients (Pour 2 personnes)"),
        ("", "## Ingrédients"),
        (None, "## Ingrédients"),
    ],
)
def test_ingredients_header(servings: Optional[str], exp: str) -> None:
    assert ingredients_header(servings) == exp


class TestRenderRecipe:
    def test_complete(self) -> None:
        recipe = RecipeDocument(
            title="tomato soup",
            servings="4",
            source="https://example.com/recipe",
            ingredients=[Ingredient("onion", "1"), Ingredient("tomatoes", "800 g")],
            equipment=["saucepan"],
            steps=["1. Fry onion.", "2. Add tomatoes."],
        )
        assert render_recipe(recipe, "tomato soup.jpg") == dedent(
            """\
            # tomato soup

            ![image](tomato%20soup.jpg)

            Source: [example.com](https://example.com/recipe)

            ## Ingrédients (Pour 4)

            - onion : 1
            - tomatoes : 800 g

            ## Matériel

            - saucepan

            ## Étapes

            1. Fry onion.
            2. Add tomatoes.
            """
        )

    def test_empty(self) -> None:
        recipe = RecipeDocument(title="tomato soup")
        assert render_recipe(recipe, NO_IMAGE) == dedent(
            """\
            # tomato soup

            ![image](no-image.png)

            ## Ingrédients

            - Aucun ingrédient spécifié

            ## Matériel

            - Aucun matériel spécifié

            ## Étapes

            Aucune étape spécifiée
            """
        )

    def test_no_ingredients_placeholder(self) -> None:
        recipe = compile_recipe("Boil the #kettle{}.", "tea")
        markdown = render_recipe(recipe, NO_IMAGE)
        section = markdown.split("## Ingrédients\n\n")[1].split("\n\n")[0]
        assert section == NO_INGREDIENTS

    def test_placeholders_are_exact(self) -> None:
        markdown = render_recipe(RecipeDocument(title="x"), NO_IMAGE)
        assert f"\n{NO_INGREDIENTS}\n" in markdown
        assert f"\n{NO_EQUIPMENT}\n" in markdown
        assert markdown.endswith(f"\n{NO_STEPS}\n")

    def test_servings_and_source_from_metadata(self) -> None:
        recipe = compile_recipe(
            ">> servings: 4\n>> source: https://example.com/recipe\nBoil.", "soup"
        )
        markdown = render_recipe(recipe, NO_IMAGE)
        assert "\n## Ingrédients (Pour 4)\n" in markdown
        assert "\nSource: [example.com](https://example.com/recipe)\n" in markdown

    def test_markup_characters_are_not_escaped(self) -> None:
        recipe = RecipeDocument(title="Fish & <Chips>", steps=["1. Salt & serve."])
        markdown = render_recipe(recipe, NO_IMAGE)
        assert markdown.startswith("# Fish & <Chips>\n")
        assert "1. Salt & serve." in markdown
