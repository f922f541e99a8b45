import os
from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("cooklang_md", os.path.join("renderer", "templates")),
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    keep_trailing_newline=True,
)

recipe_template = env.get_template("recipe.md")
