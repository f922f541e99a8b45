from setuptools import setup, find_packages

setup(
    name="cooklang_md",
    version="1.0",
    packages=find_packages(include=["cooklang_md", "cooklang_md.*"]),
    package_data={
        "cooklang_md.parser": ["grammar.peg"],
        "cooklang_md.renderer.templates": ["*.md"],
    },
    description="A tool for converting Cooklang recipes into Markdown documents.",
    install_requires=["peggie>=0.2.0", "jinja2", "marko"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "cooklang-md=cooklang_md.scripts.cooklang_md:main",
        ],
    },
)
