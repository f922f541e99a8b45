import pytest

from io import StringIO

from cooklang_md.conversion.progress import ProgressBar


@pytest.mark.parametrize(
    "done, total, exp",
    [
        (0, 2, "[" + " " * 50 + "] 0% (0/2)"),
        (1, 2, "[" + "=" * 25 + " " * 25 + "] 50% (1/2)"),
        (2, 2, "[" + "=" * 50 + "] 100% (2/2)"),
        # Percentages round down
        (1, 3, "[" + "=" * 16 + " " * 34 + "] 33% (1/3)"),
        (2, 3, "[" + "=" * 33 + " " * 17 + "] 66% (2/3)"),
        # Nothing to do
        (0, 0, "[" + "=" * 50 + "] 100% (0/0)"),
    ],
)
def test_format(done: int, total: int, exp: str) -> None:
    assert ProgressBar(StringIO()).format(done, total) == exp


def test_width() -> None:
    assert ProgressBar(StringIO(), width=10).format(1, 2) == "[=====     ] 50% (1/2)"


def test_drawing() -> None:
    stream = StringIO()
    bar = ProgressBar(stream, width=4)

    bar(0, 2)
    assert stream.getvalue() == "Converting 2 cooklang files...\n\r[    ] 0% (0/2)"

    bar(1, 2)
    bar(2, 2)
    bar.finish()
    assert stream.getvalue() == (
        "Converting 2 cooklang files...\n"
        "\r[    ] 0% (0/2)"
        "\r[==  ] 50% (1/2)"
        "\r[====] 100% (2/2)"
        "\n"
    )
