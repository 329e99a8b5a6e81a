from __future__ import annotations

import pytest

from esyt_cli.core.constants import Framework
from esyt_cli.packages import (
    NPM_LABELS,
    map_npm_to_label,
    package_choices,
    resolve_package_selection,
)


@pytest.mark.parametrize(
    ("identifier", "label"),
    [
        ("tailwindcss", "TailwindCSS"),
        ("dotenv", "DotENV"),
        ("react-router", "React Router"),
        ("react-router-dom", "React Router"),
        ("@next/font", "@next/font"),
    ],
)
def test_known_identifiers_map_to_labels(identifier, label):
    assert map_npm_to_label(identifier) == label


def test_unknown_identifier_has_no_label():
    assert map_npm_to_label("left-pad") is None
    assert map_npm_to_label("TailwindCSS") is None


def test_label_table_is_read_only():
    with pytest.raises(TypeError):
        NPM_LABELS["left-pad"] = "Left Pad"  # type: ignore[index]


def test_resolve_package_selection_keeps_order_and_raw_names():
    assert resolve_package_selection(["axios", "left-pad", "framer-motion"]) == [
        "Axios",
        "left-pad",
        "Framer Motion",
    ]


def test_package_choices_per_framework():
    assert "React Router" in package_choices(Framework.VITE)
    assert "React Router" not in package_choices(Framework.NEXTJS)
    assert "next-pwa" in package_choices("NextJS")
    assert package_choices(None) == ()
