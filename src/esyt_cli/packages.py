"""Package selector lookups shared with the package-selection step."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from esyt_cli.core.constants import Framework

NPM_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "tailwindcss": "TailwindCSS",
        "dotenv": "DotENV",
        "react-icons": "React Icons",
        "framer-motion": "Framer Motion",
        "ogl": "OGL",
        "axios": "Axios",
        "firebase": "Firebase",
        "clerk": "Clerk",
        "appwrite": "Appwrite",
        "prisma": "Prisma",
        "react-router": "React Router",
        "react-router-dom": "React Router",
        "next-auth": "next-auth",
        "@next/font": "@next/font",
        "next-seo": "next-seo",
        "next-sitemap": "next-sitemap",
        "next-pwa": "next-pwa",
    }
)

# Labels offered by the interactive package picker, per framework.
PACKAGE_CHOICES: Mapping[Framework, tuple[str, ...]] = MappingProxyType(
    {
        Framework.VITE: (
            "TailwindCSS",
            "React Router",
            "React Icons",
            "Framer Motion",
            "OGL",
            "DotENV",
            "Axios",
            "Firebase",
            "Clerk",
            "Appwrite",
            "Prisma",
        ),
        Framework.NEXTJS: (
            "TailwindCSS",
            "React Icons",
            "Framer Motion",
            "DotENV",
            "Axios",
            "Firebase",
            "Clerk",
            "Appwrite",
            "Prisma",
            "next-auth",
            "@next/font",
            "next-seo",
            "next-sitemap",
            "next-pwa",
        ),
    }
)


def map_npm_to_label(token: str) -> str | None:
    """Return the display label for a known npm identifier, else ``None``."""
    return NPM_LABELS.get(token)


def package_choices(framework: Framework | str | None) -> tuple[str, ...]:
    if framework is None:
        return ()
    return PACKAGE_CHOICES.get(framework, ())


def resolve_package_selection(npm_packages: Iterable[str]) -> list[str]:
    """Map identifiers to labels, keeping unknown identifiers verbatim.

    Unknown identifiers are installed as-is by the scaffolding step.
    """
    return [map_npm_to_label(name) or name for name in npm_packages]


__all__ = [
    "NPM_LABELS",
    "PACKAGE_CHOICES",
    "map_npm_to_label",
    "package_choices",
    "resolve_package_selection",
]
