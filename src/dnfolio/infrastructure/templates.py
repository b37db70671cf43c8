"""Shared Jinja2 template loading with per-site override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    select_autoescape,
)


def build_template_environment(group: str, *, site_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with site overrides before packaged defaults.

    Overrides are loaded from ``.dnfolio/templates/`` inside the site root,
    either namespaced (``.dnfolio/templates/feed/``) or flat.
    XML and HTML templates are autoescaped.
    """

    loaders: list[BaseLoader] = []
    if site_root is not None:
        template_root = site_root / ".dnfolio" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("dnfolio", f"templates/{group}"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(
            enabled_extensions=("xml", "html", "xml.j2", "html.j2"),
            default_for_string=False,
        ),
        keep_trailing_newline=True,
    )
