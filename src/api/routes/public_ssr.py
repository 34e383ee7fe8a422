"""
Public SSR Routes - server-side rendered pages with cached head metadata.

Route names follow the "Module:Presenter:action" convention; they are the
names alternate links are generated from.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from src.api.deps import get_seo_meta_manager
from src.components.seo_meta import SeoMetaManager, escape_html, escape_html_attr

router = APIRouter()


# --- HTML Rendering ---


def render_ssr_page(head_html: str | None, body_content: str = "", lang: str = "en") -> str:
    """
    Render complete SSR HTML page.

    Returns minimal HTML for crawlers with the metadata block in <head>.
    """
    return f"""<!DOCTYPE html>
<html lang="{escape_html_attr(lang)}">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    {head_html or ""}
</head>
<body>
    {body_content}
</body>
</html>"""


# --- SSR Endpoints ---


@router.get(
    "/{locale}/",
    response_class=HTMLResponse,
    name="Front:Homepage:default",
    summary="Homepage SSR",
)
def ssr_homepage(
    locale: str,
    manager: SeoMetaManager = Depends(get_seo_meta_manager),
) -> HTMLResponse:
    """Serve SSR homepage, titled by the locale's site name."""
    title = manager.get_title() or ""
    body = f"""
    <main>
        <h1>{escape_html(title)}</h1>
    </main>
    """
    return HTMLResponse(content=render_ssr_page(manager.get_html(), body, locale))


@router.get(
    "/{locale}/page/{slug}",
    response_class=HTMLResponse,
    name="Front:Page:detail",
    summary="Static page SSR",
)
def ssr_page(
    locale: str,
    slug: str,
    manager: SeoMetaManager = Depends(get_seo_meta_manager),
) -> HTMLResponse:
    """Serve SSR static page (about, contact, etc.)."""
    body = f"""
    <article>
        <h1>{escape_html(manager.get_og_title() or slug)}</h1>
        <p>{escape_html(manager.get_og_description() or "")}</p>
    </article>
    """
    return HTMLResponse(content=render_ssr_page(manager.get_html(), body, locale))
