"""
Layout HTML commun — <head> + feuille de style + contenu.
"""
from notion_renderer import generate_page_css

SITE_TITLE       = "wetracked.io - Documentation"
SITE_DESCRIPTION = "Documentation for wetracked.io"


def render_layout(body: str, title: str = SITE_TITLE, description: str = SITE_DESCRIPTION) -> str:
    """Enveloppe un fragment HTML dans le document complet."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <meta name="description" content="{description}">
  <style>{generate_page_css()}</style>
</head>
<body>
{body}
</body>
</html>"""
