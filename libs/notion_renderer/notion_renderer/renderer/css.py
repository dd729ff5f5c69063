"""
Feuille de style minimale — classes utilitaires posées par le renderer HTML.
"""

PAGE_CSS = """
*,*::before,*::after{box-sizing:border-box}
body{margin:0;font-family:system-ui,-apple-system,"Segoe UI",Roboto,sans-serif;line-height:1.6;color:#111827}
article{max-width:768px;margin:0 auto;padding:32px 16px}
h1{font-size:2rem;margin:1.5rem 0 1rem}
h2{font-size:1.5rem;margin:1.25rem 0 .75rem}
h3{font-size:1.25rem;margin:1rem 0 .5rem}
pre{overflow-x:auto;background:#f9fafb;padding:12px;border-radius:6px}
li{margin-left:1.25rem}
.font-bold{font-weight:700}
.italic{font-style:italic}
.line-through{text-decoration:line-through}
.underline{text-decoration:underline}
.line-through.underline{text-decoration:line-through underline}
.bg-gray-100{background-color:#f3f4f6;font-family:ui-monospace,SFMono-Regular,Menlo,monospace}
.bg-blue-100{background-color:#dbeafe}
.p-1{padding:.25rem}
.p-4{padding:1rem}
.rounded-md{border-radius:.375rem}
""".strip()


def generate_page_css() -> str:
    """CSS complet d'une page de documentation."""
    return PAGE_CSS
