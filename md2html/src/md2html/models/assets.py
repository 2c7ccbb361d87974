from pydantic import BaseModel


class TemplateAssets(BaseModel):
    """Network addresses the rendered page loads at view time."""

    markdown_css_light: str = "https://cdnjs.cloudflare.com/ajax/libs/github-markdown-css/5.5.0/github-markdown-light.min.css"
    markdown_css_dark: str = "https://cdnjs.cloudflare.com/ajax/libs/github-markdown-css/5.5.0/github-markdown-dark.min.css"
    marked_js: str = "https://cdn.jsdelivr.net/npm/marked@12.0.0/marked.min.js"
    js_yaml_js: str = "https://cdnjs.cloudflare.com/ajax/libs/js-yaml/4.1.0/js-yaml.min.js"
    mermaid_js: str = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.esm.min.mjs"
