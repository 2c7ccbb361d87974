import html
import logging
from pathlib import Path
from typing import Optional

from ..models.assets import TemplateAssets

logger = logging.getLogger(__name__)

# Everything inside the script module runs in the browser at view time.
HTML_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <link id="markdown-css" rel="stylesheet" href="{markdown_css_light}">
    <style>
        body {{ margin: 0; transition: background-color 0.3s ease; }}
        .markdown-body {{ box-sizing: border-box; min-width: 200px; max-width: 980px; margin: 0 auto; padding: 45px; padding-top: 60px; }}
        @media (max-width: 767px) {{ .markdown-body {{ padding: 15px; padding-top: 60px; }} }}
        .mermaid {{ display: flex; justify-content: center; margin: 2em 0; }}

        #theme-toggle {{
            position: fixed; top: 15px; right: 15px; padding: 8px 12px;
            font-size: 14px; cursor: pointer; border: 1px solid #d0d7de;
            border-radius: 6px; background-color: #f6f8fa; color: #24292f;
            box-shadow: 0 1px 0 rgba(27,31,36,0.04); transition: all 0.2s ease; z-index: 1000;
        }}
        #theme-toggle:hover {{ background-color: #f3f4f6; }}

        body.dark-mode {{ background-color: #0d1117; }}
        body.dark-mode #theme-toggle {{ background-color: #21262d; color: #c9d1d9; border-color: #30363d; }}
        body.dark-mode #theme-toggle:hover {{ background-color: #30363d; }}

        .frontmatter-header img {{ max-height: 300px; width: 100%; object-fit: cover; border-radius: 6px; margin-bottom: 1em; }}
    </style>
    <script src="{marked_js}"></script>
    <script src="{js_yaml_js}"></script>
</head>
<body class="markdown-body">
    <button id="theme-toggle">Switch to Dark Theme</button>
    <div id="content">Rendering Markdown...</div>

    <script type="module">
        import mermaid from '{mermaid_js}';

        const LIGHT_CSS = '{markdown_css_light}';
        const DARK_CSS = '{markdown_css_dark}';

        let isDarkMode = window.matchMedia && window.matchMedia('(prefers-color-scheme: dark)').matches;
        const themeToggleBtn = document.getElementById('theme-toggle');
        const markdownCss = document.getElementById('markdown-css');

        function applyTheme() {{
            markdownCss.href = isDarkMode ? DARK_CSS : LIGHT_CSS;
            document.body.classList.toggle('dark-mode', isDarkMode);
            themeToggleBtn.textContent = isDarkMode ? 'Switch to Light Theme' : 'Switch to Dark Theme';
        }}

        if (isDarkMode) applyTheme();

        const base64Markdown = "{payload}";
        const binString = atob(base64Markdown);
        const bytes = Uint8Array.from(binString, (m) => m.codePointAt(0));
        let rawMarkdown = new TextDecoder().decode(bytes);

        // Leading YAML frontmatter
        let headerHtml = '';
        if (rawMarkdown.startsWith('---\n') || rawMarkdown.startsWith('---\r\n')) {{
            const match = rawMarkdown.match(/^---\r?\n([\s\S]*?)\r?\n---\r?\n/);
            if (match) {{
                rawMarkdown = rawMarkdown.slice(match[0].length);
                try {{
                    const frontmatter = jsyaml.load(match[1]);
                    if (!frontmatter || typeof frontmatter !== 'object' || Array.isArray(frontmatter)) {{
                        throw new Error('frontmatter is not a mapping');
                    }}

                    if (frontmatter.title) document.title = frontmatter.title;

                    headerHtml += '<div class="frontmatter-header">';
                    if (frontmatter.thumbnail) {{
                        headerHtml += `<img src="${{frontmatter.thumbnail}}" alt="Thumbnail">`;
                    }}
                    if (frontmatter.title) {{
                        headerHtml += `<h1>${{frontmatter.title}}</h1>`;
                    }}
                    if (frontmatter.date) {{
                        const dateStr = frontmatter.date instanceof Date ? frontmatter.date.toISOString().slice(0, 10) : frontmatter.date;
                        headerHtml += `<p><strong>Date:</strong> ${{dateStr}}</p>`;
                    }}
                    if (frontmatter.authors) {{
                        headerHtml += `<p><strong>Authors:</strong></p><ul>`;
                        const authors = Array.isArray(frontmatter.authors) ? frontmatter.authors : [frontmatter.authors];
                        authors.forEach(author => {{
                            if (typeof author !== 'object' || author === null) {{
                                headerHtml += `<li>${{author}}</li>`;
                            }} else {{
                                const name = author.name || 'Unknown';
                                const affil = author.affiliations ? ` <em>(${{Array.isArray(author.affiliations) ? author.affiliations.join(', ') : author.affiliations}})</em>` : '';
                                headerHtml += `<li>${{name}}${{affil}}</li>`;
                            }}
                        }});
                        headerHtml += `</ul>`;
                    }}
                    headerHtml += '<hr></div>';
                }} catch (e) {{
                    headerHtml = '';
                    console.error('Failed to parse YAML frontmatter:', e);
                }}
            }}
        }}

        document.getElementById('content').innerHTML = headerHtml + marked.parse(rawMarkdown);

        document.querySelectorAll('code.language-mermaid').forEach((block) => {{
            const pre = block.parentElement;
            const div = document.createElement('div');
            div.className = 'mermaid';
            div.setAttribute('data-original-code', block.textContent);
            div.textContent = block.textContent;
            pre.replaceWith(div);
        }});

        async function renderMermaid() {{
            mermaid.initialize({{ startOnLoad: false, theme: isDarkMode ? 'dark' : 'default' }});
            document.querySelectorAll('.mermaid').forEach(el => {{
                el.removeAttribute('data-processed');
                el.textContent = el.getAttribute('data-original-code');
            }});
            try {{ await mermaid.run({{ querySelector: '.mermaid' }}); }}
            catch (error) {{ console.error('Mermaid render error:', error); }}
        }}

        renderMermaid();

        themeToggleBtn.addEventListener('click', async () => {{
            isDarkMode = !isDarkMode;
            applyTheme();
            await renderMermaid();
        }});
    </script>
</body>
</html>
"""


def render_html(title: str, payload: str, assets: Optional[TemplateAssets] = None) -> str:
    """Fill the page template with a document title and its encoded payload."""
    assets = assets or TemplateAssets()
    return HTML_TEMPLATE.format(
        title=html.escape(title, quote=False),
        payload=payload,
        **assets.model_dump(),
    )


def export_html(document: str, path: Path):
    """Write a rendered page, replacing whatever is there."""
    # Encode first so an unencodable page never truncates the target
    data = document.encode("utf-8")
    logger.debug(f"Writing {len(data)} bytes to {path}")
    with open(path, "wb") as f:
        f.write(data)
