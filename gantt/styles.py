GLOBAL_CSS = """
<style>
:root {
  --font: system-ui, -apple-system, Segoe UI, Roboto, 'Helvetica Neue', Arial, sans-serif;
}
html, body, [class^="css"] { font-family: var(--font); }
.block-container { padding-top: 1.5rem; }
.legend { display:flex; gap:14px; font-size:11px; color:#64748b; }
.legend .swatch { display:inline-block; width:10px; height:10px; border-radius:2px; margin-right:4px; }
</style>
"""

BORDER = "#e2e8f0"
ACCENT = "#ff6b35"
ROW_SHADE = "rgba(0,0,0,0.02)"
HEADER_BG = "#f8fafc"
WEEKEND_BG = "#f1f5f9"
TODAY_BG = "rgba(255, 107, 53, 0.1)"
