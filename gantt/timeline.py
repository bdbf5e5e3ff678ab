# gantt/timeline.py — HTML/SVG rendering of a TimelineLayout
# • Fixed label column + horizontally scrolling pane
# • Month band row, day row for week/month zoom
# • SVG paint order follows view.draw_list (items last, so they sit on top)
# • Tooltip on pointer hover, initial scroll from the viewport controller

import json
from html import escape

import streamlit.components.v1 as components

from gantt.geometry import ROW_HEIGHT, HEADER_HEIGHT, LABEL_WIDTH
from gantt.glyphs import (
    DurationBar, Diamond, GuideLine, CircleMarker,
    icon_for, tooltip_for, ITEM_COLORS, LEGEND,
)
from gantt.styles import BORDER, ACCENT, ROW_SHADE, HEADER_BG, WEEKEND_BG, TODAY_BG
from gantt.view import draw_list, GRID, ROW_BACKGROUND, ROW_DIVIDER, TODAY, ITEM, EMPTY_MESSAGE

DAY_ROW_HEIGHT = 25

# the iframe does not see page CSS, so the empty state carries its own
EMPTY_HTML = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    html, body { margin:0; padding:0; background:transparent; font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; }
    .empty { padding: 2rem 1rem; color: #64748b; text-align: center; }
    .empty .icon { font-size: 48px; opacity: .3; }
  </style>
</head>
<body>
  <div class="empty"><div class="icon">📅</div><p>__MESSAGE__</p></div>
</body>
</html>
"""


def _n(v) -> str:
    # compact numbers for SVG attributes
    return f"{v:g}" if isinstance(v, float) else str(v)


def _opacity(glyph) -> str:
    return "1" if glyph.hovered else "0.8"


def _glyph_svg(item, glyph) -> str:
    tip = escape(json.dumps(tooltip_for(item, glyph)), quote=True)
    common = f'class="glyph" data-id="{escape(item.id, quote=True)}" data-tip="{tip}"'

    if isinstance(glyph, DurationBar):
        cx, cy, r = glyph.cap
        return (
            f'<g {common}>'
            f'<rect x="{_n(glyph.x)}" y="{_n(glyph.top)}" width="{_n(glyph.width)}" height="{glyph.height}" rx="4" '
            f'fill="{glyph.color}" opacity="{_opacity(glyph)}"/>'
            f'<circle cx="{_n(cx)}" cy="{_n(cy)}" r="{r}" fill="white" stroke="{glyph.color}" stroke-width="2"/>'
            f'</g>'
        )
    if isinstance(glyph, Diamond):
        pts = " ".join(f"{_n(x)},{_n(y)}" for x, y in glyph.points)
        return f'<g {common}><polygon points="{pts}" fill="{glyph.color}" opacity="{_opacity(glyph)}"/></g>'
    if isinstance(glyph, GuideLine):
        m = glyph.marker
        return (
            f'<g {common}>'
            f'<line x1="{_n(glyph.x)}" y1="0" x2="{_n(glyph.x)}" y2="{_n(glyph.height)}" stroke="{glyph.color}" '
            f'stroke-width="2" stroke-dasharray="6,3" opacity="0.6" pointer-events="none"/>'
            f'<circle cx="{_n(m.x)}" cy="{_n(m.y)}" r="{m.radius}" fill="{glyph.color}"/>'
            f'</g>'
        )
    if isinstance(glyph, CircleMarker):
        return (
            f'<g {common}><circle cx="{_n(glyph.x)}" cy="{_n(glyph.y)}" r="{glyph.radius}" '
            f'fill="{glyph.color}" opacity="{_opacity(glyph)}"/></g>'
        )
    raise TypeError(f"unsupported glyph: {glyph!r}")


def render_svg(layout) -> str:
    if layout.is_empty:
        return ""
    geometry = layout.geometry
    width = geometry.total_width
    height = geometry.content_height(len(layout.items))
    parts = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" style="display:block">']
    for layer, p in draw_list(layout):
        if layer == GRID:
            parts.append(f'<line class="grid" x1="{p["x"]}" y1="0" x2="{p["x"]}" y2="{p["y2"]}" stroke="{BORDER}" stroke-width="1"/>')
        elif layer == ROW_BACKGROUND:
            fill = ROW_SHADE if p["shaded"] else "transparent"
            parts.append(f'<rect class="row-bg" x="0" y="{p["y"]}" width="{p["width"]}" height="{p["height"]}" fill="{fill}"/>')
        elif layer == ROW_DIVIDER:
            parts.append(f'<line class="row-divider" x1="0" y1="{p["y"]}" x2="{p["x2"]}" y2="{p["y"]}" stroke="{BORDER}" stroke-width="1"/>')
        elif layer == TODAY:
            parts.append(f'<line class="today" x1="{p["x"]}" y1="0" x2="{p["x"]}" y2="{p["y2"]}" stroke="{ACCENT}" stroke-width="2"/>')
        elif layer == ITEM:
            parts.append(_glyph_svg(*p))
    parts.append("</svg>")
    return "".join(parts)


def render_header(layout) -> str:
    headers = layout.headers
    show_days = layout.geometry.zoom.show_day_header
    day_width = layout.geometry.day_width
    month_h = f"{DAY_ROW_HEIGHT}px" if show_days else "100%"
    out = [f'<div class="months" style="height:{month_h}">']
    for band in headers.months:
        out.append(
            f'<div class="month" style="left:{band.x}px;width:{band.width}px">{escape(band.label)}</div>'
        )
    out.append("</div>")
    if show_days:
        out.append(f'<div class="days" style="height:{DAY_ROW_HEIGHT}px">')
        for day in headers.days:
            cls = "day today" if day.is_today else ("day weekend" if day.is_weekend else "day")
            out.append(
                f'<div class="{cls}" title="{escape(day.day_name)}" '
                f'style="left:{day.x}px;width:{day_width}px">{escape(day.label)}</div>'
            )
        out.append("</div>")
    return "".join(out)


def render_labels(layout, rows) -> str:
    out = ['<div class="labels-head">Item</div>']
    for item, row in zip(layout.items, rows):
        cls = "label hovered" if row["hovered"] else "label"
        out.append(
            f'<div class="{cls}" data-id="{escape(row["id"], quote=True)}">'
            f'<span class="icon" style="color:{row["color"]}">{icon_for(item)}</span>'
            f'<span class="name">{escape(row["name"])}</span></div>'
        )
    return "".join(out)


def render_legend() -> str:
    spans = "".join(
        f'<span><span class="swatch" style="background:{ITEM_COLORS[kind]}"></span>{label}</span>'
        for label, kind, _icon in LEGEND
    )
    return f'<div class="legend">{spans}</div>'


def build_html(layout, rows) -> str:
    if layout.is_empty:
        return EMPTY_HTML.replace("__MESSAGE__", escape(EMPTY_MESSAGE))

    width = layout.geometry.total_width
    html = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <style>
    html, body { margin:0; padding:0; background:transparent; font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; }
    #wrap { position:relative; display:flex; border:1px solid __BORDER__; border-radius:8px; overflow:hidden; background:#fff; }
    #labels { width:__LABEL_W__px; flex-shrink:0; border-right:1px solid __BORDER__; background:__HEADER_BG__; }
    .labels-head { height:__HEADER_H__px; box-sizing:border-box; padding:6px; border-bottom:1px solid __BORDER__;
                   display:flex; align-items:flex-end; font-weight:600; font-size:12px; }
    .label { height:__ROW_H__px; box-sizing:border-box; padding:0 6px; display:flex; align-items:center; gap:4px;
             border-bottom:1px solid __BORDER__; font-size:12px; white-space:nowrap; overflow:hidden; }
    .label.hovered { background:__WEEKEND_BG__; }
    .label .name { overflow:hidden; text-overflow:ellipsis; }
    #pane { flex:1; overflow-x:auto; overflow-y:hidden; }
    #canvas { width:__WIDTH__px; min-width:100%; }
    #header { height:__HEADER_H__px; box-sizing:border-box; border-bottom:1px solid __BORDER__; }
    .months, .days { position:relative; }
    .months { border-bottom:1px solid __BORDER__; box-sizing:border-box; }
    .month { position:absolute; top:0; height:100%; box-sizing:border-box; display:flex; align-items:center;
             padding-left:6px; font-size:11px; font-weight:600; border-right:1px solid __BORDER__; background:__HEADER_BG__; }
    .day { position:absolute; top:0; height:100%; display:flex; align-items:center; justify-content:center; font-size:9px; color:#64748b; }
    .day.weekend { background:__WEEKEND_BG__; color:#94a3b8; }
    .day.today { background:__TODAY_BG__; color:__ACCENT__; font-weight:700; }
    .glyph { cursor:pointer; }
    .glyph:hover rect, .glyph:hover polygon, .glyph:hover circle { opacity:1; }
    #tip { position:absolute; display:none; pointer-events:none; transform:translateX(-50%); z-index:100; min-width:150px;
           background:#fff; border:1px solid __BORDER__; border-radius:8px; padding:6px; box-shadow:0 4px 12px rgba(0,0,0,.2); }
    #tip .t-name { font-size:12px; font-weight:600; }
    #tip .t-date { font-size:11px; color:#64748b; }
    #tip .t-status { font-size:10px; font-weight:600; margin-top:2px; }
  </style>
</head>
<body>
  <div id="wrap">
    <div id="labels">__LABELS__</div>
    <div id="pane">
      <div id="canvas">
        <div id="header">__HEADER__</div>
        __SVG__
      </div>
    </div>
    <div id="tip"></div>
  </div>
  <script>
    const SCROLL = __SCROLL__;
    const pane = document.getElementById('pane');
    pane.scrollLeft = SCROLL;

    const tip = document.getElementById('tip');
    function esc(s){ return String(s == null ? '' : s).replace(/[&<>"]/g, c => ({'&':'&amp;','<':'&lt;','>':'&gt;','"':'&quot;'}[c])); }
    document.querySelectorAll('.glyph').forEach(g => {
      g.addEventListener('mouseenter', () => {
        const d = JSON.parse(g.dataset.tip);
        tip.innerHTML = '<div class="t-name">' + esc(d.name) + '</div><div class="t-date">' + esc(d.date) + '</div>' +
          (d.status ? '<div class="t-status" style="color:' + d.status_color + '">' + esc(d.status) + '</div>' : '');
        tip.style.left = (__LABEL_W__ + d.x - pane.scrollLeft) + 'px';
        tip.style.top = (__HEADER_H__ + d.y - 60) + 'px';
        tip.style.display = 'block';
      });
      g.addEventListener('mouseleave', () => { tip.style.display = 'none'; });
    });
  </script>
</body>
</html>
    """
    return html.replace("__WIDTH__", str(width)) \
               .replace("__LABEL_W__", str(LABEL_WIDTH)) \
               .replace("__HEADER_H__", str(HEADER_HEIGHT)) \
               .replace("__ROW_H__", str(ROW_HEIGHT)) \
               .replace("__BORDER__", BORDER) \
               .replace("__HEADER_BG__", HEADER_BG) \
               .replace("__WEEKEND_BG__", WEEKEND_BG) \
               .replace("__TODAY_BG__", TODAY_BG) \
               .replace("__ACCENT__", ACCENT) \
               .replace("__SCROLL__", json.dumps(layout.scroll_left)) \
               .replace("__SVG__", render_svg(layout)) \
               .replace("__HEADER__", render_header(layout)) \
               .replace("__LABELS__", render_labels(layout, rows))


def render_timeline(layout, rows, height_px: int | None = None):
    html = build_html(layout, rows)
    if layout.is_empty:
        components.html(html, height=160, scrolling=False)
        return
    default_height = HEADER_HEIGHT + ROW_HEIGHT * len(layout.items) + 24
    H = int(height_px or default_height)
    components.html(html, height=H, scrolling=False)
