#------------------------------------------------------------
#                         svg_view.py
#          Renders the stats card as an SVG document
#              laid out at 550x280, scaled 2x.

from html import escape
from typing import List
from ..models import RankResult, TopLanguage

CARD_WIDTH = 1100
CARD_HEIGHT = 560
LAYOUT_WIDTH = 550
LAYOUT_HEIGHT = 280
PADDING = 20
CONTENT_TOP = 80
COLUMN_GAP = 20
STATS_COLUMN_WIDTH = 196
STAT_BOX_HEIGHT = 85
STAT_BOX_GAP = 10
LANGUAGE_COLUMN_X = PADDING + STATS_COLUMN_WIDTH + COLUMN_GAP
LANGUAGE_COLUMN_RIGHT = LAYOUT_WIDTH - PADDING
LANGUAGE_ROW_TOP = 104
LANGUAGE_ROW_HEIGHT = 30
ICON_SIZE = 20
BAR_X = LANGUAGE_COLUMN_X + ICON_SIZE + 10
BAR_WIDTH = LANGUAGE_COLUMN_RIGHT - BAR_X
BADGE_BASE_WIDTH = 61
BADGE_CHAR_WIDTH = 16

COMMITS_LABEL = "COMMITS (1 YEAR)"
PULL_REQUESTS_LABEL = "PULL REQUESTS"
LANGUAGES_LABEL = "SYSTEM TECHNOLOGIES"
RANK_LABEL = "RANK"
NO_LANGUAGE_DATA_MESSAGE = "No language data available yet."
CARD_TITLE_TEMPLATE = "{name} GitHub stats"

DOCUMENT_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" '
    'viewBox="0 0 {layout_width} {layout_height}" font-family="sans-serif" role="img" aria-label="{title}">\n'
    "<title>{title}</title>\n"
    "<defs>\n{defs}\n</defs>\n"
    '<rect width="{layout_width}" height="{layout_height}" fill="#030712"/>\n'
    '<g clip-path="url(#card-clip)">\n{body}\n</g>\n'
    '<rect x="0.5" y="0.5" width="{border_width}" height="{border_height}" rx="16" fill="none" stroke="#333"/>\n'
    "</svg>\n"
)
RANK_DEFS_TEMPLATE = (
    '<clipPath id="card-clip"><rect width="{layout_width}" height="{layout_height}" rx="16"/></clipPath>\n'
    '<radialGradient id="rank-glow">'
    '<stop offset="0%" stop-color="{color}" stop-opacity="0.13"/>'
    '<stop offset="70%" stop-color="{color}" stop-opacity="0"/>'
    "</radialGradient>\n"
    '<filter id="rank-shadow" x="-50%" y="-50%" width="200%" height="200%">'
    '<feDropShadow dx="0" dy="0" stdDeviation="7.5" flood-color="{color}" flood-opacity="0.27"/></filter>\n'
    '<filter id="rank-text-glow" x="-50%" y="-50%" width="200%" height="200%">'
    '<feDropShadow dx="0" dy="0" stdDeviation="5" flood-color="{shadow_color}" flood-opacity="1"/></filter>'
)
LANGUAGE_GLOW_TEMPLATE = (
    '<filter id="language-glow-{index}" x="-20%" y="-300%" width="140%" height="700%">'
    '<feDropShadow dx="0" dy="0" stdDeviation="4" flood-color="{color}" flood-opacity="0.53"/></filter>'
)
BACKGROUND_GLOW_TEMPLATE = '<rect x="{x}" y="0" width="300" height="300" fill="url(#rank-glow)" opacity="0.5"/>'
HEADER_TEMPLATE = (
    '<text x="{x}" y="42" fill="#fff" font-size="22" font-weight="800" letter-spacing="1">{display_name}</text>\n'
    '<text x="{x}" y="58" fill="#8899a6" font-size="10" font-weight="600" letter-spacing="2">{subtitle}</text>'
)
RANK_BADGE_TEMPLATE = (
    '<rect x="{x}" y="22" width="{width}" height="34" rx="8" fill="#000" fill-opacity="0.5" '
    'stroke="{color}" stroke-width="2" filter="url(#rank-shadow)"/>\n'
    '<text x="{text_x}" y="44" fill="{color}" font-size="12" font-weight="700">{rank_text}</text>\n'
    '<text x="{label_x}" y="48" fill="{color}" font-size="24" font-weight="900" '
    'filter="url(#rank-text-glow)">{label}</text>'
)
STAT_BOX_TEMPLATE = (
    '<rect x="{x}" y="{y}" width="{width}" height="{height}" rx="8" fill="#fff" fill-opacity="0.03" '
    'stroke="#fff" stroke-opacity="0.08"/>\n'
    '<text x="{text_x}" y="{label_y}" fill="#8899a6" font-size="9" font-weight="700" letter-spacing="1">{label}</text>\n'
    '<text x="{text_x}" y="{value_y}" fill="#fff" font-size="24" font-weight="800" letter-spacing="-1">{value}</text>'
)
SECTION_LABEL_TEMPLATE = (
    '<text x="{x}" y="{y}" fill="#8899a6" font-size="9" font-weight="700" letter-spacing="1">{label}</text>'
)
LANGUAGE_ROW_TEMPLATE = (
    '<image href="{icon_url}" x="{icon_x}" y="{y}" width="{icon_size}" height="{icon_size}" opacity="0.9"/>\n'
    '<text x="{bar_x}" y="{text_y}" fill="#e5e7eb" font-size="10" font-weight="600">{name}</text>\n'
    '<text x="{right_x}" y="{text_y}" fill="#8899a6" font-size="10" text-anchor="end">{percent}%</text>\n'
    '<rect x="{bar_x}" y="{bar_y}" width="{bar_width}" height="4" rx="2" fill="#1f2937"/>\n'
    '<rect x="{bar_x}" y="{bar_y}" width="{fill_width}" height="4" rx="2" fill="{color}" '
    'filter="url(#language-glow-{index})"/>'
)
EMPTY_LANGUAGES_TEMPLATE = '<text x="{x}" y="{y}" fill="#8899a6" font-size="10">{message}</text>'

def _attr(value) -> str:
    return escape(str(value), quote=True)

def _render_defs(rank: RankResult, languages: List[TopLanguage]) -> str:
    parts = [
        RANK_DEFS_TEMPLATE.format(
            layout_width=LAYOUT_WIDTH,
            layout_height=LAYOUT_HEIGHT,
            color=_attr(rank.color),
            shadow_color=_attr(rank.shadow_color),
        )
    ]
    parts.extend(
        LANGUAGE_GLOW_TEMPLATE.format(index=index, color=_attr(language.color))
        for index, language in enumerate(languages)
    )
    return "\n".join(parts)

# This function does render the display name, subtitle and rank badge.
# The badge grows with the label so "S+" keeps the same padding as "C".
def render_header(display_name: str, subtitle: str, rank: RankResult) -> str:
    badge_width = BADGE_BASE_WIDTH + BADGE_CHAR_WIDTH * len(rank.label)
    badge_x = LANGUAGE_COLUMN_RIGHT - badge_width
    return "\n".join(
        [
            HEADER_TEMPLATE.format(
                x=PADDING,
                display_name=_attr(display_name.upper()),
                subtitle=_attr(subtitle),
            ),
            RANK_BADGE_TEMPLATE.format(
                x=badge_x,
                width=badge_width,
                color=_attr(rank.color),
                text_x=badge_x + 12,
                label_x=badge_x + 49,
                rank_text=RANK_LABEL,
                label=_attr(rank.label),
            ),
        ]
    )

def render_stat_boxes(commits: int, pull_requests: int) -> str:
    boxes = []
    for index, (label, value) in enumerate([(COMMITS_LABEL, commits), (PULL_REQUESTS_LABEL, pull_requests)]):
        y = CONTENT_TOP + index * (STAT_BOX_HEIGHT + STAT_BOX_GAP)
        boxes.append(
            STAT_BOX_TEMPLATE.format(
                x=PADDING,
                y=y,
                width=STATS_COLUMN_WIDTH,
                height=STAT_BOX_HEIGHT,
                text_x=PADDING + 12,
                label_y=y + 32,
                value_y=y + 62,
                label=label,
                value=_attr(value),
            )
        )
    return "\n".join(boxes)

# This function does render the language column rows.
# It emits an empty-state message when there is no language data.
def render_language_rows(languages: List[TopLanguage]) -> str:
    lines = [SECTION_LABEL_TEMPLATE.format(x=LANGUAGE_COLUMN_X, y=CONTENT_TOP + 9, label=LANGUAGES_LABEL)]
    if not languages:
        lines.append(
            EMPTY_LANGUAGES_TEMPLATE.format(x=LANGUAGE_COLUMN_X, y=LANGUAGE_ROW_TOP + 16, message=NO_LANGUAGE_DATA_MESSAGE)
        )
        return "\n".join(lines)

    for index, language in enumerate(languages):
        y = LANGUAGE_ROW_TOP + index * LANGUAGE_ROW_HEIGHT
        fill_width = BAR_WIDTH * max(0, min(language.percent, 100)) / 100
        lines.append(
            LANGUAGE_ROW_TEMPLATE.format(
                icon_url=_attr(language.icon_url),
                icon_x=LANGUAGE_COLUMN_X,
                icon_size=ICON_SIZE,
                y=y,
                text_y=y + 9,
                bar_x=BAR_X,
                bar_y=y + 14,
                bar_width=BAR_WIDTH,
                fill_width=f"{fill_width:.2f}",
                right_x=LANGUAGE_COLUMN_RIGHT,
                name=_attr(language.name),
                percent=language.percent,
                color=_attr(language.color),
                index=index,
            )
        )
    return "\n".join(lines)

# This function does render the complete stats card document.
# Output is deterministic for identical inputs.
def render_card(
    display_name: str,
    subtitle: str,
    rank: RankResult,
    commits: int,
    pull_requests: int,
    languages: List[TopLanguage],
) -> str:
    body = "\n".join(
        [
            BACKGROUND_GLOW_TEMPLATE.format(x=LAYOUT_WIDTH - 300),
            render_header(display_name, subtitle, rank),
            render_stat_boxes(commits, pull_requests),
            render_language_rows(languages),
        ]
    )
    return DOCUMENT_TEMPLATE.format(
        width=CARD_WIDTH,
        height=CARD_HEIGHT,
        layout_width=LAYOUT_WIDTH,
        layout_height=LAYOUT_HEIGHT,
        border_width=LAYOUT_WIDTH - 1,
        border_height=LAYOUT_HEIGHT - 1,
        title=_attr(CARD_TITLE_TEMPLATE.format(name=display_name)),
        defs=_render_defs(rank, languages),
        body=body,
    )
