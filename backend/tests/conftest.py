"""Shared test fixtures."""

from __future__ import annotations

import pytest


SIMPLE_SVG = '<svg viewBox="0 0 200 100"><path d="M 100 50 L 200 100"/></svg>'

HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"/>
  <path d="M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>
</svg>'''

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M4 4 L20 20"/>
</svg>'''

# Filled star, single-quoted attributes, commas between coordinates
STAR_SVG = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 50'>
  <path fill='#FFEAA7' d='M50,0 L61,18 L100,19 L68,32 L79,50 L50,40 L21,50 L32,32 L0,19 L39,18 Z'/>
</svg>"""


@pytest.fixture
def simple_svg() -> str:
    return SIMPLE_SVG


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def star_svg() -> str:
    return STAR_SVG
