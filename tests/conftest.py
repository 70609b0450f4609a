from __future__ import annotations

import pytest

SAMPLE_CSS = """\
@import "tailwindcss";
@import "@radflow/theme-rad-os";

@font-face {
  font-family: 'Mondwest';
  src: url('/fonts/Mondwest-Regular.woff2') format('woff2');
  font-weight: 400;
  font-style: normal;
  font-display: swap;
}

@font-face {
  font-family: 'Joystix Monospace';
  src: url('/fonts/joystix_monospace.ttf') format('truetype');
  font-weight: 400;
  font-style: normal;
  font-display: swap;
}

/* marker: before theme */
@theme inline {
  --color-sun-yellow: #FCE184;
  --color-black: #0F0E0C;
  --color-cream: #FEF8E2;
  --color-neutral-lightest: #F5F5F5;
  --color-success-green: #22C55E;
  --color-warning-yellow: var(--color-sun-yellow);
  --font-mondwest: 'Mondwest';
}

@theme {
  --color-sun-yellow: #FCE184;
  --radius-none: 0;
  --radius-sm: 0.25rem;
  --radius-md: 0.5rem;
  --shadow-card: 2px 2px 0 0 var(--color-black);
}
/* marker: after theme */

.dark {
  --color-surface: var(--color-black);
  --color-content: var(--color-cream);
}

:root {
  --app-gutter: 1rem;
}

@layer base {
  h1 {
    @apply font-mondwest text-4xl font-bold leading-tight text-black;
  }

  p {
    @apply font-joystixmonospace text-base font-normal text-black underline;
  }
}

body {
  margin: 0;
}
"""


@pytest.fixture
def sample_css() -> str:
    """A globals.css with every managed region plus unmanaged rules around them."""
    return SAMPLE_CSS


@pytest.fixture
def stylesheet(tmp_path, sample_css):
    """The sample stylesheet written to app/globals.css under a temp project root."""
    path = tmp_path / "app" / "globals.css"
    path.parent.mkdir(parents=True)
    path.write_text(sample_css, encoding="utf-8")
    return path
