"""Static file utilities for HTML output."""

from pathlib import Path
from typing import Any

from jinja2 import Environment

# Path to the static directory
STATIC_DIR = Path(__file__).parent


def load_template(name: str) -> str:
    """Load an HTML template from the templates directory.

    Args:
        name: Template filename (e.g., 'page.html')

    Returns:
        Template content as string

    Raises:
        FileNotFoundError: If the template doesn't exist
    """
    template_path = STATIC_DIR / "templates" / name
    return template_path.read_text(encoding="utf-8")


def render_template(name: str, **context: Any) -> str:
    """Load and render a Jinja template with the given context.

    Values are inserted without autoescaping; callers escape untrusted text
    and pass pre-rendered fragments as-is.

    Example:
        html = render_template('page.html', title='Output', outputs=[...])
    """
    env = Environment(autoescape=False)
    return env.from_string(load_template(name)).render(**context)
