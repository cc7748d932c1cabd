from typing import Any, Dict, Optional

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter


def beautify(html: str, options: Optional[Dict[str, Any]] = None) -> str:
    """Re-indent compiled HTML, `options` follows the `beautify` config block"""
    if not isinstance(options, dict):
        options = {}
    formatter = HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        indent=options.get("indent_size", 2),
    )
    return BeautifulSoup(html, "html.parser").prettify(formatter=formatter)
