import html
import os
import traceback
from typing import TYPE_CHECKING, Any, Dict, Optional

import markdown
import pymdownx.emoji
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from . import console, markup
from .beautify import beautify

if TYPE_CHECKING:
    from .project import Project

# Markdown configuration
MD_EXTENSIONS = [
    'pymdownx.superfences',               # ```code blocks```
    'markdown.extensions.tables',         # Tables
    'markdown.extensions.toc',            # [TOC] insertion
    'pymdownx.emoji',                     # :emoji: support
    'markdown.extensions.md_in_html'      # Markdown inside HTML blocks
]
MD_EXTENSION_CONFIGS = {
    'pymdownx.emoji': {
        'emoji_index': pymdownx.emoji.twemoji,
        'emoji_generator': pymdownx.emoji.to_svg,
    }
}


def code_block(source: str, language: str, css_class: str, options: dict, md: Any, **kwargs) -> str:
    escaped = html.escape(source, quote=False).replace("'", "&#39;").replace('"', "&quot;")
    return f'<div class="code-block"><pre>{escaped}</pre></div>'


def render_markdown(text: str, settings: Optional[Dict[str, Any]] = None) -> str:
    settings = dict(settings or {})
    extensions = MD_EXTENSIONS + [e for e in settings.pop("extensions", []) if e not in MD_EXTENSIONS]
    configs = {**MD_EXTENSION_CONFIGS, **settings.pop("extension_configs", {})}

    # Every fence goes through code_block, whatever the language
    configs["pymdownx.superfences"] = {
        **configs.get("pymdownx.superfences", {}),
        "custom_fences": [{"name": "*", "class": "code-block", "format": code_block}],
    }

    md = markdown.Markdown(extensions=extensions, extension_configs=configs, **settings)
    return md.convert(text)


def read(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


class Dialect:
    """A kind of source file and how it becomes HTML"""
    name = ""

    def compile(self, project: "Project", path: str, locals: Optional[Dict[str, Any]] = None) -> Optional[str]:
        raise NotImplementedError


class TemplateDialect(Dialect):
    name = "j2"

    def environment(self, base_path: str) -> Environment:
        return Environment(
            loader=FileSystemLoader(base_path),
            undefined=StrictUndefined,
            autoescape=False,
            cache_size=0,
            auto_reload=True,
        )

    def compile(self, project, path, locals=None):
        try:
            if not os.path.exists(path):
                return ""

            src = read(path)
            opts = project.options()

            # Configuration values win over same-named locals
            context = dict(locals or {})
            context.update(opts.config)
            context["include"] = project.include
            context["this"] = opts.config

            env = self.environment(opts.base_path)
            code = env.compile(src, name=os.path.relpath(path, opts.base_path), filename=path)
            template = env.template_class.from_code(env, code, env.make_globals(None))
            data = template.render(context)

            if opts.config.get("beautify"):
                data = beautify(data, opts.config["beautify"])

            return data
        except RecursionError:
            # Only the file that started the include chain reports the cycle
            if project.including:
                raise
            console.error(f"Template failed (compile.{self.name}): includes recurse too deeply", path)
            return None
        except Exception as e:
            console.error(f"Template failed (compile.{self.name}): {e}", path, traceback.format_exc())
            return None


class MarkdownDialect(Dialect):
    name = "md"

    def compile(self, project, path, locals=None):
        try:
            if not os.path.exists(path):
                return ""

            text = read(path)
            opts = project.options()

            data = render_markdown(text, opts.config.get("markdown"))

            # Includes first, an included fragment may carry this.* variables
            data = markup.resolve_includes(data, project.include)
            data = markup.resolve_variables(data, opts.config)

            return data
        except RecursionError:
            # Only the file that started the include chain reports the cycle
            if project.including:
                raise
            console.error(f"Markdown failed (compile.{self.name}): includes recurse too deeply", path)
            return None
        except Exception as e:
            console.error(f"Markdown failed (compile.{self.name}): {e}", path, traceback.format_exc())
            return None


class RawPassthrough(Dialect):
    name = "default"

    def compile(self, project, path, locals=None):
        try:
            if not os.path.exists(path):
                return ""
            return read(path)
        except OSError as e:
            console.error(f"Read failed (compile.{self.name}): {e}", path)
            return None


DIALECTS: Dict[str, Dialect] = {
    TemplateDialect.name: TemplateDialect(),
    MarkdownDialect.name: MarkdownDialect(),
}
RAW = RawPassthrough()
