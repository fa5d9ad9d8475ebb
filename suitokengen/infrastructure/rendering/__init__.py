from .jinja_renderer import JinjaTemplateRenderer, get_renderer, render, render_manifest

__all__ = ["JinjaTemplateRenderer", "get_renderer", "render", "render_manifest"]
