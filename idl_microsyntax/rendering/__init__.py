from .html import RenderConfig, UnknownSegmentError, idl_string_to_html, render_html

__all__ = ["RenderConfig", "UnknownSegmentError", "idl_string_to_html", "render_html"]
