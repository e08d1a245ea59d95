from .defaults import DEFAULT_TEMPLATES
from .template_store import TemplateStore

__all__ = ["DEFAULT_TEMPLATES", "TemplateStore"]
