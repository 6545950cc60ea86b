"""Attribute-driven utility CSS generation."""

from twml.config.factory import TwmlConfig, get_config, load_config
from twml.core.base import GenerationResult, StyleGenerator
from twml.core.errors import ApplicationError, ConfigurationError
from twml.core.processor import AttributeProcessor, GenerationContext, generate_css
from twml.core.registry import RuleRegistry
from twml.document import AttributeChange, Document
from twml.html_document import HtmlDocument
from twml.scheduler import RegenerationScheduler
from twml.tokens import CssVariableTokenSource, NullTokenSource, StaticTokenSource

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "AttributeChange",
    "AttributeProcessor",
    "ConfigurationError",
    "CssVariableTokenSource",
    "Document",
    "GenerationContext",
    "GenerationResult",
    "HtmlDocument",
    "NullTokenSource",
    "RegenerationScheduler",
    "RuleRegistry",
    "StaticTokenSource",
    "StyleGenerator",
    "TwmlConfig",
    "generate_css",
    "get_config",
    "load_config",
]
