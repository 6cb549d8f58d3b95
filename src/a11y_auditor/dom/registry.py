# src/a11y_auditor/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, List, Optional, Tuple

from .core import AuditRule, ElementDefinition

logger = logging.getLogger(__name__)


class DOMRegistry:
    """
    Central registry for element categories and their audit rules.

    Dynamically discovers and loads ElementDefinition modules from the
    'a11y_auditor.dom.elements' package. Discovery runs once per process;
    afterwards the registry is only read, so concurrent checks need no locking.
    """

    _definitions: Dict[str, ElementDefinition] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Discovers and registers all element definitions found in the 'a11y_auditor.dom.elements' package.

        Every module exposing a `DEFINITION` attribute (instance of `ElementDefinition`)
        contributes one category. A module that fails to import is logged and skipped.
        """
        if cls._loaded:
            return

        try:
            import a11y_auditor.dom.elements as elements_pkg

            for _, name, _ in sorted(pkgutil.iter_modules(elements_pkg.__path__), key=lambda m: m[1]):
                full_name = f"a11y_auditor.dom.elements.{name}"
                try:
                    module = importlib.import_module(full_name)
                    if hasattr(module, "DEFINITION") and isinstance(module.DEFINITION, ElementDefinition):
                        defn = module.DEFINITION
                        cls._definitions[defn.category] = defn
                        logger.debug(f"Rule set loaded: {defn.category} ({len(defn.rules)} rules)")
                except Exception as e:
                    logger.error(f"Error loading module {name}: {e}")

            cls._loaded = True
        except ImportError as e:
            logger.error(f"Could not find elements package: {e}")

    @classmethod
    def get_definition(cls, category: str) -> ElementDefinition:
        """Retrieves the definition for a category, raising KeyError for unknown ones."""
        cls.discover()
        try:
            return cls._definitions[category]
        except KeyError:
            raise KeyError(f"Unknown element category: {category!r}") from None

    @classmethod
    def get_rules(cls, category: str) -> Tuple[AuditRule, ...]:
        """Returns the rules of a category in registration order."""
        return cls.get_definition(category).rules

    @classmethod
    def get_categories(cls) -> List[str]:
        cls.discover()
        return sorted(cls._definitions)

    @classmethod
    def find_rule(cls, rule_id: str) -> Optional[AuditRule]:
        """Looks up a rule by id across all categories."""
        cls.discover()
        for defn in cls._definitions.values():
            for rule in defn.rules:
                if rule.id == rule_id:
                    return rule
        return None
