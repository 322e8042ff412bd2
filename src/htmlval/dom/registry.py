# src/htmlval/dom/registry.py
import importlib
import pkgutil
import logging
import threading
from typing import List

from .core import Node, RuleDefinition, RuleFunc
from ..errors import RuleDefinitionError

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for validation rule definitions.

    Dynamically discovers and loads RuleDefinition modules from the
    'htmlval.dom.rules' package. Definitions are kept sorted by their `order`,
    so rules for a node always run in a stable, declared sequence.
    """

    _definitions: List[RuleDefinition] = []
    _loaded: bool = False
    _lock = threading.Lock()

    @classmethod
    def discover(cls) -> None:
        """
        Discovers and registers all rule definitions found in the 'htmlval.dom.rules' package.

        This method scans the package for modules containing a `DEFINITION`
        attribute (instance of `RuleDefinition`). A module that fails to import
        aborts discovery, since silently dropping a rule would under-report findings.
        Engines built from several threads share one discovery pass.
        """
        if cls._loaded:
            return

        with cls._lock:
            if cls._loaded:
                return

            import htmlval.dom.rules as rules_pkg

            definitions: List[RuleDefinition] = []
            for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
                full_name = f"htmlval.dom.rules.{name}"
                try:
                    module = importlib.import_module(full_name)
                except Exception as e:
                    logger.error(f"Error loading rule module {name}: {e}")
                    raise RuleDefinitionError(f"Could not load rule module '{name}': {e}") from e

                defn = getattr(module, "DEFINITION", None)
                if defn is None:
                    continue
                if not isinstance(defn, RuleDefinition):
                    raise RuleDefinitionError(f"Rule module '{name}' exposes an invalid DEFINITION")

                definitions.append(defn)
                logger.debug(f"Rules loaded: {defn.name} (order {defn.order}, codes {', '.join(defn.codes) or '-'})")

            # sorted() is stable: equal orders keep module discovery order.
            cls._definitions = sorted(definitions, key=lambda d: d.order)
            cls._loaded = True

    @classmethod
    def get_rules_for(cls, node: Node) -> List[RuleFunc]:
        """Returns the rule functions applicable to the given node, in execution order."""
        rules: List[RuleFunc] = []
        for defn in cls._definitions:
            if defn.applies_to(node):
                rules.extend(defn.rules)
        return rules
