"""
Rule registry system.

Built-in rules self-register in BUILTIN_RULES through @register_rule.
Engines mark extra rule methods with @rule; both end up in a per-engine
RuleRegistry that resolves the rule names referenced by field specs.
"""

import inspect
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Iterable, Optional

from modules.entity_validation.core.base import FieldSpec, RuleKind
from modules.entity_validation.core.exceptions import ConfigurationError
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class RuleDefinition:
    """A registered rule."""
    name: str
    func: Callable[..., Any]
    kind: RuleKind = RuleKind.VALIDATOR
    extra_args: int = 0  # Arguments passed after (field_name, value)


# Global registry of built-in rules. Functions take the engine first.
BUILTIN_RULES: Dict[str, RuleDefinition] = {}


def register_rule(name: str, kind: RuleKind = RuleKind.VALIDATOR, extra_args: int = 0):
    """
    Decorator to register a built-in rule.

    Usage:
        @register_rule("isNotEmpty")
        def is_not_empty(engine, field_name, value):
            ...

    Args:
        name: Rule name referenced by field specs
        kind: Validator or pre-processor
        extra_args: Number of arguments after (field_name, value)

    Returns:
        Decorator function
    """
    def decorator(func: Callable[..., Any]):
        if name in BUILTIN_RULES:
            logger.warning(
                f"Rule '{name}' is already registered. "
                f"Overwriting with {func.__name__}"
            )

        _check_signature(name, func, 3 + extra_args)
        BUILTIN_RULES[name] = RuleDefinition(name, func, RuleKind(kind), extra_args)
        logger.debug(f"Registered built-in rule: {name} -> {func.__name__}")
        return func

    return decorator


def rule(name: str, kind: RuleKind = RuleKind.VALIDATOR, extra_args: int = 0):
    """
    Mark an engine method as a rule.

    The method is bound and registered when the engine is instantiated.

    Usage:
        class ArticleValidator(ValidationEngine):
            @rule("isCapitalized")
            def is_capitalized(self, field_name, value):
                ...
    """
    def decorator(func: Callable[..., Any]):
        func._rule_definition = (name, RuleKind(kind), extra_args)
        return func

    return decorator


def _check_signature(name: str, func: Callable[..., Any], arg_count: int) -> None:
    """Fail fast when a rule cannot be called with the pipeline's arguments."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; accept them as-is
        return

    try:
        signature.bind(*([None] * arg_count))
    except TypeError as e:
        raise ConfigurationError(
            f"Rule '{name}' cannot accept {arg_count} positional arguments: {e}"
        )


class RuleRegistry:
    """
    Per-engine table of rule name -> callable.

    Callables take (field_name, value, *extra). Validators report through
    the engine's set_error and return nothing; pre-processors return the
    (possibly transformed) value.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, RuleDefinition] = {}

    def register(
        self,
        name: str,
        func: Callable[..., Any],
        kind: RuleKind = RuleKind.VALIDATOR,
        extra_args: int = 0
    ) -> None:
        """
        Register a rule callable.

        Raises:
            ConfigurationError: If func is not callable or has a wrong signature
        """
        if not callable(func):
            raise ConfigurationError(f"Rule '{name}' is not callable: {func!r}")

        _check_signature(name, func, 2 + extra_args)

        if name in self._rules:
            logger.warning(f"Rule '{name}' already registered, overwriting")

        self._rules[name] = RuleDefinition(name, func, RuleKind(kind), extra_args)
        logger.debug(f"Registered rule: {name} ({RuleKind(kind).value})")

    def unregister(self, name: str) -> bool:
        """
        Unregister a rule by name.

        Returns:
            True if removed, False if not found
        """
        return self._rules.pop(name, None) is not None

    def get(self, name: str) -> Optional[RuleDefinition]:
        """Get a rule definition by name."""
        return self._rules.get(name)

    def is_registered(self, name: str) -> bool:
        return name in self._rules

    def list_rules(self) -> Dict[str, str]:
        """
        List all registered rules.

        Returns:
            Dictionary mapping rule names to their kind
        """
        return {name: definition.kind.value for name, definition in self._rules.items()}

    def resolve(self, name: str, kind: Optional[RuleKind] = None) -> Callable[..., Any]:
        """
        Resolve a rule name to its callable.

        Args:
            name: Rule name
            kind: Expected kind, checked when given. Rules resolved by kind
                  are called with (field_name, value) only

        Returns:
            The rule callable

        Raises:
            ConfigurationError: Unknown rule, a rule of the wrong kind, or a
                                rule needing extra arguments resolved by kind
        """
        definition = self._rules.get(name)

        if definition is None:
            available = sorted(self._rules.keys())
            raise ConfigurationError(
                f"Rule '{name}' not registered. Available: {available}"
            )

        if kind is not None and definition.kind != kind:
            raise ConfigurationError(
                f"Rule '{name}' is a {definition.kind.value}, "
                f"cannot be used as a {RuleKind(kind).value}"
            )

        if kind is not None and definition.extra_args:
            raise ConfigurationError(
                f"Rule '{name}' takes {definition.extra_args} extra argument(s) "
                f"and cannot be listed as a {RuleKind(kind).value}"
            )

        return definition.func

    def check_fields(self, specs: Iterable[FieldSpec]) -> None:
        """
        Resolve every rule referenced by the given field specs.

        Raises:
            ConfigurationError: On the first unresolvable reference
        """
        for spec in specs:
            for name in spec.preprocessors:
                self.resolve(name, RuleKind.PREPROCESSOR)
            for name in spec.validators:
                self.resolve(name, RuleKind.VALIDATOR)

    def bind_builtins(self, context: Any) -> None:
        """Register every built-in rule bound to the given engine."""
        for definition in BUILTIN_RULES.values():
            self.register(
                definition.name,
                partial(definition.func, context),
                definition.kind,
                definition.extra_args
            )

    def bind_methods(self, instance: Any) -> None:
        """Register every method of instance marked with @rule."""
        for attr_name in dir(type(instance)):
            member = getattr(type(instance), attr_name, None)
            marker = getattr(member, "_rule_definition", None)
            if marker is None:
                continue

            name, kind, extra_args = marker
            self.register(name, getattr(instance, attr_name), kind, extra_args)
